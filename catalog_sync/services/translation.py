"""Translation service - one LLM call per product text field."""

from ..clients.llm import LLMClient
from ..models import ListingItem, ProductDetail, TranslatedFields
from ..utils import ordered_map


class TranslationService:
    """Translate title, highlights and description with a fixed system prompt."""

    def __init__(self, llm: LLMClient, system_prompt: str, max_workers: int = 1):
        self.llm = llm
        self.system_prompt = system_prompt
        self.max_workers = max_workers

    def translate(self, item: ListingItem, detail: ProductDetail) -> TranslatedFields:
        """
        Translate the three text fields of a product.

        Three independent calls, no batching and no caching between items.
        """
        fields = [
            ("title", item.name),
            ("highlights", detail.highlights_html),
            ("description", detail.description_html),
        ]
        title, highlights, description = ordered_map(
            lambda field: self.llm.call(self.system_prompt, field[1], label=field[0].upper()),
            fields,
            self.max_workers,
        )
        return TranslatedFields(title=title, highlights=highlights, description=description)
