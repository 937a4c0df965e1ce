"""Product extractor - read images and HTML fragments from a product page."""

import json

from bs4 import BeautifulSoup

from ..config import Settings
from ..errors import ExtractionError
from ..models import ListingItem, ProductDetail


class ProductExtractor:
    """Extract a ProductDetail from a rendered product page.

    Images come from the embedded structured-data block (the <script> whose
    text contains the configured marker). Highlights and description are the
    inner HTML of the first element carrying each configured class.
    """

    def __init__(self, browser, settings: Settings):
        self.browser = browser
        self.settings = settings

    def extract(self, item: ListingItem) -> ProductDetail:
        html = self.browser.load_product(f"{self.settings.source_domain}{item.link}")
        return self.parse(html)

    def parse(self, html: str) -> ProductDetail:
        soup = BeautifulSoup(html, "html.parser")
        metadata = self._structured_data(soup)

        images = metadata.get("image")
        if isinstance(images, str):
            images = [images]
        if not isinstance(images, list):
            raise ExtractionError("Structured data has no image list")

        return ProductDetail(
            images=[str(url) for url in images],
            highlights_html=self._inner_html(soup, self.settings.highlights_class),
            description_html=self._inner_html(soup, self.settings.description_class),
        )

    def _structured_data(self, soup: BeautifulSoup) -> dict:
        marker = self.settings.structured_data_marker
        for script in soup.find_all("script"):
            text = script.string or script.get_text()
            if marker in text:
                try:
                    data = json.loads(text)
                except json.JSONDecodeError as e:
                    raise ExtractionError(f"Structured data is not valid JSON: {e}")
                if not isinstance(data, dict):
                    raise ExtractionError("Structured data is not a JSON object")
                return data
        raise ExtractionError(f"No script containing {marker!r}")

    def _inner_html(self, soup: BeautifulSoup, class_name: str) -> str:
        element = soup.find(class_=class_name)
        if element is None:
            raise ExtractionError(f"No element with class {class_name!r}")
        return element.decode_contents()
