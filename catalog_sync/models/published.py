"""Published product - outbound record for the product-creation endpoint."""

from dataclasses import dataclass, field

from ..utils import format_price, to_form_pairs


@dataclass
class PublishedProduct:
    """A translated product ready to be created in WooCommerce."""

    name: str
    regular_price: float
    description: str
    short_description: str
    source_sku: str
    images: list[dict] = field(default_factory=list)  # Media records, in source order
    type: str = "simple"
    stock_status: str = "instock"

    def to_payload(self) -> dict:
        """Return the nested payload, keys as the products endpoint expects."""
        return {
            "name": self.name,
            "type": self.type,
            "regular_price": format_price(self.regular_price),
            "description": self.description,
            "short_description": self.short_description,
            "stock_status": self.stock_status,
            "meta_data": [{"key": "original", "value": self.source_sku}],
            "images": list(self.images),
        }

    def to_form(self) -> list[tuple[str, str]]:
        """Return the payload flattened to form fields in bracket notation."""
        return to_form_pairs(self.to_payload())
