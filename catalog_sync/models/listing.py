"""Listing item - one product summary from a category page."""

from dataclasses import dataclass


@dataclass
class ListingItem:
    """A product as shown on the category listing."""

    sku: str
    link: str  # Relative to the source domain, e.g. "/product/blue-mug"
    name: str
    price_minor: int  # Price in minor units (cents)

    @classmethod
    def from_attributes(
        cls,
        attrs: dict[str, str],
        sku_attr: str = "sku",
        link_attr: str = "href",
        name_attr: str = "name",
        price_attr: str = "price",
    ) -> "ListingItem":
        """Build from the attributes of a listing element.

        Raises KeyError if an attribute is missing, ValueError if the price
        is not an integer.
        """
        return cls(
            sku=attrs[sku_attr],
            link=attrs[link_attr],
            name=attrs[name_attr],
            price_minor=int(attrs[price_attr]),
        )
