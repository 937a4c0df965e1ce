"""Per-item product models, created and discarded within one item's pipeline."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class ProductDetail:
    """Data read from a product detail page."""

    images: list[str]  # Image URLs, in page order
    highlights_html: str
    description_html: str


@dataclass
class DownloadedImage:
    """An image fetched to local disk, then uploaded to the media library."""

    name: str
    path: Path
    remote: dict = field(default_factory=dict)  # Media endpoint response, empty until uploaded


@dataclass
class TranslatedFields:
    title: str
    highlights: str
    description: str
