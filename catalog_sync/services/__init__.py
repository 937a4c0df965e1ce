"""Business logic services."""

from .extractor import ProductExtractor
from .images import ImageService
from .listing import ListingWalker
from .publisher import PublisherService
from .translation import TranslationService

__all__ = [
    "ImageService",
    "ListingWalker",
    "ProductExtractor",
    "PublisherService",
    "TranslationService",
]
