"""Data models."""

from .ledger import Ledger
from .listing import ListingItem
from .product import DownloadedImage, ProductDetail, TranslatedFields
from .published import PublishedProduct
from .result import CrawlSummary, ItemResult, ItemStatus, PublishStage

__all__ = [
    "CrawlSummary",
    "DownloadedImage",
    "ItemResult",
    "ItemStatus",
    "Ledger",
    "ListingItem",
    "ProductDetail",
    "PublishStage",
    "PublishedProduct",
    "TranslatedFields",
]
