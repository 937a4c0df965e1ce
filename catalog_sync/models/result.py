"""Outcome of one item's pipeline and of a whole crawl."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ItemStatus(Enum):
    PROCESSED = "processed"
    SKIPPED = "skipped"  # Already in the ledger
    FAILED = "failed"


class PublishStage(Enum):
    """Progress of one item. There is no transition back to PENDING."""

    PENDING = "pending"
    IMAGES_FETCHED = "images_fetched"
    IMAGES_UPLOADED = "images_uploaded"
    TRANSLATED = "translated"
    SUBMITTED = "submitted"
    PROCESSED = "processed"


@dataclass
class ItemResult:
    sku: str
    status: ItemStatus
    product_id: int | None = None
    error: str | None = None
    response: Any = None  # Raw endpoint response, kept for publish failures

    @property
    def ok(self) -> bool:
        return self.status != ItemStatus.FAILED


@dataclass
class CrawlSummary:
    pages: int = 0
    processed: int = 0
    skipped: int = 0
    failed: int = 0

    def record(self, result: ItemResult) -> None:
        if result.status == ItemStatus.PROCESSED:
            self.processed += 1
        elif result.status == ItemStatus.SKIPPED:
            self.skipped += 1
        else:
            self.failed += 1
