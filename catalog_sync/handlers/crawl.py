"""Catalog crawl - walk the listing and publish every product not yet in the ledger."""

import logging

import openai
import requests

from ..clients import BrowserClient, LLMClient, WordPressClient
from ..config import Settings
from ..errors import CatalogSyncError, PublishError
from ..models import CrawlSummary, ItemResult, ItemStatus, Ledger, ListingItem
from ..services import (
    ImageService,
    ListingWalker,
    ProductExtractor,
    PublisherService,
    TranslationService,
)

logger = logging.getLogger(__name__)

# Failures isolated to a single item; anything else propagates.
ITEM_ERRORS = (CatalogSyncError, requests.RequestException, openai.OpenAIError, OSError)


class CatalogCrawler:
    """Drive the listing walk and the per-item pipeline.

    The ledger is updated only after an item is fully published, so a failure
    at any step leaves persisted state untouched.

    on_failure:
        "stop" - log the failure and exit the process with status 1
        "skip" - log the failure and continue with the next item
    """

    def __init__(
        self,
        walker: ListingWalker,
        extractor: ProductExtractor,
        publisher: PublisherService,
        ledger: Ledger,
        on_failure: str = "stop",
    ):
        self.walker = walker
        self.extractor = extractor
        self.publisher = publisher
        self.ledger = ledger
        self.on_failure = on_failure

    def run(self) -> CrawlSummary:
        summary = CrawlSummary()
        for items in self.walker.iter_pages():
            summary.pages += 1
            for item in items:
                if self.ledger.is_processed(item.sku):
                    logger.debug(f"[{item.sku}] already processed, skipping")
                    summary.record(ItemResult(sku=item.sku, status=ItemStatus.SKIPPED))
                    continue

                result = self.process_item(item)
                summary.record(result)
                if not result.ok:
                    self._handle_failure(result)

        logger.info(
            f"Crawl finished: {summary.pages} pages, {summary.processed} published, "
            f"{summary.skipped} skipped, {summary.failed} failed"
        )
        return summary

    def process_item(self, item: ListingItem) -> ItemResult:
        """Extract, publish and record one item. Never touches the ledger on failure."""
        try:
            detail = self.extractor.extract(item)
            product_id = self.publisher.publish(item, detail)
        except PublishError as e:
            return ItemResult(
                sku=item.sku, status=ItemStatus.FAILED, error=str(e), response=e.response
            )
        except ITEM_ERRORS as e:
            return ItemResult(sku=item.sku, status=ItemStatus.FAILED, error=str(e))

        self.ledger.mark_processed(item.sku)
        logger.info(f"[{item.sku}] published as product {product_id}")
        return ItemResult(sku=item.sku, status=ItemStatus.PROCESSED, product_id=product_id)

    def _handle_failure(self, result: ItemResult) -> None:
        logger.error(f"[{result.sku}] failed: {result.error}")
        if result.response is not None:
            logger.error(f"[{result.sku}] response: {result.response!r}")

        if self.on_failure == "stop":
            raise SystemExit(1)


def build_crawler(settings: Settings, browser: BrowserClient) -> CatalogCrawler:
    """Wire clients and services for a crawl using an already started browser."""
    wordpress = WordPressClient(
        settings.wp_base_url,
        settings.wp_username,
        settings.wp_app_password,
        settings.wc_consumer_key,
        settings.wc_consumer_secret,
    )
    llm = LLMClient(api_key=settings.openai_api_key, model=settings.openai_model)

    images = ImageService(
        wordpress,
        images_dir=settings.images_dir,
        user_agent=settings.user_agent,
        max_workers=settings.workers,
    )
    translation = TranslationService(llm, settings.translation_prompt, max_workers=settings.workers)
    publisher = PublisherService(wordpress, images, translation)

    return CatalogCrawler(
        walker=ListingWalker(browser, settings),
        extractor=ProductExtractor(browser, settings),
        publisher=publisher,
        ledger=Ledger.load(settings.ledger_path),
        on_failure=settings.on_failure,
    )


def crawl(settings: Settings) -> CrawlSummary:
    """Open a browser session and crawl the whole catalog."""
    with BrowserClient(user_agent=settings.user_agent, headless=settings.headless) as browser:
        crawler = build_crawler(settings, browser)
        logger.info(f"Ledger has {len(crawler.ledger)} processed products")
        try:
            return crawler.run()
        finally:
            total_input, total_output = crawler.publisher.translation.llm.get_token_totals()
            logger.info(f"Token totals: input={total_input}, output={total_output}")
