"""Listing walker - paginate a category until the site answers 404."""

import logging
from typing import Iterator

from bs4 import BeautifulSoup

from ..clients.browser import NOT_FOUND
from ..config import Settings
from ..models import ListingItem

logger = logging.getLogger(__name__)


class ListingWalker:
    """Walk category pages 1, 2, 3, ... yielding one batch of items per page."""

    def __init__(self, browser, settings: Settings):
        self.browser = browser
        self.settings = settings

    def page_url(self, page_number: int) -> str:
        return f"{self.settings.source_domain}{self.settings.listing_path}?page={page_number}"

    def iter_pages(self) -> Iterator[list[ListingItem]]:
        """
        Yield the items of each listing page, in page order.

        Stops at the first 404. Any other status is treated as a rendered
        page; if its items never appear, the browser's wait times out and
        the error propagates.
        """
        page_number = self.settings.start_page
        pages_read = 0

        while self.settings.max_pages is None or pages_read < self.settings.max_pages:
            url = self.page_url(page_number)
            status, html = self.browser.load_listing(url, self.settings.listing_item_selector)
            if status == NOT_FOUND:
                logger.info(f"Page {page_number} not found, end of catalog")
                return

            items = self.parse_items(html)
            logger.info(f"Page {page_number}: {len(items)} items")
            yield items

            pages_read += 1
            page_number += 1

    def parse_items(self, html: str) -> list[ListingItem]:
        """Parse listing elements into items, in document order."""
        soup = BeautifulSoup(html, "html.parser")
        items = []
        for element in soup.select(self.settings.listing_item_selector):
            attrs = {
                name: " ".join(value) if isinstance(value, list) else value
                for name, value in element.attrs.items()
            }
            items.append(
                ListingItem.from_attributes(
                    attrs,
                    sku_attr=self.settings.listing_attr_sku,
                    link_attr=self.settings.listing_attr_link,
                    name_attr=self.settings.listing_attr_name,
                    price_attr=self.settings.listing_attr_price,
                )
            )
        return items
