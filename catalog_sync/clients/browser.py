"""Headless browser session (Playwright) used to render source pages."""

import logging

from playwright.sync_api import sync_playwright

logger = logging.getLogger(__name__)

NOT_FOUND = 404


class BrowserClient:
    """One Chromium session with two reusable pages: listing and product.

    Use as a context manager:

        with BrowserClient(user_agent=...) as browser:
            status, html = browser.load_listing(url, ".product-tile")
    """

    def __init__(self, user_agent: str, headless: bool = True, timeout_ms: int = 60000):
        self.user_agent = user_agent
        self.headless = headless
        self.timeout_ms = timeout_ms
        self._playwright = None
        self._browser = None
        self._listing_page = None
        self._product_page = None

    def __enter__(self) -> "BrowserClient":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def start(self) -> None:
        self._playwright = sync_playwright().start()
        self._browser = self._playwright.chromium.launch(headless=self.headless)
        context = self._browser.new_context(user_agent=self.user_agent)
        context.set_default_timeout(self.timeout_ms)
        self._listing_page = context.new_page()
        self._product_page = context.new_page()
        logger.debug(f"Browser started (headless={self.headless})")

    def close(self) -> None:
        if self._browser is not None:
            self._browser.close()
            self._browser = None
        if self._playwright is not None:
            self._playwright.stop()
            self._playwright = None

    def load_listing(self, url: str, item_selector: str) -> tuple[int | None, str]:
        """
        Load a category page and wait for its items to render.

        Returns:
            (status, html). On 404 the html is empty and no wait happens.
            Status is None if the navigation produced no response.
        """
        response = self._listing_page.goto(url, wait_until="networkidle")
        status = response.status if response else None
        logger.debug(f"GET {url} -> {status}")
        if status == NOT_FOUND:
            return status, ""

        self._listing_page.wait_for_selector(item_selector)
        return status, self._listing_page.content()

    def load_product(self, url: str) -> str:
        """Load a product page and return its rendered HTML."""
        response = self._product_page.goto(url, wait_until="networkidle")
        logger.debug(f"GET {url} -> {response.status if response else None}")
        return self._product_page.content()
