"""Shared fakes: no browser, network or LLM is touched by the tests."""

import pytest

from catalog_sync.config import Settings

DOMAIN = "https://shop.test"


def listing_html(*items) -> str:
    """Listing page with one tile per (sku, href, name, price) tuple."""
    tiles = "\n".join(
        f'<div class="product-tile" sku="{sku}" href="{href}" name="{name}" price="{price}"></div>'
        for sku, href, name, price in items
    )
    return f"<html><body><section class='grid'>{tiles}</section></body></html>"


def product_html(
    images=("https://cdn.test/img/a.jpg", "https://cdn.test/img/b.jpg"),
    highlights="<ul><li>Sturdy</li></ul>",
    description="<p>A mug.</p>",
) -> str:
    image_json = ", ".join(f'"{url}"' for url in images)
    return f"""<html><head>
<script>window.dataLayer = [];</script>
<script type="application/ld+json">{{"@context":"https://schema.org","@type":"Product","image":[{image_json}]}}</script>
</head><body>
<div class="product-highlights">{highlights}</div>
<div class="product-description">{description}</div>
</body></html>"""


class FakeBrowser:
    """Serves listing pages by number and product pages by URL."""

    def __init__(self, listing_pages: dict[int, str], product_pages: dict[str, str] | None = None):
        self.listing_pages = listing_pages
        self.product_pages = product_pages or {}
        self.listing_requests: list[str] = []
        self.product_requests: list[str] = []

    def load_listing(self, url: str, item_selector: str):
        self.listing_requests.append(url)
        page_number = int(url.rsplit("page=", 1)[1])
        if page_number not in self.listing_pages:
            return 404, ""
        return 200, self.listing_pages[page_number]

    def load_product(self, url: str) -> str:
        self.product_requests.append(url)
        return self.product_pages[url]


class FakeWordPress:
    """Records uploads and product forms; returns a configurable creation response."""

    def __init__(self, create_response=None):
        self.create_response = {"id": 42} if create_response is None else create_response
        self.uploads: list[str] = []
        self.forms: list[list[tuple[str, str]]] = []

    def upload_media(self, image_data: bytes, filename: str) -> dict:
        self.uploads.append(filename)
        return {"id": len(self.uploads) + 100, "source_url": f"https://cms.test/uploads/{filename}"}

    def create_product(self, form):
        self.forms.append(form)
        return self.create_response


class FakeLLM:
    def __init__(self):
        self.calls: list[tuple[str, str]] = []

    def call(self, system_prompt: str, user_message: str, label: str = "") -> str:
        self.calls.append((system_prompt, user_message))
        return f"FR:{user_message}"


class FakeStreamResponse:
    """Stand-in for a streamed requests.Response."""

    def __init__(self, content: bytes, status_code: int = 200):
        self.content = content
        self.status_code = status_code

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def raise_for_status(self):
        if self.status_code >= 400:
            import requests

            raise requests.HTTPError(f"{self.status_code} Error")

    def iter_content(self, chunk_size=8192):
        for i in range(0, len(self.content), chunk_size):
            yield self.content[i:i + chunk_size]


@pytest.fixture
def settings(tmp_path):
    return Settings(
        source_domain=DOMAIN,
        listing_path="/product/page/",
        listing_item_selector=".product-tile",
        ledger_path=tmp_path / "memory.txt",
        images_dir=tmp_path / "images",
        on_failure="stop",
        workers=1,
    )


@pytest.fixture
def fake_downloads(monkeypatch):
    """Make image downloads return the URL's bytes instead of hitting the network."""
    requested = []

    def fake_get(url, headers=None, stream=False, timeout=None):
        requested.append(url)
        return FakeStreamResponse(url.encode())

    monkeypatch.setattr("catalog_sync.services.images.requests.get", fake_get)
    return requested
