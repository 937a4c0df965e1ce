"""Tests for image transfer, translation and product publishing."""

import threading

import pytest
import requests

from catalog_sync.errors import DownloadError, PublishError, UploadError
from catalog_sync.models import DownloadedImage, ListingItem, ProductDetail, TranslatedFields
from catalog_sync.services import ImageService, PublisherService, TranslationService
from catalog_sync.services.publisher import build_product, created_id

from conftest import FakeLLM, FakeStreamResponse, FakeWordPress

ITEM = ListingItem(sku="SKU-1", link="/product/blue-mug", name="Blue Mug", price_minor=500)
DETAIL = ProductDetail(
    images=["https://cdn.test/img/a.jpg", "https://cdn.test/img/b.jpg", "https://cdn.test/img/c.jpg"],
    highlights_html="<ul><li>Sturdy</li></ul>",
    description_html="<p>A mug.</p>",
)


def make_publisher(settings, wordpress, llm=None):
    images = ImageService(wordpress, settings.images_dir, settings.user_agent, settings.workers)
    translation = TranslationService(llm or FakeLLM(), "Translate to French.", settings.workers)
    return PublisherService(wordpress, images, translation)


# ---------------------------------------------------------------------------
# Record assembly
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("price_minor, expected", [(500, "105"), (0, "100"), (1999, "119.99")])
def test_price_transform(price_minor, expected):
    item = ListingItem(sku="S", link="/p", name="n", price_minor=price_minor)
    product = build_product(item, TranslatedFields("t", "h", "d"), [])
    assert product.to_payload()["regular_price"] == expected


def test_build_product_payload():
    images = [
        DownloadedImage(name="a.jpg", path=None, remote={"id": 11}),
        DownloadedImage(name="b.jpg", path=None, remote={"id": 12}),
    ]
    product = build_product(ITEM, TranslatedFields("Tasse bleue", "<ul>Solide</ul>", "<p>Une tasse.</p>"), images)

    assert product.to_payload() == {
        "name": "Tasse bleue",
        "type": "simple",
        "regular_price": "105",
        "description": "<p>Une tasse.</p>",
        "short_description": "<ul>Solide</ul>",
        "stock_status": "instock",
        "meta_data": [{"key": "original", "value": "SKU-1"}],
        "images": [{"id": 11}, {"id": 12}],
    }
    form = dict(product.to_form())
    assert form["meta_data[0][key]"] == "original"
    assert form["meta_data[0][value]"] == "SKU-1"
    assert form["images[1][id]"] == "12"


@pytest.mark.parametrize(
    "response, expected",
    [({"id": 42}, 42), ({}, None), ({"id": 0}, None), ({"id": "42"}, None), ({"id": True}, None), ([], None)],
)
def test_created_id(response, expected):
    assert created_id(response) == expected


# ---------------------------------------------------------------------------
# Publishing
# ---------------------------------------------------------------------------

def test_publish_success_cleans_up_images(settings, fake_downloads):
    wordpress = FakeWordPress({"id": 42})
    llm = FakeLLM()

    product_id = make_publisher(settings, wordpress, llm).publish(ITEM, DETAIL)

    assert product_id == 42
    assert fake_downloads == DETAIL.images
    assert wordpress.uploads == ["a.jpg", "b.jpg", "c.jpg"]
    assert list(settings.images_dir.iterdir()) == []

    form = dict(wordpress.forms[0])
    assert form["name"] == "FR:Blue Mug"
    assert form["short_description"] == "FR:<ul><li>Sturdy</li></ul>"
    assert form["description"] == "FR:<p>A mug.</p>"
    assert form["regular_price"] == "105"
    assert [call[0] for call in llm.calls] == ["Translate to French."] * 3


def test_publish_without_id_keeps_local_images(settings, fake_downloads):
    wordpress = FakeWordPress({})

    with pytest.raises(PublishError) as excinfo:
        make_publisher(settings, wordpress).publish(ITEM, DETAIL)

    assert excinfo.value.response == {}
    assert sorted(p.name for p in settings.images_dir.iterdir()) == ["a.jpg", "b.jpg", "c.jpg"]


class RejectingWordPress(FakeWordPress):
    def upload_media(self, image_data, filename):
        raise requests.HTTPError("413 Request Entity Too Large")


def test_upload_failure_raises_and_submits_nothing(settings, fake_downloads):
    wordpress = RejectingWordPress()
    llm = FakeLLM()

    with pytest.raises(UploadError, match="a.jpg"):
        make_publisher(settings, wordpress, llm).publish(ITEM, DETAIL)

    assert wordpress.forms == []
    assert llm.calls == []


def test_duplicate_image_names_rejected_before_download(settings, fake_downloads):
    images = ImageService(FakeWordPress(), settings.images_dir, settings.user_agent)

    with pytest.raises(DownloadError, match="main.jpg"):
        images.download_all(["https://cdn.test/1/main.jpg", "https://cdn.test/2/main.jpg"])
    assert fake_downloads == []


def test_url_without_file_name_raises_download_error(settings, fake_downloads):
    images = ImageService(FakeWordPress(), settings.images_dir, settings.user_agent)

    with pytest.raises(DownloadError, match="Cannot name image"):
        images.download("https://cdn.test/")


def test_download_failure_raises(settings, monkeypatch):
    monkeypatch.setattr(
        "catalog_sync.services.images.requests.get",
        lambda url, **kwargs: FakeStreamResponse(b"", status_code=500),
    )
    wordpress = FakeWordPress()

    with pytest.raises(DownloadError):
        make_publisher(settings, wordpress).publish(ITEM, DETAIL)
    assert wordpress.forms == []


def test_downloaded_file_named_by_url_basename(settings, fake_downloads):
    images = ImageService(FakeWordPress(), settings.images_dir, settings.user_agent)
    image = images.download("https://cdn.test/img/mug-1.jpg?w=800")

    assert image.name == "mug-1.jpg"
    assert image.path.read_bytes() == b"https://cdn.test/img/mug-1.jpg?w=800"


class OutOfOrderWordPress(FakeWordPress):
    """Completes uploads in reverse order: c, then b, then a."""

    def __init__(self):
        super().__init__({"id": 42})
        self.done = {name: threading.Event() for name in ("a.jpg", "b.jpg", "c.jpg")}
        self.completed: list[str] = []
        self._lock = threading.Lock()

    def upload_media(self, image_data, filename):
        waits_for = {"a.jpg": "b.jpg", "b.jpg": "c.jpg"}.get(filename)
        if waits_for:
            assert self.done[waits_for].wait(timeout=5)
        with self._lock:
            self.completed.append(filename)
        self.done[filename].set()
        return {"id": {"a.jpg": 1, "b.jpg": 2, "c.jpg": 3}[filename]}


def test_image_order_survives_out_of_order_uploads(settings, fake_downloads):
    settings.workers = 3
    wordpress = OutOfOrderWordPress()

    make_publisher(settings, wordpress).publish(ITEM, DETAIL)

    assert wordpress.completed == ["c.jpg", "b.jpg", "a.jpg"]
    form = dict(wordpress.forms[0])
    assert [form[f"images[{i}][id]"] for i in range(3)] == ["1", "2", "3"]


def test_translation_calls_run_concurrently_in_order(settings):
    llm = FakeLLM()
    translated = TranslationService(llm, "prompt", max_workers=3).translate(ITEM, DETAIL)

    assert translated == TranslatedFields(
        title="FR:Blue Mug",
        highlights="FR:<ul><li>Sturdy</li></ul>",
        description="FR:<p>A mug.</p>",
    )
    assert len(llm.calls) == 3
