"""Publisher service - turn an extracted product into a WooCommerce product."""

import logging

from ..clients.wordpress import WordPressClient
from ..errors import PublishError
from ..models import (
    DownloadedImage,
    ListingItem,
    ProductDetail,
    PublishedProduct,
    PublishStage,
    TranslatedFields,
)
from ..utils import regular_price
from .images import ImageService
from .translation import TranslationService

logger = logging.getLogger(__name__)


def build_product(
    item: ListingItem,
    translated: TranslatedFields,
    images: list[DownloadedImage],
) -> PublishedProduct:
    """Assemble the outbound record. Image records keep the order of images."""
    return PublishedProduct(
        name=translated.title,
        regular_price=regular_price(item.price_minor),
        description=translated.description,
        short_description=translated.highlights,
        source_sku=item.sku,
        images=[image.remote for image in images],
    )


def created_id(response) -> int | None:
    """Return the created product id if the response carries a positive integer one."""
    if not isinstance(response, dict):
        return None
    product_id = response.get("id")
    if isinstance(product_id, bool) or not isinstance(product_id, int):
        return None
    return product_id if product_id > 0 else None


class PublisherService:
    """Run the publish steps for one product, each step gating the next.

    PENDING -> IMAGES_FETCHED -> IMAGES_UPLOADED -> TRANSLATED -> SUBMITTED -> PROCESSED

    Local image files are removed only after the product is created.
    """

    def __init__(
        self,
        wordpress: WordPressClient,
        images: ImageService,
        translation: TranslationService,
    ):
        self.wordpress = wordpress
        self.images = images
        self.translation = translation

    def publish(self, item: ListingItem, detail: ProductDetail) -> int:
        """
        Publish one product and return its WooCommerce id.

        Raises:
            PublishError: If the creation response has no positive integer id.
                Local images are left in place.
        """
        self._advance(item, PublishStage.PENDING)

        downloaded = self.images.download_all(detail.images)
        self._advance(item, PublishStage.IMAGES_FETCHED)

        uploaded = self.images.upload_all(downloaded)
        self._advance(item, PublishStage.IMAGES_UPLOADED)

        translated = self.translation.translate(item, detail)
        self._advance(item, PublishStage.TRANSLATED)

        product = build_product(item, translated, uploaded)
        response = self.wordpress.create_product(product.to_form())
        self._advance(item, PublishStage.SUBMITTED)

        product_id = created_id(response)
        if product_id is None:
            raise PublishError(f"Product creation for {item.sku} returned no id", response)

        self.images.cleanup(uploaded)
        self._advance(item, PublishStage.PROCESSED)
        return product_id

    def _advance(self, item: ListingItem, stage: PublishStage) -> None:
        logger.info(f"[{item.sku}] {stage.value}")
