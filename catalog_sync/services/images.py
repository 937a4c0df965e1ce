"""Image service - download product images locally, upload them to the media library."""

import logging
from pathlib import Path

import requests

from ..clients.wordpress import WordPressClient
from ..errors import DownloadError, UploadError
from ..models import DownloadedImage
from ..utils import basename_from_url, ordered_map

logger = logging.getLogger(__name__)


class ImageService:
    """Move product images from the source site to WordPress via local files."""

    def __init__(
        self,
        wordpress: WordPressClient,
        images_dir: Path,
        user_agent: str,
        max_workers: int = 1,
    ):
        self.wordpress = wordpress
        self.images_dir = Path(images_dir)
        self.user_agent = user_agent
        self.max_workers = max_workers

    def download_all(self, urls: list[str]) -> list[DownloadedImage]:
        """Download every URL to images_dir. Result order matches urls.

        Raises DownloadError before fetching anything if two URLs map to the
        same local file name.
        """
        seen: dict[str, str] = {}
        for url in urls:
            name = self._local_name(url)
            if name in seen:
                raise DownloadError(f"Images {seen[name]} and {url} share the file name {name!r}")
            seen[name] = url

        self.images_dir.mkdir(parents=True, exist_ok=True)
        images = ordered_map(self.download, urls, self.max_workers)
        logger.info(f"Downloaded {len(images)} images")
        return images

    def download(self, url: str) -> DownloadedImage:
        """Stream one image to disk, named by the URL's basename."""
        name = self._local_name(url)
        path = self.images_dir / name
        headers = {"User-Agent": self.user_agent}
        try:
            with requests.get(url, headers=headers, stream=True, timeout=30) as response:
                response.raise_for_status()
                with open(path, "wb") as f:
                    for chunk in response.iter_content(chunk_size=8192):
                        f.write(chunk)
        except requests.RequestException as e:
            raise DownloadError(f"Failed to download image from {url}: {e}")
        return DownloadedImage(name=name, path=path)

    def _local_name(self, url: str) -> str:
        try:
            return basename_from_url(url)
        except ValueError as e:
            raise DownloadError(f"Cannot name image from {url}: {e}")

    def upload_all(self, images: list[DownloadedImage]) -> list[DownloadedImage]:
        """Upload every image, filling in its remote record. Order is preserved."""
        uploaded = ordered_map(self.upload, images, self.max_workers)
        logger.info(f"Uploaded {len(uploaded)} images")
        return uploaded

    def upload(self, image: DownloadedImage) -> DownloadedImage:
        image_data = image.path.read_bytes()
        try:
            image.remote = self.wordpress.upload_media(image_data, image.name)
        except requests.RequestException as e:
            raise UploadError(f"Failed to upload {image.name}: {e}")
        return image

    def cleanup(self, images: list[DownloadedImage]) -> None:
        """Delete the local copies. Files already gone are ignored."""
        for image in images:
            image.path.unlink(missing_ok=True)
        logger.debug(f"Removed {len(images)} local images")
