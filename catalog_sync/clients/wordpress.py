"""WordPress / WooCommerce REST API client."""

import mimetypes

import requests


class WordPressClient:
    """Low-level client for the WordPress media and WooCommerce product endpoints.

    Media uploads authenticate with a WordPress application password, product
    creation with a WooCommerce consumer key/secret (both HTTP basic auth).
    """

    MEDIA_PATH = "/wp-json/wp/v2/media/"
    PRODUCTS_PATH = "/wp-json/wc/v3/products"

    def __init__(
        self,
        base_url: str,
        username: str,
        app_password: str,
        consumer_key: str,
        consumer_secret: str,
    ):
        self.base_url = base_url.rstrip("/")
        self._media_auth = (username, app_password)
        self._product_auth = (consumer_key, consumer_secret)

    def upload_media(self, image_data: bytes, filename: str) -> dict:
        """
        Upload an image to the media library.

        Args:
            image_data: Image bytes to upload
            filename: Filename for the upload

        Returns:
            The created media object as returned by WordPress

        Raises:
            requests.RequestException: On network failure or non-2xx status
        """
        content_type = mimetypes.guess_type(filename)[0] or "application/octet-stream"
        files = {"file": (filename, image_data, content_type)}
        headers = {"Content-Disposition": f'attachment; filename="{filename}"'}

        response = requests.post(
            f"{self.base_url}{self.MEDIA_PATH}",
            files=files,
            headers=headers,
            auth=self._media_auth,
            timeout=60,
        )
        response.raise_for_status()
        return response.json()

    def create_product(self, form: list[tuple[str, str]]) -> dict:
        """
        Create a product from form-encoded fields.

        Returns the decoded response body. Status and body are not validated
        here beyond HTTP errors; callers check for the created id.
        """
        response = requests.post(
            f"{self.base_url}{self.PRODUCTS_PATH}",
            data=form,
            auth=self._product_auth,
            timeout=30,
        )
        response.raise_for_status()
        try:
            return response.json()
        except ValueError:
            return {"raw": response.text, "status_code": response.status_code}
