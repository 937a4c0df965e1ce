"""Exceptions raised while crawling and publishing products."""


class CatalogSyncError(Exception):
    """Base class for failures of a single product's pipeline."""
    pass


class ExtractionError(CatalogSyncError):
    """Product page is missing the structured-data block or a markup fragment."""
    pass


class DownloadError(CatalogSyncError):
    """Failed to fetch a product image to local disk."""
    pass


class UploadError(CatalogSyncError):
    """Media endpoint rejected an image upload."""
    pass


class TranslationError(CatalogSyncError):
    """Language model returned no usable completion."""
    pass


class PublishError(CatalogSyncError):
    """Product-creation endpoint did not return a positive integer id."""
    def __init__(self, message: str, response):
        self.response = response
        super().__init__(message)
