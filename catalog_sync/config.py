import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Source site - loaded from .env
SOURCE_DOMAIN = os.getenv("SOURCE_DOMAIN", "https://www.testwebsite.com")
LISTING_PATH = os.getenv("LISTING_PATH", "/product/page/")
USER_AGENT = os.getenv(
    "USER_AGENT",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36",
)
HEADLESS = os.getenv("HEADLESS", "false").lower() in ("1", "true", "yes")

# Listing markup: one element per product, product fields stored as attributes
LISTING_ITEM_SELECTOR = os.getenv("LISTING_ITEM_SELECTOR", ".product-tile")
LISTING_ATTR_SKU = os.getenv("LISTING_ATTR_SKU", "sku")
LISTING_ATTR_LINK = os.getenv("LISTING_ATTR_LINK", "href")
LISTING_ATTR_NAME = os.getenv("LISTING_ATTR_NAME", "name")
LISTING_ATTR_PRICE = os.getenv("LISTING_ATTR_PRICE", "price")

# Product page markup
STRUCTURED_DATA_MARKER = os.getenv("STRUCTURED_DATA_MARKER", '"@type":"Product"')
HIGHLIGHTS_CLASS = os.getenv("HIGHLIGHTS_CLASS", "product-highlights")
DESCRIPTION_CLASS = os.getenv("DESCRIPTION_CLASS", "product-description")

# WordPress / WooCommerce
WP_BASE_URL = os.getenv("WP_BASE_URL")
WP_USERNAME = os.getenv("WP_USERNAME")
WP_APP_PASSWORD = os.getenv("WP_APP_PASSWORD")
WC_CONSUMER_KEY = os.getenv("WC_CONSUMER_KEY")
WC_CONSUMER_SECRET = os.getenv("WC_CONSUMER_SECRET")

# OpenAI
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-3.5-turbo-0125")
TRANSLATION_PROMPT = os.getenv(
    "TRANSLATION_PROMPT",
    "You translate e-commerce product content from English to French. "
    "Keep any HTML markup intact and return only the translated text.",
)

# Local state
LEDGER_PATH = os.getenv("LEDGER_PATH", "memory.txt")
IMAGES_DIR = os.getenv("IMAGES_DIR", "images")
CATALOG_SYNC_WORKERS = int(os.getenv("CATALOG_SYNC_WORKERS", "1"))
ON_FAILURE = os.getenv("ON_FAILURE", "stop")  # "stop" or "skip"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

FAILURE_POLICIES = ("stop", "skip")


@dataclass
class Settings:
    """Runtime settings for one crawl. Defaults come from the environment."""

    source_domain: str = SOURCE_DOMAIN
    listing_path: str = LISTING_PATH
    user_agent: str = USER_AGENT
    headless: bool = HEADLESS
    listing_item_selector: str = LISTING_ITEM_SELECTOR
    listing_attr_sku: str = LISTING_ATTR_SKU
    listing_attr_link: str = LISTING_ATTR_LINK
    listing_attr_name: str = LISTING_ATTR_NAME
    listing_attr_price: str = LISTING_ATTR_PRICE
    structured_data_marker: str = STRUCTURED_DATA_MARKER
    highlights_class: str = HIGHLIGHTS_CLASS
    description_class: str = DESCRIPTION_CLASS
    wp_base_url: str | None = WP_BASE_URL
    wp_username: str | None = WP_USERNAME
    wp_app_password: str | None = WP_APP_PASSWORD
    wc_consumer_key: str | None = WC_CONSUMER_KEY
    wc_consumer_secret: str | None = WC_CONSUMER_SECRET
    openai_api_key: str | None = OPENAI_API_KEY
    openai_model: str = OPENAI_MODEL
    translation_prompt: str = TRANSLATION_PROMPT
    ledger_path: Path = Path(LEDGER_PATH)
    images_dir: Path = Path(IMAGES_DIR)
    workers: int = CATALOG_SYNC_WORKERS
    on_failure: str = ON_FAILURE
    start_page: int = 1
    max_pages: int | None = None

    def __post_init__(self):
        if self.on_failure not in FAILURE_POLICIES:
            raise ValueError(
                f"on_failure must be one of {FAILURE_POLICIES}, got {self.on_failure!r}"
            )
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")
        self.ledger_path = Path(self.ledger_path)
        self.images_dir = Path(self.images_dir)

    def missing_credentials(self) -> list[str]:
        """Return the names of required credentials that are not set."""
        required = {
            "WP_BASE_URL": self.wp_base_url,
            "WP_USERNAME": self.wp_username,
            "WP_APP_PASSWORD": self.wp_app_password,
            "WC_CONSUMER_KEY": self.wc_consumer_key,
            "WC_CONSUMER_SECRET": self.wc_consumer_secret,
            "OPENAI_API_KEY": self.openai_api_key,
        }
        return [name for name, value in required.items() if not value]
