"""Entry points that wire clients and services together."""

from .crawl import CatalogCrawler, build_crawler, crawl

__all__ = ["CatalogCrawler", "build_crawler", "crawl"]
