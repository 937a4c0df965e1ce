"""Crawl a product category, translate it and publish it to WooCommerce."""

__version__ = "0.1.0"
