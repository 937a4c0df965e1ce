import argparse
import logging
import sys

from catalog_sync.config import FAILURE_POLICIES, LOG_LEVEL, Settings
from catalog_sync.handlers import crawl


def parse_args(argv=None) -> argparse.Namespace:
    defaults = Settings()
    parser = argparse.ArgumentParser(
        description="Crawl a product category, translate it and publish it to WooCommerce."
    )
    parser.add_argument(
        "--headless",
        action=argparse.BooleanOptionalAction,
        default=defaults.headless,
        help="Run the browser without a window",
    )
    parser.add_argument("--start-page", type=int, default=1, help="First listing page (default: 1)")
    parser.add_argument("--max-pages", type=int, default=None, help="Stop after this many listing pages")
    parser.add_argument(
        "--on-failure",
        choices=FAILURE_POLICIES,
        default=defaults.on_failure,
        help="Stop the run or skip to the next product when one fails",
    )
    parser.add_argument("--workers", type=int, default=defaults.workers, help="Parallel transfers per product")
    parser.add_argument("--ledger", default=str(defaults.ledger_path), help="Path of the processed-products ledger")
    return parser.parse_args(argv)


def main(argv=None):
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    args = parse_args(argv)

    settings = Settings(
        headless=args.headless,
        start_page=args.start_page,
        max_pages=args.max_pages,
        on_failure=args.on_failure,
        workers=args.workers,
        ledger_path=args.ledger,
    )

    missing = settings.missing_credentials()
    if missing:
        print(f"Error: {', '.join(missing)} must be set in .env")
        sys.exit(1)

    summary = crawl(settings)

    print("\n=== RESULTS ===")
    print(f"Pages: {summary.pages}")
    print(f"Total: {summary.processed} published, {summary.skipped} skipped, {summary.failed} failed")


if __name__ == "__main__":
    main()
