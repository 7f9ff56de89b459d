import argparse
import asyncio
import logging
import sys

from entry_scraper.config.settings import settings
from entry_scraper.core.pipeline import PipelineOptions, run_pipeline

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format=settings.LOG_FORMAT,
    handlers=[logging.StreamHandler(sys.stdout)],
)


def parse_args(argv=None) -> PipelineOptions:
    parser = argparse.ArgumentParser(
        description="Scrape entry-level LinkedIn jobs and store new ones."
    )
    parser.add_argument(
        "--location", default="", help="Location filter (default: any location)"
    )
    parser.add_argument(
        "--pages",
        type=int,
        default=settings.DEFAULT_PAGE_COUNT,
        help="Number of result pages to scrape",
    )
    args = parser.parse_args(argv)
    if args.pages < 1:
        parser.error("--pages must be a positive integer")
    return PipelineOptions(location=args.location, page_count=args.pages)


async def main():
    """
    Main entry point.
    """
    options = parse_args()
    result = await run_pipeline(options)
    print(
        f"Saved {result.saved_count} new jobs "
        f"({result.skipped_count} already stored, {result.failed_count} failed)"
    )


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
