"""
Listing discovery from LinkedIn search results.
Handles search navigation, result waiting, pagination and per-page extraction.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from playwright.async_api import Page, TimeoutError as PlaywrightTimeoutError

from entry_scraper.adapters.linkedin.extraction import extract_summaries
from entry_scraper.adapters.linkedin.pagination import build_search_url
from entry_scraper.adapters.linkedin.selectors import RESULTS_LIST_SELECTOR
from entry_scraper.browser.session import SessionFactory, default_session_factory
from entry_scraper.browser.user_agent import UserAgentProvider
from entry_scraper.config.settings import settings
from entry_scraper.core.events import (
    Failure,
    FailureKind,
    FailureSink,
    LoggingFailureSink,
    ResourceAcquisitionError,
)
from entry_scraper.core.models import ListingSummary

logger = logging.getLogger(__name__)

STAGE = "scrape"


class ListingScraper:
    """
    Drives one browser session through a paginated entry-level job search.
    """

    def __init__(
        self,
        session_factory: SessionFactory = default_session_factory,
        sink: Optional[FailureSink] = None,
        navigation_timeout: int = settings.NAVIGATION_TIMEOUT,
        selector_timeout: int = settings.SELECTOR_TIMEOUT,
        jobs_per_page: int = settings.RESULTS_PER_PAGE,
    ):
        self.session_factory = session_factory
        self.sink = sink or LoggingFailureSink()
        self.navigation_timeout = navigation_timeout
        self.selector_timeout = selector_timeout
        self.jobs_per_page = jobs_per_page

    async def scrape(self, location: str, page_count: int) -> List[ListingSummary]:
        """
        Scrape up to `page_count` result pages for `location`.

        Runtime failures never raise. A launch failure or a failed first
        navigation yields an empty list; a failure on a later page returns what
        was gathered so far.
        """
        if page_count < 1:
            raise ValueError(f"page_count must be positive, got {page_count}")

        listings: List[ListingSummary] = []
        try:
            async with self.session_factory() as session:
                page = await session.open_page(user_agent=UserAgentProvider.get())

                for page_num in range(page_count):
                    url = build_search_url(location, page_num, self.jobs_per_page)
                    logger.info(f"Scraping page {page_num + 1} of {page_count}: {url}")

                    if not await self._load(page, url):
                        if page_num == 0:
                            return []
                        break

                    page_listings = await self._extract(page, url)
                    if page_listings is None:
                        break

                    logger.info(
                        f"Found {len(page_listings)} jobs on page {page_num + 1}"
                    )
                    if not page_listings:
                        logger.info("No listings on this page, stopping pagination")
                        break
                    listings.extend(page_listings)

        except ResourceAcquisitionError as e:
            self.sink.report(
                Failure(FailureKind.RESOURCE_ACQUISITION, STAGE, str(e), error=e)
            )
            return []
        except Exception as e:
            self.sink.report(Failure(FailureKind.EXTRACTION, STAGE, str(e), error=e))

        logger.info(f"LinkedIn scraping complete. Total jobs found: {len(listings)}")
        return listings

    async def _load(self, page: Page, url: str) -> bool:
        """
        Navigate to `url` and wait for the results list.
        Returns False when navigation fails; a missing results list is tolerated.
        """
        try:
            await page.goto(
                url, wait_until="domcontentloaded", timeout=self.navigation_timeout
            )
        except Exception as e:
            self.sink.report(
                Failure(FailureKind.NAVIGATION, STAGE, str(e), url=url, error=e)
            )
            return False

        try:
            await page.wait_for_selector(
                RESULTS_LIST_SELECTOR, timeout=self.selector_timeout
            )
        except PlaywrightTimeoutError as e:
            self.sink.report(
                Failure(
                    FailureKind.SELECTOR_TIMEOUT,
                    STAGE,
                    "Results list did not appear, proceeding anyway",
                    url=url,
                    error=e,
                )
            )
        return True

    async def _extract(self, page: Page, url: str) -> Optional[List[ListingSummary]]:
        """Extract the current page, stamping each listing with the capture time."""
        try:
            html = await page.content()
            return extract_summaries(
                html,
                base_url=page.url or url,
                captured_at=datetime.now(timezone.utc),
            )
        except Exception as e:
            self.sink.report(
                Failure(FailureKind.EXTRACTION, STAGE, str(e), url=url, error=e)
            )
            return None
