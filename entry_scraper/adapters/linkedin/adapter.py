"""
LinkedInAdapter - Job portal adapter for LinkedIn's public job search.

Implements JobPortalAdapter interface. Delegates all work to submodules:
- discovery.py for listing discovery from search results
- details.py for per-listing detail enrichment
"""

import logging
from typing import List, Optional

from entry_scraper.adapters.base import JobPortalAdapter
from entry_scraper.adapters.linkedin.details import DetailEnricher
from entry_scraper.adapters.linkedin.discovery import ListingScraper
from entry_scraper.browser.session import SessionFactory, default_session_factory
from entry_scraper.core.events import FailureSink, LoggingFailureSink
from entry_scraper.core.models import ListingDetail, ListingSummary, SOURCE_LINKEDIN

logger = logging.getLogger(__name__)


class LinkedInAdapter(JobPortalAdapter):
    """
    LinkedIn adapter for entry-level, full-time roles.
    """

    source = SOURCE_LINKEDIN

    def __init__(
        self,
        session_factory: SessionFactory = default_session_factory,
        sink: Optional[FailureSink] = None,
    ):
        sink = sink or LoggingFailureSink()
        self.scraper = ListingScraper(session_factory=session_factory, sink=sink)
        self.enricher = DetailEnricher(session_factory=session_factory, sink=sink)

    async def scrape_listings(
        self, location: str, page_count: int
    ) -> List[ListingSummary]:
        return await self.scraper.scrape(location, page_count)

    async def enrich(self, url: str) -> ListingDetail:
        return await self.enricher.enrich(url)
