from abc import ABC, abstractmethod
from typing import List

from entry_scraper.core.models import ListingDetail, ListingSummary


class JobPortalAdapter(ABC):
    """
    Abstract base class for job portal adapters.
    """

    source: str

    @abstractmethod
    async def scrape_listings(
        self, location: str, page_count: int
    ) -> List[ListingSummary]:
        """
        Collect listing summaries from the portal's search results.
        Args:
            location (str): Location filter; empty for no filter.
            page_count (int): Number of result pages to visit.
        Returns:
            List[ListingSummary]: Summaries in extraction order.
        """
        pass

    @abstractmethod
    async def enrich(self, url: str) -> ListingDetail:
        """
        Fetch per-listing detail fields.
        Args:
            url (str): The listing's detail page URL.
        Returns:
            ListingDetail: Detail fields, defaulted where unavailable.
        """
        pass
