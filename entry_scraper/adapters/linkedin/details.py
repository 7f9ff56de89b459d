"""
Job detail page enrichment.
Navigates to a single listing and extracts description, criteria and skills.
"""

import logging
from typing import Optional

from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from entry_scraper.adapters.linkedin.extraction import extract_detail
from entry_scraper.adapters.linkedin.selectors import DETAIL_CONTAINER_SELECTOR
from entry_scraper.browser.session import SessionFactory, default_session_factory
from entry_scraper.config.settings import settings
from entry_scraper.core.events import (
    Failure,
    FailureKind,
    FailureSink,
    LoggingFailureSink,
    ResourceAcquisitionError,
)
from entry_scraper.core.models import ListingDetail

logger = logging.getLogger(__name__)

STAGE = "enrich"


class DetailEnricher:
    """
    Opens a fresh browser session per listing and reads its detail page.
    Enrichment failures never block persisting the base listing: every error
    path returns `ListingDetail.defaults()`.
    """

    def __init__(
        self,
        session_factory: SessionFactory = default_session_factory,
        sink: Optional[FailureSink] = None,
        navigation_timeout: int = settings.NAVIGATION_TIMEOUT,
        selector_timeout: int = settings.SELECTOR_TIMEOUT,
    ):
        self.session_factory = session_factory
        self.sink = sink or LoggingFailureSink()
        self.navigation_timeout = navigation_timeout
        self.selector_timeout = selector_timeout

    async def enrich(self, url: str) -> ListingDetail:
        try:
            async with self.session_factory() as session:
                page = await session.open_page()

                try:
                    await page.goto(
                        url,
                        wait_until="domcontentloaded",
                        timeout=self.navigation_timeout,
                    )
                except Exception as e:
                    self.sink.report(
                        Failure(FailureKind.NAVIGATION, STAGE, str(e), url=url, error=e)
                    )
                    return ListingDetail.defaults()

                try:
                    await page.wait_for_selector(
                        DETAIL_CONTAINER_SELECTOR, timeout=self.selector_timeout
                    )
                except PlaywrightTimeoutError as e:
                    self.sink.report(
                        Failure(
                            FailureKind.SELECTOR_TIMEOUT,
                            STAGE,
                            "Detail container did not appear, proceeding anyway",
                            url=url,
                            error=e,
                        )
                    )

                html = await page.content()
                detail = extract_detail(html)
                logger.debug(
                    f"Extracted detail for {url}: {detail.employment_type}, "
                    f"{len(detail.skills)} skills, {len(detail.description)} chars"
                )
                return detail

        except ResourceAcquisitionError as e:
            self.sink.report(
                Failure(FailureKind.RESOURCE_ACQUISITION, STAGE, str(e), url=url, error=e)
            )
        except Exception as e:
            self.sink.report(
                Failure(FailureKind.EXTRACTION, STAGE, str(e), url=url, error=e)
            )
        return ListingDetail.defaults()
