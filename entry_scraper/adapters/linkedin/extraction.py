"""
Pure extraction of LinkedIn listings and job details from an HTML snapshot.

Nothing here touches the browser: callers pass `await page.content()` and get
typed records back, so every rule can be exercised against fixture HTML.
Missing optional data maps to defaults; it never raises.
"""

import logging
from datetime import datetime
from typing import List, Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from entry_scraper.adapters.linkedin.config import BASE_URL
from entry_scraper.adapters.linkedin.selectors import (
    LISTING_ITEM_SELECTOR,
    TITLE_SELECTOR,
    COMPANY_SELECTOR,
    LOCATION_SELECTOR,
    LINK_SELECTOR,
    DESCRIPTION_SELECTOR,
    CRITERIA_ITEM_SELECTOR,
    CRITERIA_LABEL_SELECTOR,
    CRITERIA_VALUE_SELECTOR,
    SKILLS_SELECTOR,
)
from entry_scraper.core.models import (
    ListingDetail,
    ListingSummary,
    SOURCE_LINKEDIN,
    DEFAULT_EMPLOYMENT_TYPE,
    DEFAULT_SALARY,
    DEFAULT_EXPERIENCE_LEVEL,
    DEFAULT_LOCATION,
)

logger = logging.getLogger(__name__)


def _text(node: Optional[Tag]) -> str:
    if node is None:
        return ""
    return node.get_text().strip()


def extract_summaries(
    html: str,
    base_url: str = BASE_URL,
    captured_at: Optional[datetime] = None,
) -> List[ListingSummary]:
    """
    Extract listing summaries from a search results page.

    A card needs a title, a company and a link with an href; cards missing any
    of them are dropped. Location falls back to "Remote/Unspecified".
    """
    soup = BeautifulSoup(html, "html.parser")
    listings: List[ListingSummary] = []
    dropped = 0

    for card in soup.select(LISTING_ITEM_SELECTOR):
        title = card.select_one(TITLE_SELECTOR)
        company = card.select_one(COMPANY_SELECTOR)
        link = card.select_one(LINK_SELECTOR)
        href = (link.get("href") or "").strip() if link is not None else ""

        if title is None or company is None or not href:
            dropped += 1
            continue

        location = _text(card.select_one(LOCATION_SELECTOR)) or DEFAULT_LOCATION

        listings.append(
            ListingSummary(
                title=_text(title),
                company=_text(company),
                location=location,
                url=urljoin(base_url, href),
                source=SOURCE_LINKEDIN,
                captured_at=captured_at,
            )
        )

    if dropped:
        logger.debug(f"Dropped {dropped} listing cards missing title, company or link")
    return listings


def _classify_criterion(detail: ListingDetail, label: str, value: str) -> None:
    # Case-sensitive substring match, first matching rule wins
    if "Employment type" in label:
        detail.employment_type = value or DEFAULT_EMPLOYMENT_TYPE
    elif "Salary" in label or "Compensation" in label:
        detail.salary = value or DEFAULT_SALARY
    elif "Experience level" in label:
        detail.experience_level = value or DEFAULT_EXPERIENCE_LEVEL


def extract_detail(html: str) -> ListingDetail:
    """Extract description, job criteria and skills from a job detail page."""
    soup = BeautifulSoup(html, "html.parser")
    detail = ListingDetail.defaults()

    detail.description = _text(soup.select_one(DESCRIPTION_SELECTOR))

    for item in soup.select(CRITERIA_ITEM_SELECTOR):
        label = item.select_one(CRITERIA_LABEL_SELECTOR)
        if label is None:
            continue
        value = _text(item.select_one(CRITERIA_VALUE_SELECTOR))
        _classify_criterion(detail, _text(label), value)

    detail.skills = [_text(skill) for skill in soup.select(SKILLS_SELECTOR)]
    return detail
