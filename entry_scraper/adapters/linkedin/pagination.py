"""
Search URL construction and pagination for LinkedIn job search.
"""

import urllib.parse

from entry_scraper.adapters.linkedin.config import (
    SEARCH_URL,
    SEARCH_KEYWORDS,
    EXPERIENCE_FILTER,
    JOB_TYPE_FILTER,
)


def build_search_url(location: str, page_num: int = 0, jobs_per_page: int = 25) -> str:
    """
    Build a LinkedIn search URL for entry-level, full-time roles.
    The first page carries no offset; later pages add `start`.
    """
    params = {
        "keywords": SEARCH_KEYWORDS,
        "location": location,
        "f_E": EXPERIENCE_FILTER,
        "f_JT": JOB_TYPE_FILTER,
    }
    if page_num > 0:
        params["start"] = page_num * jobs_per_page
    query = urllib.parse.urlencode(params, quote_via=urllib.parse.quote)
    return f"{SEARCH_URL}?{query}"
