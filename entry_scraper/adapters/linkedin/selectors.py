"""
All CSS selectors used by the LinkedIn adapter.
Centralized here so that selector changes only need to happen in one place.
"""

# --- Search results page ---

# Container awaited after navigation
RESULTS_LIST_SELECTOR = ".jobs-search__results-list"

# One listing card per item
LISTING_ITEM_SELECTOR = ".jobs-search__results-list > li"

TITLE_SELECTOR = ".base-search-card__title"
COMPANY_SELECTOR = ".base-search-card__subtitle"
LOCATION_SELECTOR = ".job-search-card__location"
LINK_SELECTOR = "a"

# --- Job detail page ---

# Container awaited after navigation
DETAIL_CONTAINER_SELECTOR = ".decorated-job-posting__details"

DESCRIPTION_SELECTOR = ".description__text"

# Label/value pairs under "Seniority level", "Employment type", ...
CRITERIA_ITEM_SELECTOR = ".description__job-criteria-item"
CRITERIA_LABEL_SELECTOR = ".description__job-criteria-subheader"
CRITERIA_VALUE_SELECTOR = ".description__job-criteria-text"

SKILLS_SELECTOR = ".job-details-skill-match-status-list > li"
