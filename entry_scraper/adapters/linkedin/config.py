"""
LinkedIn-specific constants and configuration.
"""

# Base URLs
BASE_URL = "https://www.linkedin.com"
SEARCH_URL = "https://www.linkedin.com/jobs/search/"

# Search filters: entry-level, full-time roles
SEARCH_KEYWORDS = "entry level"
EXPERIENCE_FILTER = "1,2"  # f_E: internship, entry level
JOB_TYPE_FILTER = "F"  # f_JT: full-time
