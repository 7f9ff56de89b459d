from pathlib import Path

from pydantic_settings import BaseSettings

BASE_DIR = Path(__file__).resolve().parent.parent.parent

class Settings(BaseSettings):
    class Config:
        env_file = BASE_DIR / ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    """
    Configuration settings for the entry-level job scraper.
    """

    # Browser settings
    HEADLESS: bool = True
    # Chromium's sandbox is unavailable in most containers
    SANDBOX_DISABLED: bool = True
    VIEWPORT_WIDTH: int = 1280
    VIEWPORT_HEIGHT: int = 800
    USER_AGENT: str = (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/96.0.4664.110 Safari/537.36"
    )
    RANDOM_USER_AGENT: bool = False

    # Timeouts
    NAVIGATION_TIMEOUT: int = 60000  # ms
    SELECTOR_TIMEOUT: int = 10000  # ms

    # Search
    DEFAULT_PAGE_COUNT: int = 3
    RESULTS_PER_PAGE: int = 25

    # Storage
    MONGO_URI: str = "mongodb://localhost:27017"
    MONGO_DATABASE: str = "jobs"
    MONGO_COLLECTION: str = "jobs"

    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

settings = Settings()
