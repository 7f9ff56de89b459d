import logging
from typing import Optional

from fake_useragent import UserAgent

from entry_scraper.config.settings import settings

logger = logging.getLogger(__name__)


class UserAgentProvider:
    """
    Supplies the user-agent string for search pages.
    Uses the configured USER_AGENT unless RANDOM_USER_AGENT is enabled.
    """

    _ua: Optional[UserAgent] = None

    @classmethod
    def initialize(cls):
        """
        Initialize the fake_useragent generator if not already done.
        """
        if cls._ua is None:
            try:
                cls._ua = UserAgent(
                    browsers=["chrome"],
                    os=["windows", "macos"],
                    fallback=settings.USER_AGENT,
                )
            except Exception as e:
                logger.warning(
                    f"Failed to initialize fake_useragent, using configured agent: {e}"
                )

    @classmethod
    def get(cls, randomize: bool = settings.RANDOM_USER_AGENT) -> str:
        """
        Return a user-agent string; the configured one when not randomizing
        or when the generator is unavailable.
        """
        if not randomize:
            return settings.USER_AGENT
        cls.initialize()
        if cls._ua:
            return cls._ua.random
        return settings.USER_AGENT
