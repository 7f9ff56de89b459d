"""
Scoped browser session.

A session owns one Playwright driver and one browser. It is acquired on
`__aenter__` and released on `__aexit__`, so every exit path (normal return,
extraction error, navigation error) closes the browser.
"""

import logging
from typing import AsyncContextManager, Callable, List, Optional

from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Page,
    Playwright,
)

from entry_scraper.browser.launch import create_browser
from entry_scraper.config.settings import settings
from entry_scraper.core.events import ResourceAcquisitionError

logger = logging.getLogger(__name__)


class BrowserSession:
    """
    Async context manager around a single headless browser.
    """

    def __init__(
        self,
        headless: bool = settings.HEADLESS,
        sandbox_disabled: bool = settings.SANDBOX_DISABLED,
    ):
        self.headless = headless
        self.sandbox_disabled = sandbox_disabled
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: List[BrowserContext] = []

    async def __aenter__(self) -> "BrowserSession":
        try:
            self._playwright = await async_playwright().start()
            self._browser = await create_browser(
                self._playwright,
                headless=self.headless,
                sandbox_disabled=self.sandbox_disabled,
            )
        except Exception as e:
            await self.close()
            raise ResourceAcquisitionError(f"Failed to launch browser: {e}") from e
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def open_page(self, user_agent: Optional[str] = None) -> Page:
        """
        Open a page with the configured viewport and, optionally, a user agent.
        """
        if self._browser is None:
            raise ResourceAcquisitionError("Browser session is not open")

        context_config = {
            "viewport": {
                "width": settings.VIEWPORT_WIDTH,
                "height": settings.VIEWPORT_HEIGHT,
            },
        }
        if user_agent:
            context_config["user_agent"] = user_agent

        try:
            context = await self._browser.new_context(**context_config)
            self._contexts.append(context)
            return await context.new_page()
        except Exception as e:
            raise ResourceAcquisitionError(f"Failed to open page: {e}") from e

    async def close(self):
        """
        Close every context, the browser, and stop Playwright.
        Safe to call more than once.
        """
        for context in self._contexts:
            try:
                await context.close()
            except Exception as e:
                logger.debug(f"Error closing browser context: {e}")
        self._contexts.clear()

        if self._browser:
            try:
                await self._browser.close()
                logger.info("Browser closed.")
            except Exception as e:
                logger.warning(f"Error closing browser: {e}")
            self._browser = None

        if self._playwright:
            try:
                await self._playwright.stop()
            except Exception as e:
                logger.warning(f"Error stopping Playwright: {e}")
            self._playwright = None


SessionFactory = Callable[[], AsyncContextManager[BrowserSession]]


def default_session_factory() -> BrowserSession:
    return BrowserSession()
