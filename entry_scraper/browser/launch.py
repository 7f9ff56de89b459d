import logging
from typing import List

from playwright.async_api import Browser, Playwright

from entry_scraper.config.settings import settings

logger = logging.getLogger(__name__)

# Chromium cannot use its setuid sandbox inside most containers
NO_SANDBOX_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
]


def launch_args(sandbox_disabled: bool) -> List[str]:
    return list(NO_SANDBOX_ARGS) if sandbox_disabled else []


async def create_browser(
    playwright: Playwright,
    headless: bool = settings.HEADLESS,
    sandbox_disabled: bool = settings.SANDBOX_DISABLED,
) -> Browser:
    """
    Launch a Chromium browser instance.
    """
    browser = await playwright.chromium.launch(
        headless=headless,
        args=launch_args(sandbox_disabled),
    )
    logger.info(
        f"Browser launched (Headless: {headless}, Sandbox disabled: {sandbox_disabled})."
    )
    return browser
