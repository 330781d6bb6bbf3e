"""
Headless browser sessions backed by Playwright's async API.

A BrowserSession owns one Chromium process for the duration of a single
preview request. Extractors open pages through new_page(); the session is
released with close(), or automatically when used as an async context
manager:

    async with await launch_browser() as session:
        page = await session.new_page(user_agent=...)
"""

import logging
from abc import ABC, abstractmethod

from playwright.async_api import Browser, BrowserContext, Page, Playwright, async_playwright

from ..config import Settings, get_settings

logger = logging.getLogger(__name__)

CHROME_ARGS = [
    # Keeps navigator.webdriver from being set
    "--disable-blink-features=AutomationControlled",
    # Needed inside containers
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-accelerated-2d-canvas",
    "--disable-gpu",
]

_VIEWPORT = {"width": 1366, "height": 900}


class BrowserSession(ABC):
    """
    Handle to a running browser.

    Subclasses implement new_page() and close(); the base class provides the
    async context manager protocol so that close() runs on every exit path.
    A failing close() is logged and never replaces the result of the block.
    """

    @abstractmethod
    async def new_page(
        self,
        user_agent: str | None = None,
        extra_headers: dict[str, str] | None = None,
    ) -> Page:
        ...

    @abstractmethod
    async def close(self):
        ...

    async def __aenter__(self) -> "BrowserSession":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        try:
            await self.close()
        except Exception as e:
            logger.warning("Failed to close browser session: %s", e)


class PlaywrightSession(BrowserSession):
    """Chromium session; each page gets its own isolated context."""

    def __init__(self, playwright: Playwright, browser: Browser):
        self._playwright = playwright
        self._browser = browser
        self._contexts: list[BrowserContext] = []
        self._closed = False

    async def new_page(
        self,
        user_agent: str | None = None,
        extra_headers: dict[str, str] | None = None,
    ) -> Page:
        context = await self._browser.new_context(
            user_agent=user_agent,
            viewport=_VIEWPORT,
            extra_http_headers=extra_headers,
        )
        self._contexts.append(context)
        return await context.new_page()

    async def close(self):
        if self._closed:
            return
        self._closed = True

        # Contexts first, then the browser, then the driver
        for context in self._contexts:
            try:
                await context.close()
            except Exception as e:
                logger.debug("Failed to close browser context: %s", e)
        try:
            await self._browser.close()
        finally:
            await self._playwright.stop()
        logger.debug("Browser session closed")


async def launch_browser(settings: Settings | None = None) -> PlaywrightSession:
    """Start Playwright and launch a Chromium instance."""
    settings = settings or get_settings()

    playwright = await async_playwright().start()
    try:
        browser = await playwright.chromium.launch(
            headless=settings.headless,
            args=CHROME_ARGS,
        )
    except Exception:
        await playwright.stop()
        raise

    logger.debug("Browser session launched (headless=%s)", settings.headless)
    return PlaywrightSession(playwright, browser)
