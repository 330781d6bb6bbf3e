"""
Base extractor class that all platform-specific extractors inherit from.

An extraction attempt runs through navigate -> wait-for-content -> DOM
evaluation -> normalize. Failures inside an attempt are returned as an
ExtractionError value rather than propagated; extract() then builds the
URL-only fallback preview from it. extract() itself never raises.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from ..config import Settings, get_settings
from ..core.browser import BrowserSession
from ..models.enums import Platform
from ..models.response import Preview
from ..utils.helpers import first_of

logger = logging.getLogger(__name__)

# Reads Open Graph / Twitter card tags.
META_TAGS_SCRIPT = """() => {
    const meta = (name) => {
        const el = document.querySelector(`meta[property="${name}"]`) ||
                   document.querySelector(`meta[name="${name}"]`);
        return el ? el.getAttribute('content') : null;
    };
    return {
        ogTitle: meta('og:title'),
        twitterTitle: meta('twitter:title'),
        ogDescription: meta('og:description'),
        twitterDescription: meta('twitter:description'),
        ogImage: meta('og:image'),
        twitterImage: meta('twitter:image'),
        siteName: meta('og:site_name'),
    };
}"""


class ExtractionError(Exception):
    """Raised (or returned) when a preview extraction attempt fails."""

    def __init__(self, message: str, error_code: str | None = None):
        super().__init__(message)
        self.error_code = error_code


class BaseExtractor(ABC):
    """
    Abstract base class for all platform extractors.

    Subclasses must implement:
    - platform / site_name: class attributes
    - _extract(): a full attempt, may raise
    - fallback(): a preview built from the URL alone

    and may set wait_selector to a selector worth waiting for after
    navigation.
    """

    platform: Platform
    site_name: str
    wait_selector: str | None = None

    def __init__(self, settings: Settings | None = None):
        self._settings = settings or get_settings()

    async def extract(self, session: BrowserSession, url: str) -> Preview | None:
        """
        Main extraction entry point.

        Returns the extracted preview, the URL-only fallback when the attempt
        failed, or None if even the fallback could not be built.
        """
        outcome = await self._attempt(session, url)
        if isinstance(outcome, Preview):
            return outcome

        logger.warning(
            "%s extraction failed for %s (%s): %s; using URL fallback",
            self.platform.value,
            url,
            outcome.error_code,
            outcome,
        )
        try:
            return self.fallback(url)
        except Exception as e:
            logger.error("%s fallback failed for %s: %s", self.platform.value, url, e)
            return None

    async def _attempt(self, session: BrowserSession, url: str) -> Preview | ExtractionError:
        try:
            return await self._extract(session, url)
        except ExtractionError as e:
            return e
        except Exception as e:
            return ExtractionError(
                f"Failed to extract from {self.platform.value}: {e!s}",
                error_code=f"{self.platform.value}.extraction_failed",
            )

    @abstractmethod
    async def _extract(self, session: BrowserSession, url: str) -> Preview:
        """
        Perform platform-specific extraction.

        Must be implemented by each platform extractor.
        """
        ...

    @abstractmethod
    def fallback(self, url: str) -> Preview:
        """Build a minimal preview from URL patterns only."""
        ...

    # === Browser helpers ===

    @asynccontextmanager
    async def _open_page(self, session: BrowserSession, url: str) -> AsyncIterator[Page]:
        """Open a page, navigate to url and close the page on exit."""
        page = await session.new_page(
            user_agent=self._settings.user_agent,
            extra_headers={"Accept-Language": self._settings.accept_language},
        )
        try:
            try:
                await page.goto(
                    url,
                    timeout=self._settings.navigation_timeout * 1000,
                    wait_until="networkidle",
                )
            except Exception as e:
                raise ExtractionError(
                    f"Navigation to {url} failed: {e!s}", error_code="navigation.failed"
                ) from e
            yield page
        finally:
            try:
                await page.close()
            except Exception as e:
                logger.debug("Failed to close page for %s: %s", url, e)

    async def _wait_for_content(self, page: Page):
        """Wait for wait_selector; a timeout just means partial DOM."""
        if not self.wait_selector:
            return
        try:
            await page.wait_for_selector(
                self.wait_selector,
                timeout=self._settings.selector_timeout * 1000,
            )
        except PlaywrightError as e:
            logger.debug("Selector %s not found, continuing: %s", self.wait_selector, e)

    async def _evaluate(self, page: Page, script: str) -> dict[str, Any]:
        """Run a page-scoped script. Any failure yields an empty dict."""
        try:
            data = await asyncio.wait_for(
                page.evaluate(script),
                timeout=self._settings.evaluate_timeout,
            )
        except Exception as e:
            logger.warning("%s DOM evaluation failed: %s", self.platform.value, e)
            return {}
        return data if isinstance(data, dict) else {}

    # === Common utility methods ===

    @staticmethod
    def _meta_title(meta: dict[str, Any]) -> str | None:
        return first_of(meta.get("ogTitle"), meta.get("twitterTitle"))

    @staticmethod
    def _meta_description(meta: dict[str, Any]) -> str | None:
        return first_of(meta.get("ogDescription"), meta.get("twitterDescription"))

    @staticmethod
    def _meta_image(meta: dict[str, Any]) -> str | None:
        return first_of(meta.get("ogImage"), meta.get("twitterImage"))

    def _preview(self, url: str, **fields: Any) -> Preview:
        """Create a Preview for this platform; platform is never taken from fields."""
        fields.setdefault("site_name", self.site_name)
        fields.setdefault("description", "")
        return Preview(url=url, platform=self.platform, **fields)
