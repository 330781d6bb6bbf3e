"""
Preview extraction pipeline.

scrape(url):
1. return the cached preview if there is one (no browser work)
2. classify the URL
3. launch a browser session, scoped to this call
4. run the platform's extractor (website for anything unknown)
5. cache a non-None result for preview_cache_ttl
6. close the session on every exit path

Any failure, including a browser that cannot be launched, is logged and
reported as None. Concurrent calls for the same URL are not coalesced.
"""

import logging
from collections.abc import Awaitable, Callable
from functools import partial

from ..config import Settings, get_settings
from ..core.browser import BrowserSession, launch_browser
from ..core.cache import PreviewCache
from ..core.classifier import classify
from ..extractors import BaseExtractor, build_extractor_registry
from ..models.enums import Platform
from ..models.response import Preview

logger = logging.getLogger(__name__)

SessionLauncher = Callable[[], Awaitable[BrowserSession]]


class PreviewScraper:
    """Cache-backed preview extraction over per-request browser sessions."""

    def __init__(
        self,
        cache: PreviewCache,
        launcher: SessionLauncher | None = None,
        extractors: dict[Platform, BaseExtractor] | None = None,
        settings: Settings | None = None,
    ):
        settings = settings or get_settings()
        self._cache = cache
        self._launcher = launcher or partial(launch_browser, settings)
        self._extractors = extractors or build_extractor_registry(settings)
        self._ttl = settings.preview_cache_ttl

    @property
    def cache(self) -> PreviewCache:
        return self._cache

    def extractor_for(self, platform: Platform) -> BaseExtractor:
        return self._extractors.get(platform) or self._extractors[Platform.WEBSITE]

    async def scrape(self, url: str) -> Preview | None:
        """Return a preview for url, or None if extraction failed."""
        cached = self._cache.get(url)
        if cached is not None:
            logger.info("Using cached preview for %s", url)
            return cached

        try:
            platform = classify(url)
            logger.info("Detected platform %s for %s", platform.value, url)
            extractor = self.extractor_for(platform)

            async with await self._launcher() as session:
                preview = await extractor.extract(session, url)
                if preview is not None:
                    self._cache.set(url, preview, ttl=self._ttl)

            return preview
        except Exception as e:
            logger.exception("Preview extraction failed for %s: %s", url, e)
            return None
