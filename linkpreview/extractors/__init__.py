"""
Platform-specific preview extractors.

Each extractor handles navigation, DOM extraction, URL-pattern parsing and
the URL-only fallback for a specific platform.
"""

from ..config import Settings
from ..models.enums import Platform
from .base import BaseExtractor, ExtractionError

# Lazy imports to avoid circular dependencies and speed up startup
_EXTRACTOR_MAP: dict[Platform, type[BaseExtractor]] | None = None


def _load_extractors() -> dict[Platform, type[BaseExtractor]]:
    from .apple_maps import AppleMapsExtractor
    from .facebook import FacebookExtractor
    from .instagram import InstagramExtractor
    from .tiktok import TikTokExtractor
    from .twitter import TwitterExtractor
    from .website import WebsiteExtractor
    from .youtube import YouTubeExtractor

    return {
        Platform.TWITTER: TwitterExtractor,
        Platform.YOUTUBE: YouTubeExtractor,
        Platform.INSTAGRAM: InstagramExtractor,
        Platform.TIKTOK: TikTokExtractor,
        Platform.FACEBOOK: FacebookExtractor,
        Platform.APPLE_MAPS: AppleMapsExtractor,
        Platform.WEBSITE: WebsiteExtractor,
    }


def _extractor_map() -> dict[Platform, type[BaseExtractor]]:
    global _EXTRACTOR_MAP
    if _EXTRACTOR_MAP is None:
        _EXTRACTOR_MAP = _load_extractors()
    return _EXTRACTOR_MAP


def get_extractor(platform: Platform, settings: Settings | None = None) -> BaseExtractor:
    """Get an extractor instance for the given platform; unknown platforms get the website extractor."""
    extractors = _extractor_map()
    extractor_class = extractors.get(platform, extractors[Platform.WEBSITE])
    return extractor_class(settings)


def build_extractor_registry(settings: Settings | None = None) -> dict[Platform, BaseExtractor]:
    """Instantiate one extractor per platform, falling back to the website extractor."""
    return {platform: get_extractor(platform, settings) for platform in Platform}


__all__ = ["BaseExtractor", "ExtractionError", "build_extractor_registry", "get_extractor"]
