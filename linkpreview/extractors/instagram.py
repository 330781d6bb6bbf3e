"""
Instagram extractor - builds previews for posts, reels and profiles.

Instagram serves little beyond Open Graph tags to logged-out browsers, so
only meta tags are read. Whether the URL is a post, reel or profile is
decided from the path alone.
"""

from ..core.browser import BrowserSession
from ..models.enums import ContentType, Platform
from ..models.response import Preview
from ..utils.helpers import first_of, search_regex, url_or_none
from .base import META_TAGS_SCRIPT, BaseExtractor

_DEFAULT_TITLES = {
    ContentType.POST: "Post on Instagram",
    ContentType.REEL: "Reel on Instagram",
}


class InstagramExtractor(BaseExtractor):
    """Instagram preview extractor."""

    platform = Platform.INSTAGRAM
    site_name = "Instagram"

    async def _extract(self, session: BrowserSession, url: str) -> Preview:
        """Extract a preview from an Instagram page."""
        async with self._open_page(session, url) as page:
            meta = await self._evaluate(page, META_TAGS_SCRIPT)

        content_type, post_id, username = self._parse_url(url)
        title = self._meta_title(meta)
        # og:title looks like "Name • Instagram photos and videos"
        author = first_of(title.split(" • ")[0]) if title else None

        return self._preview(
            url,
            title=title or self._default_title(content_type, username),
            description=self._meta_description(meta) or "",
            image=url_or_none(meta.get("ogImage")),
            author=author or username,
            username=username,
            post_id=post_id,
            content_type=content_type,
        )

    def fallback(self, url: str) -> Preview:
        content_type, post_id, username = self._parse_url(url)
        return self._preview(
            url,
            title=self._default_title(content_type, username),
            author=username,
            username=username,
            post_id=post_id,
            content_type=content_type,
            fallback=True,
        )

    @staticmethod
    def _default_title(content_type: ContentType, username: str | None) -> str:
        if content_type in _DEFAULT_TITLES:
            return _DEFAULT_TITLES[content_type]
        return f"Profile of {username or 'user'} on Instagram"

    @staticmethod
    def _parse_url(url: str) -> tuple[ContentType, str | None, str | None]:
        """Return (content type, post ID, username) from the URL path."""
        if "/reel/" in url:
            return ContentType.REEL, search_regex(r"instagram\.com/reel/([^/?#]+)", url), None
        if "/p/" in url:
            return ContentType.POST, search_regex(r"instagram\.com/p/([^/?#]+)", url), None
        username = search_regex(r"instagram\.com/([^/?#]+)/?(?:[?#].*)?$", url)
        return ContentType.PROFILE, None, username
