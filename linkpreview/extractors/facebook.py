"""
Facebook extractor - builds previews for posts, pages and profiles.
"""

from ..core.browser import BrowserSession
from ..models.enums import ContentType, Platform
from ..models.response import Preview
from ..utils.helpers import first_of, search_regex, url_or_none
from .base import META_TAGS_SCRIPT, BaseExtractor

_POST_ID_PATTERNS = (
    r"/posts/(\d+)",
    r"story_fbid=(\d+)",
)


class FacebookExtractor(BaseExtractor):
    """Facebook preview extractor."""

    platform = Platform.FACEBOOK
    site_name = "Facebook"

    async def _extract(self, session: BrowserSession, url: str) -> Preview:
        """Extract a preview from a Facebook page."""
        async with self._open_page(session, url) as page:
            meta = await self._evaluate(page, META_TAGS_SCRIPT)

        content_type, post_id, username = self._parse_url(url)

        return self._preview(
            url,
            title=self._meta_title(meta) or self._default_title(content_type, username),
            description=self._meta_description(meta) or "",
            image=url_or_none(self._meta_image(meta)),
            site_name=first_of(meta.get("siteName")) or self.site_name,
            author=username,
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
        if content_type == ContentType.POST:
            return "Post on Facebook"
        if content_type == ContentType.PAGE:
            return f"{username} on Facebook" if username else "Page on Facebook"
        return "Profile on Facebook"

    @staticmethod
    def _parse_url(url: str) -> tuple[ContentType, str | None, str | None]:
        """Return (content type, post ID, username) from the URL."""
        post_id = None
        if "/posts/" in url or "story_fbid=" in url:
            content_type = ContentType.POST
            for pattern in _POST_ID_PATTERNS:
                post_id = search_regex(pattern, url)
                if post_id:
                    break
        elif "profile.php" in url:
            content_type = ContentType.PROFILE
        else:
            content_type = ContentType.PAGE

        username = search_regex(r"(?:facebook|fb)\.com/([^/?#]+)", url)
        if username == "profile.php":
            username = None

        return content_type, post_id, username
