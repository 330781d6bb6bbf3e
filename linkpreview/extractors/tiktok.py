"""
TikTok extractor - builds previews for videos and profiles.

A URL containing /video/ or /t/ is a video, anything else a profile.
The video ID and username come from the submitted URL only.
"""

from ..core.browser import BrowserSession
from ..models.enums import ContentType, Platform
from ..models.response import Preview
from ..utils.helpers import first_of, search_regex, url_or_none
from .base import META_TAGS_SCRIPT, BaseExtractor

_VIDEO_ID_PATTERNS = (
    r"tiktok\.com/@[^/]+/video/(\d+)",
    r"tiktok\.com/t/([^/?#]+)",
)


class TikTokExtractor(BaseExtractor):
    """TikTok preview extractor."""

    platform = Platform.TIKTOK
    site_name = "TikTok"

    async def _extract(self, session: BrowserSession, url: str) -> Preview:
        """Extract a preview from a TikTok page."""
        content_type, video_id, username = self._parse_url(url)

        async with self._open_page(session, url) as page:
            meta = await self._evaluate(page, META_TAGS_SCRIPT)

        title = self._meta_title(meta)
        author = first_of(title.split("-")[0]) if title else None

        return self._preview(
            url,
            title=title or self._default_title(content_type, username),
            description=self._meta_description(meta) or "",
            image=url_or_none(self._meta_image(meta)),
            author=author or username,
            username=username,
            video_id=video_id,
            content_type=content_type,
        )

    def fallback(self, url: str) -> Preview:
        content_type, video_id, username = self._parse_url(url)
        return self._preview(
            url,
            title=self._default_title(content_type, username),
            author=username,
            username=username,
            video_id=video_id,
            content_type=content_type,
            fallback=True,
        )

    @staticmethod
    def _default_title(content_type: ContentType, username: str | None) -> str:
        if content_type == ContentType.VIDEO:
            return "Video on TikTok"
        return f"Profile of {username or 'user'} on TikTok"

    @classmethod
    def _parse_url(cls, url: str) -> tuple[ContentType, str | None, str | None]:
        """Return (content type, video ID, username) from the URL path."""
        is_video = "/video/" in url or "/t/" in url
        content_type = ContentType.VIDEO if is_video else ContentType.PROFILE
        video_id = cls._video_id(url) if is_video else None
        username = search_regex(r"tiktok\.com/@([^/?#]+)", url)
        return content_type, video_id, username

    @staticmethod
    def _video_id(url: str | None) -> str | None:
        for pattern in _VIDEO_ID_PATTERNS:
            video_id = search_regex(pattern, url)
            if video_id:
                return video_id
        return None
