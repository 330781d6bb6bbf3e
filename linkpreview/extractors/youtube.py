"""
YouTube extractor - builds previews for videos.

Supports watch, youtu.be, shorts, embed and live URLs. A URL without a
video ID gets the minimal preview without opening a page.
"""

import logging

from ..core.browser import BrowserSession
from ..models.enums import ContentType, Platform
from ..models.response import Preview
from ..utils.helpers import first_of, search_regex, url_or_none
from .base import BaseExtractor

logger = logging.getLogger(__name__)

_VIDEO_ID_PATTERNS = (
    r"[?&]v=([a-zA-Z0-9_-]+)",
    r"youtu\.be/([a-zA-Z0-9_-]+)",
    r"youtube\.com/(?:shorts|embed|live|v)/([a-zA-Z0-9_-]+)",
)

_THUMBNAIL_URL = "https://img.youtube.com/vi/{video_id}/hqdefault.jpg"

_VIDEO_SCRIPT = """() => {
    const text = (el) => el ? el.textContent.trim() : null;
    const meta = (name) => {
        const el = document.querySelector(`meta[property="${name}"]`) ||
                   document.querySelector(`meta[name="${name}"]`);
        return el ? el.getAttribute('content') : null;
    };
    const channel = document.querySelector('#channel-name a') ||
                    document.querySelector('#owner-name a');
    const badge = document.querySelector('#channel-name .badge') ||
                  document.querySelector('#owner-name .badge');
    const imageLink = document.querySelector('link[rel="image_src"]');

    return {
        title: text(document.querySelector('#title h1')) || meta('og:title') || meta('title'),
        channelName: text(channel),
        channelUrl: channel ? channel.href : null,
        isVerified: badge !== null,
        viewCount: text(document.querySelector('.view-count')) ||
                   text(document.querySelector('#info .metadata-stats span')),
        dateString: text(document.querySelector('#info-strings yt-formatted-string')) ||
                    text(document.querySelector('#info .metadata span')),
        thumbnailUrl: (imageLink ? imageLink.href : null) || meta('og:image'),
        description: text(document.querySelector('#description-inline-expander')) ||
                     meta('og:description') || meta('description'),
        likeCount: text(document.querySelector('#top-level-buttons-computed button')),
    };
}"""


class YouTubeExtractor(BaseExtractor):
    """YouTube preview extractor."""

    platform = Platform.YOUTUBE
    site_name = "YouTube"
    wait_selector = "#title h1"

    async def _extract(self, session: BrowserSession, url: str) -> Preview:
        """Extract a preview from a video page."""
        video_id = self._video_id(url)
        if not video_id:
            logger.info("No YouTube video ID in %s, skipping page load", url)
            return self.fallback(url)

        async with self._open_page(session, url) as page:
            await self._wait_for_content(page)
            video = await self._evaluate(page, _VIDEO_SCRIPT)

        return self._preview(
            url,
            title=first_of(video.get("title")) or "YouTube video",
            description=first_of(video.get("description")) or "",
            image=url_or_none(video.get("thumbnailUrl")) or _THUMBNAIL_URL.format(video_id=video_id),
            author=first_of(video.get("channelName")),
            channel_url=url_or_none(video.get("channelUrl")),
            is_verified=bool(video.get("isVerified")),
            video_id=video_id,
            view_count=first_of(video.get("viewCount")),
            like_count=first_of(video.get("likeCount")),
            publish_date=first_of(video.get("dateString")),
            content_type=ContentType.VIDEO,
            fallback=not video,
        )

    def fallback(self, url: str) -> Preview:
        video_id = self._video_id(url)
        return self._preview(
            url,
            title="YouTube video",
            image=_THUMBNAIL_URL.format(video_id=video_id) if video_id else None,
            video_id=video_id,
            content_type=ContentType.VIDEO if video_id else None,
            fallback=True,
        )

    @staticmethod
    def _video_id(url: str) -> str | None:
        for pattern in _VIDEO_ID_PATTERNS:
            video_id = search_regex(pattern, url)
            if video_id:
                return video_id
        return None
