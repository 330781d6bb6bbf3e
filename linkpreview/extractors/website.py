"""
Generic website extractor.

Used for every URL that does not belong to a known platform. The page
script only collects raw candidates; the preference order for each field
is applied here:

- title:       og:title, twitter:title, <title>
- description: description, og:description, twitter:description, first <p>
- image:       og:image, twitter:image, first absolute <img>
- siteName:    og:site_name, else <title> with its " - Site" / " | Site" tail cut off
- author:      author, article:author, .author / [rel=author]
- favicon:     <link rel="icon">, else <origin>/favicon.ico
"""

import re
from typing import Any

from ..core.browser import BrowserSession
from ..models.enums import Platform
from ..models.response import Preview
from ..utils.helpers import absolutize, clean_text, first_of, get_domain, truncate, url_or_none
from .base import BaseExtractor

_DESCRIPTION_LENGTH = 200

_TITLE_SEPARATOR = re.compile(r"\s+[-|]\s*")

_PAGE_SCRIPT = """() => {
    const meta = (selector) => {
        const el = document.querySelector(selector);
        return el ? el.getAttribute('content') : null;
    };
    const text = (el) => el ? el.textContent.trim() : null;
    const icon = document.querySelector('link[rel="icon"], link[rel="shortcut icon"]');
    const img = document.querySelector('img[src^="http"]');

    return {
        ogTitle: meta('meta[property="og:title"]'),
        twitterTitle: meta('meta[name="twitter:title"]'),
        documentTitle: text(document.querySelector('title')),
        metaDescription: meta('meta[name="description"]'),
        ogDescription: meta('meta[property="og:description"]'),
        twitterDescription: meta('meta[name="twitter:description"]'),
        firstParagraph: text(document.querySelector('p')),
        ogImage: meta('meta[property="og:image"]'),
        twitterImage: meta('meta[name="twitter:image"]'),
        firstImage: img ? img.src : null,
        siteName: meta('meta[property="og:site_name"]'),
        authorMeta: meta('meta[name="author"]'),
        articleAuthor: meta('meta[property="article:author"]'),
        authorNode: text(document.querySelector('.author, [rel="author"]')),
        favicon: icon ? icon.href : null,
        origin: window.location.origin,
    };
}"""


class WebsiteExtractor(BaseExtractor):
    """Generic Open Graph / Twitter card extractor."""

    platform = Platform.WEBSITE
    site_name = "Website"

    async def _extract(self, session: BrowserSession, url: str) -> Preview:
        """Extract a preview from any web page."""
        domain = get_domain(url) or "website"

        async with self._open_page(session, url) as page:
            data = await self._evaluate(page, _PAGE_SCRIPT)

        return self._from_page(url, domain, data)

    def _from_page(self, url: str, domain: str, data: dict[str, Any]) -> Preview:
        document_title = first_of(data.get("documentTitle"))
        paragraph = first_of(data.get("firstParagraph"))
        title = first_of(data.get("ogTitle"), data.get("twitterTitle"), document_title)

        description = first_of(
            data.get("metaDescription"),
            data.get("ogDescription"),
            data.get("twitterDescription"),
            truncate(clean_text(paragraph), _DESCRIPTION_LENGTH) if paragraph else None,
        )

        image = first_of(data.get("ogImage"), data.get("twitterImage"), data.get("firstImage"))

        site_name = first_of(data.get("siteName")) or self.site_name_from_title(document_title)

        favicon = url_or_none(data.get("favicon"))
        if not favicon:
            origin = url_or_none(data.get("origin"))
            favicon = f"{origin}/favicon.ico" if origin else f"https://{domain}/favicon.ico"

        return self._preview(
            url,
            title=title or domain,
            description=description or "",
            image=absolutize(image, url),
            site_name=site_name or domain,
            author=first_of(data.get("authorMeta"), data.get("articleAuthor"), data.get("authorNode")),
            favicon=favicon,
            domain=domain,
        )

    def fallback(self, url: str) -> Preview:
        domain = get_domain(url)
        if not domain:
            return self._preview(url, title=url, fallback=True)
        return self._preview(
            url,
            title=domain,
            site_name=domain,
            favicon=f"https://{domain}/favicon.ico",
            domain=domain,
            fallback=True,
        )

    @staticmethod
    def site_name_from_title(title: str | None) -> str | None:
        """'Article - Example' -> 'Article'; titles without a separator pass through."""
        if not title:
            return None
        return first_of(_TITLE_SEPARATOR.split(title, maxsplit=1)[0])
