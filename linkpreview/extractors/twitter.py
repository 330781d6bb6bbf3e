"""
Twitter/X extractor - builds previews for tweets.

The tweet article is scraped first (author, avatar, text, photo, counters).
When no article is rendered, Open Graph / Twitter card tags are used
instead. Username and tweet ID always come from the URL.
"""

import logging

from ..core.browser import BrowserSession
from ..models.enums import Platform
from ..models.response import Preview
from ..utils.helpers import first_of, search_regex, url_or_none
from .base import META_TAGS_SCRIPT, BaseExtractor

logger = logging.getLogger(__name__)

# Path segments on twitter.com / x.com that are not usernames
_RESERVED_PATHS = frozenset({"i", "search", "explore", "home"})

_TWEET_SCRIPT = """() => {
    const article = document.querySelector('article[data-testid="tweet"]');
    if (!article) return null;

    const text = (el) => el ? el.textContent.trim() : null;
    const userInfo = article.querySelector('div[data-testid="User-Name"]');
    const avatar = article.querySelector('img[data-testid="Profile-image"]') ||
                   article.querySelector('div[data-testid="Tweet-User-Avatar"] img');
    const photo = article.querySelector('div[data-testid="tweetPhoto"] img') ||
                  article.querySelector('img[data-testid="tweetPhoto"]');
    const time = article.querySelector('time');

    const metrics = {};
    for (const testId of ['reply', 'retweet', 'like']) {
        const el = article.querySelector(`[data-testid="${testId}"]`);
        if (el) metrics[testId] = text(el.querySelector('span'));
    }

    return {
        authorName: userInfo ? text(userInfo.querySelector('span:not([dir="ltr"])')) : null,
        authorHandle: userInfo ? text(userInfo.querySelector('span[dir="ltr"]')) : null,
        authorImage: avatar ? avatar.src : null,
        text: text(article.querySelector('div[data-testid="tweetText"]')),
        image: photo ? photo.src : null,
        metrics,
        date: time ? time.getAttribute('datetime') : null,
    };
}"""


class TwitterExtractor(BaseExtractor):
    """Twitter/X preview extractor."""

    platform = Platform.TWITTER
    site_name = "X"
    wait_selector = 'article[data-testid="tweet"]'

    async def _extract(self, session: BrowserSession, url: str) -> Preview:
        """Extract a preview from a tweet page."""
        username = self._username(url)
        tweet_id = self._tweet_id(url)

        async with self._open_page(session, url) as page:
            await self._wait_for_content(page)
            tweet = await self._evaluate(page, _TWEET_SCRIPT)
            meta = {} if tweet else await self._evaluate(page, META_TAGS_SCRIPT)

        if tweet:
            return self._from_tweet(url, tweet, username, tweet_id)

        logger.debug("No tweet article rendered for %s, using meta tags", url)
        return self._preview(
            url,
            title=self._meta_title(meta) or self._default_title(username),
            description=self._meta_description(meta) or "",
            image=url_or_none(self._meta_image(meta)),
            author=username,
            author_handle=username,
            username=username,
            post_id=tweet_id,
        )

    def _from_tweet(self, url: str, tweet: dict, username: str | None, tweet_id: str | None) -> Preview:
        author = first_of(tweet.get("authorName"), username)
        handle = first_of(tweet.get("authorHandle"))
        metrics = tweet.get("metrics") or {}
        text = first_of(tweet.get("text"))

        return self._preview(
            url,
            title=self._default_title(author),
            description=text or "",
            text=text,
            image=url_or_none(tweet.get("image")),
            author=author,
            author_handle=handle.removeprefix("@") if handle else username,
            author_image=url_or_none(tweet.get("authorImage")),
            username=username,
            post_id=tweet_id,
            like_count=first_of(metrics.get("like")) or "0",
            retweet_count=first_of(metrics.get("retweet")) or "0",
            reply_count=first_of(metrics.get("reply")) or "0",
            date=first_of(tweet.get("date")),
            is_verified=False,
        )

    def fallback(self, url: str) -> Preview:
        username = self._username(url)
        return self._preview(
            url,
            title=self._default_title(username),
            author=username,
            author_handle=username,
            username=username,
            post_id=self._tweet_id(url),
            fallback=True,
        )

    @staticmethod
    def _default_title(author: str | None) -> str:
        return f"Tweet by {author or 'user'}"

    @staticmethod
    def _username(url: str) -> str | None:
        username = search_regex(r"(?:twitter|x)\.com/([^/?#]+)", url)
        if username and username.lower() not in _RESERVED_PATHS:
            return username
        return None

    @staticmethod
    def _tweet_id(url: str) -> str | None:
        return search_regex(r"/status(?:es)?/(\d+)", url)
