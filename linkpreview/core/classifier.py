"""
Platform classification for submitted URLs.

Classification is a plain substring test against a fixed, ordered list of
hostnames: the first platform whose hostname appears anywhere in the
lower-cased URL wins. Anything unrecognised (including empty input) is a
generic website. The classifier never raises and has no side effects.
"""

from ..models.enums import Platform

# Order matters: first match wins.
_PLATFORM_HOSTS: list[tuple[Platform, tuple[str, ...]]] = [
    (Platform.TWITTER, ("twitter.com", "x.com")),
    (Platform.YOUTUBE, ("youtube.com", "youtu.be")),
    (Platform.INSTAGRAM, ("instagram.com",)),
    (Platform.TIKTOK, ("tiktok.com",)),
    (Platform.FACEBOOK, ("facebook.com", "fb.com")),
    (Platform.APPLE_MAPS, ("maps.apple.com",)),
]


def classify(url: str | None) -> Platform:
    """Map a URL to the platform it belongs to, defaulting to WEBSITE."""
    if not url or not isinstance(url, str):
        return Platform.WEBSITE

    lowered = url.lower()
    for platform, hosts in _PLATFORM_HOSTS:
        if any(host in lowered for host in hosts):
            return platform

    return Platform.WEBSITE


def get_supported_platforms() -> list[dict]:
    """Return information about all supported platforms."""
    platform_info = {
        Platform.TWITTER: {
            "name": "Twitter/X",
            "domains": ["twitter.com", "x.com"],
            "examples": ["https://twitter.com/user/status/123456789"],
        },
        Platform.YOUTUBE: {
            "name": "YouTube",
            "domains": ["youtube.com", "youtu.be"],
            "examples": [
                "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
                "https://youtu.be/dQw4w9WgXcQ",
            ],
        },
        Platform.INSTAGRAM: {
            "name": "Instagram",
            "domains": ["instagram.com"],
            "examples": [
                "https://www.instagram.com/p/POST_ID/",
                "https://www.instagram.com/reel/REEL_ID/",
                "https://www.instagram.com/username/",
            ],
        },
        Platform.TIKTOK: {
            "name": "TikTok",
            "domains": ["tiktok.com"],
            "examples": [
                "https://www.tiktok.com/@user/video/123456789",
                "https://www.tiktok.com/@user",
            ],
        },
        Platform.FACEBOOK: {
            "name": "Facebook",
            "domains": ["facebook.com", "fb.com"],
            "examples": [
                "https://www.facebook.com/page/posts/123456789",
                "https://www.facebook.com/page",
            ],
        },
        Platform.APPLE_MAPS: {
            "name": "Apple Maps",
            "domains": ["maps.apple.com"],
            "examples": ["https://maps.apple.com/?ll=48.8566,2.3522&q=Paris"],
        },
        Platform.WEBSITE: {
            "name": "Website",
            "domains": ["*"],
            "examples": ["https://example.com/article"],
        },
    }

    return [{"platform": p.value, **info} for p, info in platform_info.items()]
