"""
General utility functions used across extractors.
"""

import html
import re
from typing import Any
from urllib.parse import urljoin, urlparse


def clean_text(raw: str) -> str:
    """Decode HTML entities and collapse whitespace."""
    return re.sub(r"\s+", " ", html.unescape(raw)).strip()


def str_or_none(v: Any) -> str | None:
    """Convert value to a stripped string or return None."""
    if v is None:
        return None
    result = str(v).strip()
    return result if result else None


def url_or_none(v: Any) -> str | None:
    """Validate and return URL or None."""
    if not v or not isinstance(v, str):
        return None
    v = v.strip()
    if v.startswith(("http://", "https://")):
        return v
    if v.startswith("//"):
        return f"https:{v}"
    return None


def first_of(*values: Any) -> str | None:
    """Return the first value that is a non-blank string, stripped."""
    for value in values:
        result = str_or_none(value) if isinstance(value, str) else None
        if result:
            return result
    return None


def search_regex(pattern: str, text: str | None, group: int | str = 1, flags: int = re.IGNORECASE) -> str | None:
    """Search for a regex pattern in text. Returns None if not found."""
    if not text:
        return None
    match = re.search(pattern, text, flags)
    if not match:
        return None
    try:
        return match.group(group)
    except (IndexError, re.error):
        return None


def get_domain(url: str) -> str | None:
    """Hostname of url without a leading 'www.', or None if unparseable."""
    try:
        hostname = urlparse(url if "://" in url else f"https://{url}").hostname
    except (ValueError, TypeError):
        return None
    if not hostname:
        return None
    return hostname.removeprefix("www.")


def absolutize(url: str | None, base: str) -> str | None:
    """Resolve a possibly relative URL against base."""
    if not url:
        return None
    absolute = url_or_none(url)
    if absolute:
        return absolute
    try:
        return url_or_none(urljoin(base, url))
    except ValueError:
        return None


def float_or_none(v: Any, scale: float = 1.0) -> float | None:
    """Convert value to float or return None."""
    if v is None:
        return None
    try:
        return float(v) / scale
    except (ValueError, TypeError):
        return None


def truncate(text: str | None, length: int) -> str | None:
    """Cut text to at most length characters."""
    if text is None:
        return None
    return text[:length]
