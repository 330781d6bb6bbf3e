"""Core utilities: platform classification, preview cache and browser sessions."""

from .browser import BrowserSession, PlaywrightSession, launch_browser
from .cache import PreviewCache
from .classifier import classify, get_supported_platforms

__all__ = [
    "BrowserSession",
    "PlaywrightSession",
    "PreviewCache",
    "classify",
    "get_supported_platforms",
    "launch_browser",
]
