"""Preview extraction services."""

from .scraper import PreviewScraper

__all__ = ["PreviewScraper"]
