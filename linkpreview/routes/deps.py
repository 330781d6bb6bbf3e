from fastapi import Request

from ..services.scraper import PreviewScraper


def get_scraper(request: Request) -> PreviewScraper:
    """The scraper created at application startup."""
    return request.app.state.scraper
