"""
API route definitions for the Link Preview API.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from ..core.classifier import classify, get_supported_platforms
from ..models.response import ErrorResponse, PreviewResponse
from ..services.scraper import PreviewScraper
from .deps import get_scraper

logger = logging.getLogger(__name__)

router = APIRouter()

LIMITED_DATA_WARNING = "Limited data: unable to extract full metadata"


@router.get(
    "/preview",
    response_model=PreviewResponse,
    response_model_exclude_none=True,
    responses={
        400: {"model": ErrorResponse, "description": "Missing URL"},
        500: {"model": ErrorResponse, "description": "Extraction failed"},
    },
    summary="Extract a link preview",
    description=(
        "Accepts a URL, detects the platform it belongs to and returns preview "
        "metadata (title, description, image, author, counters)."
    ),
)
@router.get("/getDataLink", response_model=PreviewResponse, response_model_exclude_none=True, include_in_schema=False)
async def get_preview(url: str | None = None, scraper: PreviewScraper = Depends(get_scraper)):
    """
    Main preview endpoint.

    When extraction fails entirely, a preview built from the URL alone is
    returned with a warning instead of an error.
    """
    url = (url or "").strip()
    if not url:
        raise HTTPException(
            status_code=400,
            detail={
                "success": False,
                "error": "URL is required",
                "error_code": "url.required",
            },
        )

    preview = await scraper.scrape(url)
    if preview is not None:
        return PreviewResponse(success=True, data=preview)

    try:
        fallback = scraper.extractor_for(classify(url)).fallback(url)
    except Exception as e:
        logger.warning("URL fallback failed for %s: %s", url, e)
        raise HTTPException(
            status_code=500,
            detail={
                "success": False,
                "error": "Unable to extract metadata",
                "error_code": "extraction.failed",
            },
        )

    return PreviewResponse(success=True, data=fallback, warning=LIMITED_DATA_WARNING)


@router.delete(
    "/cache",
    summary="Evict cached previews",
    description="Removes the cached preview for `url`, or every cached preview when no URL is given.",
)
async def evict_cache(url: str | None = None, scraper: PreviewScraper = Depends(get_scraper)):
    if url:
        return {"success": True, "deleted": scraper.cache.delete(url)}

    cleared = len(scraper.cache)
    scraper.cache.clear()
    logger.info("Cleared %d cached previews", cleared)
    return {"success": True, "cleared": cleared}


@router.get(
    "/supported",
    summary="List supported platforms",
    description="Returns a list of all supported platforms with example URLs.",
)
async def list_supported():
    """Return information about all supported platforms."""
    platforms = get_supported_platforms()
    return {
        "platforms": platforms,
        "total": len(platforms),
    }


@router.get(
    "/health",
    summary="Health check",
    description="Check the health of the API and the size of the preview cache.",
)
async def health_check(scraper: PreviewScraper = Depends(get_scraper)):
    """Health check endpoint."""
    return {
        "status": "healthy",
        "cache": {
            "entries": len(scraper.cache),
        },
    }
