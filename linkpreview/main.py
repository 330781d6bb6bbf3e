"""
Link Preview API - FastAPI application entry point.

Builds preview metadata for links shared in chat: Twitter/X, YouTube,
Instagram, TikTok, Facebook, Apple Maps and any other website.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_settings
from .core.cache import PreviewCache
from .routes.api import router
from .services.scraper import PreviewScraper

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if get_settings().debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown events."""
    logger.info("Link Preview API starting up...")

    settings = get_settings()
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(f"Headless browser: {settings.headless}")
    logger.info(f"Preview cache TTL: {settings.preview_cache_ttl}s")

    # One cache for the lifetime of the process
    cache = PreviewCache(
        default_ttl=settings.cache_ttl,
        max_entries=settings.cache_max_entries,
    )
    app.state.scraper = PreviewScraper(cache, settings=settings)
    logger.info("Preview scraper initialized")

    yield

    logger.info("Link Preview API shutting down...")


app = FastAPI(
    title="Link Preview API",
    description=(
        "Extracts link preview metadata (title, description, image, author, "
        "engagement counters) for Twitter/X, YouTube, Instagram, TikTok, "
        "Facebook, Apple Maps and generic websites using a headless browser."
    ),
    version="1.0.0",
    lifespan=lifespan,
)

# CORS: LINKPREVIEW_CORS_ORIGINS (comma-separated) lists explicit origins; empty = "*" without credentials
_origins = [o.strip() for o in get_settings().cors_origins.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins if _origins else ["*"],
    allow_credentials=bool(_origins),
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(router, prefix="/api")


@app.get("/", tags=["root"])
async def root():
    return {
        "name": "Link Preview API",
        "version": "1.0.0",
        "docs": "/docs",
        "endpoints": {
            "preview": "/api/preview",
            "supported": "/api/supported",
            "health": "/api/health",
            "cache": "/api/cache",
        },
    }


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "linkpreview.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
