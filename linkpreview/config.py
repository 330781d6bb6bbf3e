from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    host: str = "0.0.0.0"
    port: int = 7652
    debug: bool = False

    # LINKPREVIEW_CORS_ORIGINS: comma-separated origins (e.g. "https://app.example.com"). Empty = allow "*" with no credentials.
    cors_origins: str = ""

    # Browser
    headless: bool = True
    user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/131.0.0.0 Safari/537.36"
    )
    accept_language: str = "en-US,en;q=0.9"

    # Timeouts in seconds
    navigation_timeout: float = 30.0
    selector_timeout: float = 5.0
    evaluate_timeout: float = 5.0

    # Cache TTLs in seconds. preview_cache_ttl is what the scraper uses.
    cache_ttl: float = 24 * 60 * 60
    preview_cache_ttl: float = 60 * 60
    # 0 = unbounded
    cache_max_entries: int = 0

    static_map_url: str = (
        "https://staticmap.openstreetmap.de/staticmap.php"
        "?center={lat},{lng}&zoom=15&size=600x400&maptype=mapnik"
        "&markers={lat},{lng},lightblue1"
    )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "LINKPREVIEW_"


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
