"""Tests for environment-driven settings."""

from linkpreview.config import Settings


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.cors_origins == ""
        assert settings.preview_cache_ttl == 3600
        assert settings.navigation_timeout == 30.0

    def test_prefixed_env(self, monkeypatch):
        monkeypatch.setenv("LINKPREVIEW_CORS_ORIGINS", "https://app.example.com")
        monkeypatch.setenv("LINKPREVIEW_PREVIEW_CACHE_TTL", "60")
        settings = Settings()
        assert settings.cors_origins == "https://app.example.com"
        assert settings.preview_cache_ttl == 60

    def test_unprefixed_env_ignored(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", "https://other.example.com")
        assert Settings().cors_origins == ""
