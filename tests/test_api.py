"""Tests for the HTTP surface, with the browser replaced by fakes."""

import pytest
from fastapi.testclient import TestClient

from linkpreview.core.cache import PreviewCache
from linkpreview.main import app
from linkpreview.models.enums import Platform
from linkpreview.routes.api import LIMITED_DATA_WARNING
from linkpreview.routes.deps import get_scraper
from linkpreview.services.scraper import PreviewScraper


@pytest.fixture()
def make_client(settings):
    def _make(launcher):
        scraper = PreviewScraper(PreviewCache(), launcher=launcher, settings=settings)
        app.dependency_overrides[get_scraper] = lambda: scraper
        return TestClient(app), scraper

    yield _make
    app.dependency_overrides.clear()


class TestPreviewEndpoint:
    def test_missing_url(self, make_client, fake_launcher):
        client, _ = make_client(fake_launcher())
        resp = client.get("/api/preview")
        assert resp.status_code == 400
        detail = resp.json()["detail"]
        assert detail["success"] is False
        assert detail["error_code"] == "url.required"

    def test_blank_url(self, make_client, fake_launcher):
        client, _ = make_client(fake_launcher())
        assert client.get("/api/preview", params={"url": "   "}).status_code == 400

    def test_preview_camel_case(self, make_client, fake_page, fake_launcher):
        page = fake_page(evaluate_results=[{"ogTitle": "Example Domain", "siteName": "Example"}])
        client, _ = make_client(fake_launcher([page]))

        resp = client.get("/api/preview", params={"url": "https://example.com"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is True
        assert "warning" not in body
        assert body["data"]["title"] == "Example Domain"
        assert body["data"]["siteName"] == "Example"
        assert body["data"]["platform"] == Platform.WEBSITE.value
        assert "authorHandle" not in body["data"]

    def test_launch_failure_returns_fallback_with_warning(self, make_client, fake_launcher):
        client, _ = make_client(fake_launcher(error=RuntimeError("no chromium")))

        resp = client.get("/api/preview", params={"url": "https://x.com/jack/status/20"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is True
        assert body["warning"] == LIMITED_DATA_WARNING
        assert body["data"]["title"] == "Tweet by jack"
        assert body["data"]["postId"] == "20"
        assert body["data"]["fallback"] is True

    def test_get_data_link_alias(self, make_client, fake_launcher):
        client, _ = make_client(fake_launcher())
        resp = client.get("/api/getDataLink", params={"url": "https://maps.apple.com/?ll=48.8566,2.3522&q=Paris"})
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["platform"] == "apple_maps"
        assert data["coordinates"] == {"lat": 48.8566, "lng": 2.3522}

    def test_alias_not_in_schema(self, make_client, fake_launcher):
        client, _ = make_client(fake_launcher())
        paths = client.get("/openapi.json").json()["paths"]
        assert "/api/preview" in paths
        assert "/api/getDataLink" not in paths


class TestCacheEndpoint:
    def test_delete_single(self, make_client, fake_launcher):
        client, scraper = make_client(fake_launcher())
        client.get("/api/preview", params={"url": "https://maps.apple.com/?q=Paris"})

        resp = client.delete("/api/cache", params={"url": "https://maps.apple.com/?q=Paris"})
        assert resp.json() == {"success": True, "deleted": True}
        assert len(scraper.cache) == 0

    def test_clear_all(self, make_client, fake_launcher):
        client, scraper = make_client(fake_launcher())
        client.get("/api/preview", params={"url": "https://maps.apple.com/?q=Paris"})
        client.get("/api/preview", params={"url": "https://maps.apple.com/?q=Rome"})

        resp = client.delete("/api/cache")
        assert resp.json() == {"success": True, "cleared": 2}
        assert len(scraper.cache) == 0


class TestInfoEndpoints:
    def test_supported(self, make_client, fake_launcher):
        client, _ = make_client(fake_launcher())
        body = client.get("/api/supported").json()
        assert body["total"] == len(Platform)
        assert {p["platform"] for p in body["platforms"]} == {p.value for p in Platform}

    def test_health(self, make_client, fake_launcher):
        client, _ = make_client(fake_launcher())
        body = client.get("/api/health").json()
        assert body == {"status": "healthy", "cache": {"entries": 0}}

    def test_root(self, make_client, fake_launcher):
        client, _ = make_client(fake_launcher())
        body = client.get("/").json()
        assert body["endpoints"]["preview"] == "/api/preview"
