"""Tests for Pydantic models and enum definitions."""

import pytest
from pydantic import ValidationError

from linkpreview.models import ContentType, Coordinates, ErrorResponse, Platform, Preview, PreviewResponse


# ── Enum completeness ────────────────────────────────────────────────
class TestEnums:
    def test_platforms(self):
        expected = {"twitter", "youtube", "instagram", "tiktok", "facebook", "apple_maps", "website"}
        assert {p.value for p in Platform} == expected

    def test_content_types(self):
        expected = {"post", "reel", "profile", "page", "video"}
        assert {c.value for c in ContentType} == expected

    def test_platform_is_str(self):
        assert Platform.APPLE_MAPS == "apple_maps"


# ── Preview ──────────────────────────────────────────────────────────
class TestPreview:
    def test_minimal(self):
        preview = Preview(url="https://example.com", platform=Platform.WEBSITE)
        assert preview.title is None
        assert preview.coordinates is None
        assert preview.fallback is False

    def test_url_and_platform_required(self):
        with pytest.raises(ValidationError):
            Preview(url="https://example.com")
        with pytest.raises(ValidationError):
            Preview(platform=Platform.WEBSITE)

    def test_camel_case_serialization(self):
        preview = Preview(
            url="https://x.com/jack/status/20",
            platform=Platform.TWITTER,
            site_name="X",
            author_handle="jack",
            post_id="20",
            like_count="150K",
            is_verified=False,
        )
        data = preview.model_dump(by_alias=True, exclude_none=True)
        assert data["siteName"] == "X"
        assert data["authorHandle"] == "jack"
        assert data["postId"] == "20"
        assert data["likeCount"] == "150K"
        assert data["isVerified"] is False
        assert data["platform"] == "twitter"
        assert "site_name" not in data
        assert "videoId" not in data

    def test_populate_by_alias(self):
        preview = Preview.model_validate(
            {"url": "https://youtu.be/abc", "platform": "youtube", "videoId": "abc", "channelUrl": "https://y"}
        )
        assert preview.video_id == "abc"
        assert preview.channel_url == "https://y"

    def test_coordinates(self):
        preview = Preview(
            url="https://maps.apple.com/?ll=1,2",
            platform=Platform.APPLE_MAPS,
            coordinates=Coordinates(lat=1.5, lng=-2.25),
        )
        data = preview.model_dump(by_alias=True, exclude_none=True)
        assert data["coordinates"] == {"lat": 1.5, "lng": -2.25}

    def test_coordinates_must_be_numeric(self):
        with pytest.raises(ValidationError):
            Coordinates(lat="north", lng=2)

    def test_content_type_from_string(self):
        preview = Preview(url="https://instagram.com/p/x", platform="instagram", content_type="reel")
        assert preview.content_type == ContentType.REEL


# ── Response envelopes ───────────────────────────────────────────────
class TestResponses:
    def test_preview_response_defaults(self):
        resp = PreviewResponse()
        assert resp.success is True
        assert resp.data is None
        assert resp.warning is None

    def test_preview_response_with_warning(self):
        preview = Preview(url="https://example.com", platform=Platform.WEBSITE, fallback=True)
        resp = PreviewResponse(data=preview, warning="limited")
        data = resp.model_dump(by_alias=True, exclude_none=True)
        assert data["data"]["fallback"] is True
        assert data["warning"] == "limited"

    def test_error_response(self):
        err = ErrorResponse(error="URL is required", error_code="url.required")
        assert err.success is False
        assert err.error_code == "url.required"
