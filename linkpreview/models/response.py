from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .enums import ContentType, Platform


class _CamelModel(BaseModel):
    """Base model serialized with camelCase keys, as existing clients expect."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Coordinates(_CamelModel):
    """A latitude/longitude pair."""

    lat: float = Field(..., description="Latitude")
    lng: float = Field(..., description="Longitude")


class Preview(_CamelModel):
    """Normalized metadata describing the content behind a URL."""

    url: str = Field(..., description="Original URL, unmodified")
    platform: Platform = Field(..., description="Detected platform")
    title: str | None = Field(None, description="Content title")
    description: str | None = Field(None, description="Content description")
    image: str | None = Field(None, description="Absolute thumbnail URL")
    site_name: str | None = Field(None, description="Human-readable source name")

    # Authorship
    author: str | None = Field(None, description="Author or channel display name")
    author_handle: str | None = Field(None, description="Author handle without '@'")
    author_image: str | None = Field(None, description="Author avatar URL")

    # Identifiers, always derived from the URL
    video_id: str | None = Field(None, description="Video identifier")
    post_id: str | None = Field(None, description="Post/tweet/reel identifier")
    username: str | None = Field(None, description="Account name from the URL")
    content_type: ContentType | None = Field(None, description="post, reel, profile, page or video")

    # Engagement counters, kept as display strings ("1.2K")
    like_count: str | None = Field(None, description="Like counter as displayed")
    retweet_count: str | None = Field(None, description="Retweet counter as displayed")
    reply_count: str | None = Field(None, description="Reply counter as displayed")
    view_count: str | None = Field(None, description="View counter as displayed")

    # Platform extras
    text: str | None = Field(None, description="Tweet body")
    date: str | None = Field(None, description="Publication timestamp (ISO 8601)")
    publish_date: str | None = Field(None, description="Publication date as displayed")
    channel_url: str | None = Field(None, description="Channel URL")
    is_verified: bool | None = Field(None, description="Whether the author is verified")
    coordinates: Coordinates | None = Field(None, description="Map coordinates")
    address: str | None = Field(None, description="Street address")
    location_name: str | None = Field(None, description="Place name")
    favicon: str | None = Field(None, description="Site favicon URL")
    domain: str | None = Field(None, description="Host without www.")

    fallback: bool = Field(False, description="Built from URL patterns only")


class PreviewResponse(BaseModel):
    """Response model for the /preview endpoint."""

    success: bool = Field(True, description="Whether a preview was produced")
    data: Preview | None = Field(None, description="Extracted preview")
    warning: str | None = Field(None, description="Set when only limited data could be extracted")


class ErrorResponse(BaseModel):
    """Error response model."""

    success: bool = Field(False)
    error: str = Field(..., description="Error message")
    error_code: str | None = Field(None, description="Machine-readable error code")
