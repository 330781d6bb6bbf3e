from .enums import ContentType, Platform
from .response import Coordinates, ErrorResponse, Preview, PreviewResponse

__all__ = [
    "ContentType",
    "Coordinates",
    "ErrorResponse",
    "Platform",
    "Preview",
    "PreviewResponse",
]
