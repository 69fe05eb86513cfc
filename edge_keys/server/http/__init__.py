"""HTTP helpers for previewing and applying edge cache headers."""

from .app import apply_response_headers, create_header_app, create_header_router
from .models import HeaderPreviewResponse, HeaderSettingsResponse, QueryResultPayload

__all__ = [
    "HeaderPreviewResponse",
    "HeaderSettingsResponse",
    "QueryResultPayload",
    "apply_response_headers",
    "create_header_app",
    "create_header_router",
]
