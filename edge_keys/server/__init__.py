"""Server utilities for deriving edge cache headers."""

from .cache_control import (
    CacheControlBuilder,
    CacheControlHeader,
    StaleDirectivesBuilder,
    merge_directives,
)
from .header_support import format_directives, format_surrogate_keys
from .response_headers import (
    ResponseHeaders,
    build_response_headers,
    collect_surrogate_keys,
)
from .settings import HeaderSettings
from .surrogate_keys import SurrogateKeyCollection

__all__ = [
    "CacheControlBuilder",
    "CacheControlHeader",
    "HeaderSettings",
    "ResponseHeaders",
    "StaleDirectivesBuilder",
    "SurrogateKeyCollection",
    "build_response_headers",
    "collect_surrogate_keys",
    "format_directives",
    "format_surrogate_keys",
    "merge_directives",
]
