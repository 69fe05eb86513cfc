"""Cache-Control and surrogate key derivation for edge-cached pages."""

from ._query import (
    TEMPLATE_TYPES,
    ContentItem,
    ContentSource,
    QueriedObject,
    QueryResult,
    QueryShapeError,
    StaticQueryResult,
    Term,
    classify,
)
from .server import (
    CacheControlBuilder,
    CacheControlHeader,
    HeaderSettings,
    SurrogateKeyCollection,
    build_response_headers,
)

__all__ = [
    "TEMPLATE_TYPES",
    "CacheControlBuilder",
    "CacheControlHeader",
    "ContentItem",
    "ContentSource",
    "HeaderSettings",
    "QueriedObject",
    "QueryResult",
    "QueryShapeError",
    "StaticQueryResult",
    "SurrogateKeyCollection",
    "Term",
    "build_response_headers",
    "classify",
]
