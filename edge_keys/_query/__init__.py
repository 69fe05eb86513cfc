"""Internal query-result helpers used by :mod:`edge_keys.server`."""

from .classification import TEMPLATE_TYPES, TERM_ARCHIVE_TYPES, classify
from .errors import QueryShapeError
from .model import (
    ContentItem,
    ContentSource,
    QueriedObject,
    QueryResult,
    StaticQueryResult,
    Term,
)

__all__ = [
    "TEMPLATE_TYPES",
    "TERM_ARCHIVE_TYPES",
    "ContentItem",
    "ContentSource",
    "QueriedObject",
    "QueryResult",
    "QueryShapeError",
    "StaticQueryResult",
    "Term",
    "classify",
]
