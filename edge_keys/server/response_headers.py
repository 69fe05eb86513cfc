"""Assemble the final response headers for a query result."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .._query import ContentSource
from .cache_control import CacheControlHeader
from .header_support import format_surrogate_keys
from .settings import HeaderSettings
from .surrogate_keys import SurrogateKeyCollection

__all__ = ["ResponseHeaders", "build_response_headers", "collect_surrogate_keys"]


@dataclass(frozen=True)
class ResponseHeaders:
    """Computed header state for one response."""

    directives: Mapping[str, Any]
    cache_control: str | None
    surrogate_keys: tuple[str, ...]
    surrogate_key_header: str
    surrogate_key_value: str | None

    def as_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {}
        if self.cache_control:
            headers[CacheControlHeader.header_name] = self.cache_control
        if self.surrogate_key_value:
            headers[self.surrogate_key_header] = self.surrogate_key_value
        return headers


def collect_surrogate_keys(
    query: Any, settings: HeaderSettings, source: ContentSource
) -> SurrogateKeyCollection:
    return SurrogateKeyCollection(
        query,
        list_taxonomies=source.list_taxonomies,
        get_terms_for=source.get_terms_for,
        get_queried_object=source.get_queried_object,
        taxonomy_filter=settings.filter_taxonomies,
    )


def build_response_headers(
    query: Any, settings: HeaderSettings, source: ContentSource
) -> ResponseHeaders:
    """Compute ``Cache-Control`` and surrogate key headers for ``query``."""

    cache_control = CacheControlHeader(settings)
    keys = tuple(collect_surrogate_keys(query, settings, source).get_keys())
    key_value = format_surrogate_keys(keys, settings.surrogate_key_delimiter)
    return ResponseHeaders(
        directives=cache_control.directives,
        cache_control=cache_control.value(),
        surrogate_keys=keys,
        surrogate_key_header=settings.surrogate_key_header,
        surrogate_key_value=key_value or None,
    )
