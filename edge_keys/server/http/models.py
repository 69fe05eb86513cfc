"""Pydantic request and response models for the header HTTP API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from ..._query import ContentItem, ContentSource, QueriedObject, StaticQueryResult, Term
from ..header_support import absint
from ..response_headers import ResponseHeaders
from ..settings import HeaderSettings


class ContentItemPayload(BaseModel):
    """Matched content item."""

    id: int
    author: int = 0


class QueriedObjectPayload(BaseModel):
    """Term an archive view was queried for."""

    id: int | None = None
    taxonomy: str | None = None


class QueryResultPayload(BaseModel):
    """Description of the query result a response is rendered from."""

    items: list[ContentItemPayload] = Field(default_factory=list)
    types: list[str] = Field(
        default_factory=list,
        description="Template types that hold for this query, e.g. ['single', 'singular'].",
    )
    taxonomies: list[str] = Field(
        default_factory=list,
        description="Registered taxonomies; defaults to the keys of terms.",
    )
    terms: dict[str, list[int]] = Field(
        default_factory=dict,
        description="Term identifiers of the first item, keyed by taxonomy.",
    )
    queried_object: QueriedObjectPayload | None = None

    def to_query(self) -> StaticQueryResult:
        return StaticQueryResult.from_parts(
            items=[ContentItem(id=item.id, author=item.author) for item in self.items],
            types=self.types,
        )

    def to_source(self) -> ContentSource:
        terms: dict[tuple[int, str], tuple[Term, ...]] = {}
        if self.items:
            item_id = absint(self.items[0].id)
            terms = {
                (item_id, taxonomy): tuple(Term(id=term_id, taxonomy=taxonomy) for term_id in ids)
                for taxonomy, ids in self.terms.items()
            }
        queried = None
        if self.queried_object is not None:
            queried = QueriedObject(
                id=self.queried_object.id, taxonomy=self.queried_object.taxonomy
            )
        return ContentSource(
            taxonomies=tuple(self.taxonomies or self.terms), terms=terms, queried_object=queried
        )


class HeaderPreviewResponse(BaseModel):
    """Headers computed for a query result."""

    directives: dict[str, Any]
    cache_control: str | None
    surrogate_keys: tuple[str, ...]
    surrogate_key_header: str
    surrogate_key_value: str | None

    @classmethod
    def from_headers(cls, headers: ResponseHeaders) -> "HeaderPreviewResponse":
        return cls(
            directives=dict(headers.directives),
            cache_control=headers.cache_control,
            surrogate_keys=headers.surrogate_keys,
            surrogate_key_header=headers.surrogate_key_header,
            surrogate_key_value=headers.surrogate_key_value,
        )


class HeaderSettingsResponse(BaseModel):
    """Serializable view over :class:`HeaderSettings`."""

    cache_control_ttl: int | None
    stale_while_revalidate: int | None
    stale_if_error: int | None
    surrogate_key_header: str
    surrogate_key_delimiter: str
    taxonomies: tuple[str, ...] | None

    @classmethod
    def from_settings(cls, settings: HeaderSettings) -> "HeaderSettingsResponse":
        return cls(
            cache_control_ttl=settings.configured_ttl(),
            stale_while_revalidate=settings.stale_while_revalidate,
            stale_if_error=settings.stale_if_error,
            surrogate_key_header=settings.surrogate_key_header,
            surrogate_key_delimiter=settings.surrogate_key_delimiter,
            taxonomies=settings.taxonomies,
        )


__all__ = [
    "ContentItemPayload",
    "HeaderPreviewResponse",
    "HeaderSettingsResponse",
    "QueriedObjectPayload",
    "QueryResultPayload",
]
