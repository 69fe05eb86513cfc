"""Query-result model and in-memory content source."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import (
    Any,
    Iterable,
    Mapping,
    Protocol,
    Sequence,
    runtime_checkable,
)

from .classification import TEMPLATE_TYPES, TERM_ARCHIVE_TYPES
from .errors import QueryShapeError

__all__ = [
    "ContentItem",
    "ContentSource",
    "QueriedObject",
    "QueryResult",
    "StaticQueryResult",
    "Term",
]


@dataclass(frozen=True)
class ContentItem:
    """A matched content item: numeric identifier plus its author."""

    id: int
    author: int = 0


@dataclass(frozen=True)
class Term:
    """Taxonomy term attached to a content item."""

    id: int | None
    taxonomy: str = ""


@dataclass(frozen=True)
class QueriedObject:
    """The single term an archive view was queried for."""

    id: int | None
    taxonomy: str | None


@runtime_checkable
class QueryResult(Protocol):
    """Capabilities the surrogate key collector reads from a query."""

    def matched_items(self) -> Sequence[Any]: ...

    def is_of_type(self, name: str) -> bool: ...

    def is_single_view(self) -> bool: ...

    def is_term_archive(self) -> bool: ...


@dataclass(frozen=True)
class StaticQueryResult:
    """Query result answering its predicates from a fixed set of true types."""

    items: tuple[ContentItem, ...] = ()
    types: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))
        types = _freeze_types(self.types)
        unknown = types.difference(TEMPLATE_TYPES)
        if unknown:
            names = ", ".join(sorted(unknown))
            raise QueryShapeError(f"Unknown template types: {names}")
        object.__setattr__(self, "types", types)

    @classmethod
    def from_parts(
        cls,
        items: Iterable[ContentItem | Mapping[str, Any]] = (),
        types: Iterable[str] = (),
    ) -> "StaticQueryResult":
        return cls(
            items=tuple(_coerce_item(item) for item in items),
            types=types,  # type: ignore[arg-type]
        )

    def matched_items(self) -> Sequence[ContentItem]:
        return self.items

    def is_of_type(self, name: str) -> bool:
        return name in self.types

    def is_single_view(self) -> bool:
        return "single" in self.types

    def is_term_archive(self) -> bool:
        return not self.types.isdisjoint(TERM_ARCHIVE_TYPES)


@dataclass(frozen=True)
class ContentSource:
    """In-memory stand-in for the host's taxonomy and term lookups."""

    taxonomies: tuple[str, ...] = ()
    terms: Mapping[tuple[int, str], tuple[Term, ...]] = field(default_factory=dict)
    queried_object: QueriedObject | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "taxonomies", tuple(self.taxonomies))
        object.__setattr__(
            self,
            "terms",
            MappingProxyType(
                {
                    (int(item_id), str(taxonomy)): tuple(terms)
                    for (item_id, taxonomy), terms in self.terms.items()
                }
            ),
        )

    def list_taxonomies(self) -> tuple[str, ...]:
        return self.taxonomies

    def get_terms_for(self, item_id: int, taxonomy: str) -> tuple[Term, ...]:
        if taxonomy not in self.taxonomies:
            raise KeyError(taxonomy)
        return self.terms.get((item_id, taxonomy), ())

    def get_queried_object(self) -> QueriedObject | None:
        return self.queried_object


def _freeze_types(value: Any) -> frozenset[str]:
    if isinstance(value, str):
        raise QueryShapeError("Template types must be an iterable of names")
    try:
        return frozenset(str(name) for name in value)
    except TypeError as exc:
        raise QueryShapeError("Template types must be iterable") from exc


def _coerce_item(item: ContentItem | Mapping[str, Any]) -> ContentItem:
    if isinstance(item, ContentItem):
        return item
    if isinstance(item, Mapping):
        return ContentItem(id=item.get("id", 0), author=item.get("author", 0))
    raise QueryShapeError(f"Unsupported content item: {item!r}")
