"""Surrogate key collection for a rendered response."""

from __future__ import annotations

import logging
from collections.abc import Iterable as IterableABC
from collections.abc import Mapping as MappingABC
from typing import Any, Callable, Iterable, Sequence

from .._query.classification import classify
from .header_support import absint, tag_for, unique_tags

__all__ = ["SurrogateKeyCollection"]

logger = logging.getLogger(__name__)

TaxonomyLister = Callable[[], Iterable[str]]
TermLookup = Callable[[int, str], Any]
QueriedObjectLookup = Callable[[], Any]
TaxonomyFilter = Callable[[Sequence[str]], Iterable[str]]


def _no_taxonomies() -> tuple[str, ...]:
    return ()


def _no_terms(item_id: int, taxonomy: str) -> tuple[Any, ...]:
    return ()


def _no_queried_object() -> None:
    return None


def _field(obj: Any, name: str) -> Any:
    if isinstance(obj, MappingABC):
        return obj.get(name)
    return getattr(obj, name, None)


def _as_tuple(value: Any, label: str) -> tuple[Any, ...]:
    if value is None or isinstance(value, (str, bytes)) or not isinstance(value, IterableABC):
        logger.debug("Ignoring malformed %s: %r", label, value)
        return ()
    return tuple(value)


class SurrogateKeyCollection:
    """Collect the surrogate keys to attach to a single response.

    Keys are derived once, at construction, from ``query``:

    * ``p-<id>`` for every matched content item;
    * ``tm-<type>`` for the first matching template type;
    * on single views, ``t-<id>`` for each term of the item in every
      taxonomy and ``a-<id>`` for its author;
    * on category, tag and taxonomy archives, ``t-<id>`` for the queried term.

    The host's taxonomy list, term lookup and queried object are injected as
    callables. Malformed data from them contributes no keys rather than
    raising.
    """

    def __init__(
        self,
        query: Any,
        *,
        list_taxonomies: TaxonomyLister = _no_taxonomies,
        get_terms_for: TermLookup = _no_terms,
        get_queried_object: QueriedObjectLookup = _no_queried_object,
        taxonomy_filter: TaxonomyFilter | None = None,
    ) -> None:
        self._list_taxonomies = list_taxonomies
        self._get_terms_for = get_terms_for
        self._get_queried_object = get_queried_object
        self._taxonomy_filter = taxonomy_filter

        keys = self._post_keys(query)
        template_keys = self._template_keys(query)

        term_keys: list[str] = []
        if self._predicate(query, "is_single_view"):
            item = self._primary_item(query)
            if item is not None:
                item_id = absint(_field(item, "id"))
                for taxonomy in self._taxonomies():
                    term_keys.extend(self._single_term_keys(item_id, taxonomy))
                term_keys.extend(self._author_keys(item))
        elif self._predicate(query, "is_term_archive"):
            term_keys = self._archive_term_keys()

        self._keys: list[str] = unique_tags([*keys, *template_keys, *term_keys])

    def get_keys(self) -> list[str]:
        return list(self._keys)

    def set_keys(self, keys: Iterable[str]) -> None:
        self._keys = list(keys)

    def add_key(self, key: str) -> None:
        """Append ``key``; duplicates are not removed."""

        self._keys.append(key)

    def _post_keys(self, query: Any) -> list[str]:
        return [tag_for("p", absint(_field(item, "id"))) for item in self._items(query)]

    def _template_keys(self, query: Any) -> list[str]:
        template_type = classify(query)
        if not template_type:
            return []
        return [tag_for("tm", template_type)]

    def _single_term_keys(self, item_id: int, taxonomy: str) -> list[str]:
        try:
            terms = self._get_terms_for(item_id, taxonomy)
        except LookupError:
            logger.debug("No term data for taxonomy %r", taxonomy)
            return []
        keys: list[str] = []
        for term in _as_tuple(terms, f"terms for taxonomy {taxonomy!r}"):
            term_id = _field(term, "id")
            if term_id is None:
                continue
            keys.append(tag_for("t", absint(term_id)))
        return keys

    def _archive_term_keys(self) -> list[str]:
        queried = self._get_queried_object()
        if queried is None:
            return []
        term_id = _field(queried, "id")
        taxonomy = _field(queried, "taxonomy")
        if not term_id or not taxonomy:
            return []
        return [tag_for("t", absint(term_id))]

    def _author_keys(self, item: Any) -> list[str]:
        author = absint(_field(item, "author"))
        if author > 0:
            return [tag_for("a", author)]
        return []

    def _taxonomies(self) -> tuple[str, ...]:
        taxonomies = _as_tuple(self._list_taxonomies(), "taxonomy list")
        if self._taxonomy_filter is not None:
            taxonomies = _as_tuple(self._taxonomy_filter(taxonomies), "filtered taxonomy list")
        return taxonomies

    def _items(self, query: Any) -> tuple[Any, ...]:
        matched_items = getattr(query, "matched_items", None)
        if not callable(matched_items):
            return ()
        return _as_tuple(matched_items(), "matched items")

    def _primary_item(self, query: Any) -> Any:
        items = self._items(query)
        return items[0] if items else None

    @staticmethod
    def _predicate(query: Any, name: str) -> bool:
        predicate = getattr(query, name, None)
        return callable(predicate) and predicate() is True
