"""Tests for the query-result model and template classification."""

from __future__ import annotations

import pytest

from edge_keys._query import (
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


def test_template_type_priority_order() -> None:
    assert TEMPLATE_TYPES[0] == "single"
    assert TEMPLATE_TYPES[-1] == "post_type_archive"
    assert len(TEMPLATE_TYPES) == 27
    assert TEMPLATE_TYPES.index("archive") < TEMPLATE_TYPES.index("category")
    assert TEMPLATE_TYPES.index("home") < TEMPLATE_TYPES.index("404")
    assert TEMPLATE_TYPES.index("single") < TEMPLATE_TYPES.index("singular")


@pytest.mark.parametrize(
    ("types", "expected"),
    [
        ({"single", "singular"}, "single"),
        ({"singular", "page"}, "page"),
        ({"month", "date", "archive"}, "archive"),
        ({"paged", "home"}, "home"),
        ({"404"}, "404"),
        ({"post_type_archive"}, "post_type_archive"),
        (set(), None),
    ],
)
def test_classify_picks_first_matching_type(types, expected) -> None:
    assert classify(StaticQueryResult.from_parts(types=types)) == expected


def test_classify_requires_strict_true() -> None:
    class Truthy:
        def is_of_type(self, name: str) -> object:
            return 1

    assert classify(Truthy()) is None


def test_classify_without_predicate_is_none() -> None:
    assert classify(object()) is None
    assert classify({"single": True}) is None


def test_static_query_result_satisfies_protocol() -> None:
    query = StaticQueryResult.from_parts(
        items=[ContentItem(id=1, author=2), {"id": 3, "author": 4}], types=["single"]
    )

    assert isinstance(query, QueryResult)
    assert query.matched_items() == (ContentItem(1, 2), ContentItem(3, 4))
    assert query.is_single_view() is True
    assert query.is_term_archive() is False


@pytest.mark.parametrize("archive_type", ["category", "tag", "tax"])
def test_term_archive_types(archive_type: str) -> None:
    query = StaticQueryResult.from_parts(types={"archive", archive_type})
    assert query.is_term_archive() is True
    assert query.is_single_view() is False


def test_unknown_template_type_is_rejected() -> None:
    with pytest.raises(QueryShapeError, match="bogus"):
        StaticQueryResult.from_parts(types={"single", "bogus"})


def test_template_types_must_not_be_a_string() -> None:
    with pytest.raises(QueryShapeError):
        StaticQueryResult.from_parts(types="single")


def test_unsupported_item_is_rejected() -> None:
    with pytest.raises(QueryShapeError):
        StaticQueryResult.from_parts(items=[42])


def test_content_source_accessors() -> None:
    source = ContentSource(
        taxonomies=["category"],
        terms={(7, "category"): [Term(id=2, taxonomy="category")]},
        queried_object=QueriedObject(id=2, taxonomy="category"),
    )

    assert source.list_taxonomies() == ("category",)
    assert source.get_terms_for(7, "category") == (Term(id=2, taxonomy="category"),)
    assert source.get_terms_for(8, "category") == ()
    assert source.get_queried_object() == QueriedObject(id=2, taxonomy="category")
    with pytest.raises(KeyError):
        source.get_terms_for(7, "post_tag")
