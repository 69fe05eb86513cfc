"""Template classification for query results."""

from __future__ import annotations

from typing import Any

__all__ = ["TEMPLATE_TYPES", "TERM_ARCHIVE_TYPES", "classify"]

# Priority order. The first matching type wins, so ambiguous views (a post is
# both ``single`` and ``singular``) resolve to the earlier entry.
TEMPLATE_TYPES: tuple[str, ...] = (
    "single",
    "preview",
    "page",
    "archive",
    "date",
    "year",
    "month",
    "day",
    "time",
    "author",
    "category",
    "tag",
    "tax",
    "search",
    "feed",
    "comment_feed",
    "trackback",
    "home",
    "404",
    "comments_popup",
    "paged",
    "admin",
    "attachment",
    "singular",
    "robots",
    "posts_page",
    "post_type_archive",
)

TERM_ARCHIVE_TYPES: frozenset[str] = frozenset({"category", "tag", "tax"})


def classify(query: Any) -> str | None:
    """Return the first template type ``query`` reports as true.

    Objects without an ``is_of_type`` predicate are not classifiable and
    yield ``None``, as does a query matching none of :data:`TEMPLATE_TYPES`.
    """

    predicate = getattr(query, "is_of_type", None)
    if not callable(predicate):
        return None
    for template_type in TEMPLATE_TYPES:
        if predicate(template_type) is True:
            return template_type
    return None
