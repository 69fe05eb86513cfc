"""Error types used by the query model helpers."""


class QueryShapeError(ValueError):
    """Raised when a query result cannot be built from the supplied data."""

    __slots__ = ()
