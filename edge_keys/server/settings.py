"""Header behaviour configuration."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Iterable, Mapping

from .header_support import is_configured, leading_int

__all__ = ["HeaderSettings"]


@dataclass(frozen=True)
class HeaderSettings:
    """Settings feeding the Cache-Control builders and surrogate key header.

    TTL-style values left as ``None`` (or ``False``) are "not configured" and
    emit no directive; ``0`` is a configured value. Configured values are
    stored as non-negative integers.
    """

    cache_control_ttl: int | None = None
    stale_while_revalidate: int | None = None
    stale_if_error: int | None = None
    surrogate_key_header: str = "Surrogate-Key"
    surrogate_key_delimiter: str = " "
    taxonomies: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        for name in _SECONDS_FIELDS:
            object.__setattr__(self, name, _normalize_seconds(name, getattr(self, name)))
        if not isinstance(self.surrogate_key_header, str) or not self.surrogate_key_header.strip():
            msg = "surrogate_key_header must be a non-empty string"
            raise ValueError(msg)
        if not isinstance(self.surrogate_key_delimiter, str) or not self.surrogate_key_delimiter:
            msg = "surrogate_key_delimiter must be a non-empty string"
            raise ValueError(msg)
        if self.taxonomies is not None:
            object.__setattr__(self, "taxonomies", _freeze_names(self.taxonomies))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "HeaderSettings":
        known = {item.name for item in fields(cls)}
        unknown = set(mapping) - known
        if unknown:
            names = ", ".join(sorted(map(str, unknown)))
            msg = f"Unknown header settings: {names}"
            raise ValueError(msg)
        return cls(**dict(mapping))

    def configured_ttl(self) -> int | None:
        return self.cache_control_ttl

    def filter_taxonomies(self, taxonomies: Iterable[str]) -> tuple[str, ...]:
        """Restrict ``taxonomies`` to the configured allow-list, if any."""

        if self.taxonomies is None:
            return tuple(taxonomies)
        allowed = frozenset(self.taxonomies)
        return tuple(name for name in taxonomies if name in allowed)


_SECONDS_FIELDS = ("cache_control_ttl", "stale_while_revalidate", "stale_if_error")


def _normalize_seconds(name: str, value: Any) -> int | None:
    if not is_configured(value):
        return None
    number = leading_int(value)
    if number is None:
        msg = f"{name} must be an integer number of seconds"
        raise ValueError(msg)
    return abs(number)


def _freeze_names(value: Iterable[str]) -> tuple[str, ...]:
    if isinstance(value, str):
        msg = "taxonomies must be an iterable of names"
        raise ValueError(msg)
    try:
        return tuple(dict.fromkeys(str(name) for name in value))
    except TypeError as exc:
        msg = "taxonomies must be iterable"
        raise ValueError(msg) from exc
