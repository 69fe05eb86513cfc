"""Cache-Control directive builders."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from .header_support import absint, format_directives, is_configured
from .settings import HeaderSettings

__all__ = [
    "CacheControlBuilder",
    "CacheControlHeader",
    "StaleDirectivesBuilder",
    "merge_directives",
]

logger = logging.getLogger(__name__)


class CacheControlBuilder:
    """Owns the ``max-age`` directive."""

    directives: tuple[str, ...] = ("max-age",)

    def build(self, ttl: Any = None) -> dict[str, Any]:
        """Return ``{"max-age": ttl}`` for a configured TTL, else ``{}``.

        ``None`` and ``False`` mean the TTL is not configured. Any other value,
        zero included, is coerced to a non-negative integer.
        """

        if not is_configured(ttl):
            return {}
        return dict.fromkeys(self.directives, absint(ttl))


class StaleDirectivesBuilder:
    """Owns the ``stale-while-revalidate`` and ``stale-if-error`` directives."""

    directives: tuple[str, ...] = ("stale-while-revalidate", "stale-if-error")

    def build(
        self, stale_while_revalidate: Any = None, stale_if_error: Any = None
    ) -> dict[str, Any]:
        values = (stale_while_revalidate, stale_if_error)
        return {
            name: absint(value)
            for name, value in zip(self.directives, values)
            if is_configured(value)
        }


def merge_directives(*mappings: Mapping[str, Any]) -> dict[str, Any]:
    """Merge builder outputs in order without clobbering earlier keys."""

    merged: dict[str, Any] = {}
    for mapping in mappings:
        for name, value in mapping.items():
            if name not in merged:
                merged[name] = value
                continue
            if merged[name] != value:
                logger.warning(
                    "Ignoring conflicting Cache-Control directive %s=%r (kept %r)",
                    name,
                    value,
                    merged[name],
                )
    return merged


class CacheControlHeader:
    """The ``Cache-Control`` header assembled from configured directive builders."""

    header_name = "Cache-Control"

    def __init__(self, settings: HeaderSettings) -> None:
        self._settings = settings
        self._directives = merge_directives(
            CacheControlBuilder().build(settings.configured_ttl()),
            StaleDirectivesBuilder().build(
                settings.stale_while_revalidate, settings.stale_if_error
            ),
        )

    @property
    def directives(self) -> Mapping[str, Any]:
        return dict(self._directives)

    def value(self) -> str | None:
        formatted = format_directives(self._directives)
        return formatted or None
