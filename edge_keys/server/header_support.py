"""Support utilities shared across header components."""

from __future__ import annotations

import math
import numbers
import operator
import re
from typing import Any, Iterable, Mapping

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def leading_int(value: Any) -> int | None:
    """Return the integer value of ``value``, or ``None`` if it has none.

    Strings are read up to the first non-digit, so ``"12abc"`` and ``"12.9"``
    both give ``12``. Exponent notation is not expanded.
    """

    if isinstance(value, bool):
        return int(value)
    try:
        return operator.index(value)
    except TypeError:
        pass
    if isinstance(value, numbers.Real):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        return int(match.group(1)) if match else None
    return None


def absint(value: Any) -> int:
    """Return the absolute integer value of ``value``, or ``0`` if it has none."""

    number = leading_int(value)
    return abs(number) if number is not None else 0


def is_configured(value: Any) -> bool:
    return value is not None and value is not False


def tag_for(prefix: str, identifier: Any) -> str:
    return f"{prefix}-{identifier}"


def is_blank_tag(tag: Any) -> bool:
    if not tag:
        return True
    _, separator, identifier = str(tag).partition("-")
    return bool(separator) and identifier in ("", "0")


def unique_tags(tags: Iterable[str]) -> list[str]:
    """Drop exact duplicates (first occurrence wins) and blank tags."""

    return [tag for tag in dict.fromkeys(tags) if not is_blank_tag(tag)]


def format_directives(directives: Mapping[str, Any]) -> str:
    parts: list[str] = []
    for name, value in directives.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(name)
        else:
            parts.append(f"{name}={value}")
    return ", ".join(parts)


def format_surrogate_keys(keys: Iterable[str], delimiter: str = " ") -> str:
    return delimiter.join(keys)


__all__ = [
    "absint",
    "format_directives",
    "format_surrogate_keys",
    "is_blank_tag",
    "is_configured",
    "leading_int",
    "tag_for",
    "unique_tags",
]
