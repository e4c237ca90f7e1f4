"""Kernel types – safe coercion helpers.

Every helper returns its *fallback* instead of raising when the input does
not have the expected shape.
"""
from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any, TypeVar

from mp_filterstate.kernel.types.predicates import is_numeric

T = TypeVar("T")

__all__ = [
    "format_scalar",
    "mapping_or",
    "non_empty_list",
    "non_empty_str",
    "positive_int",
    "remove_zero",
    "to_number",
]


def to_number(value: Any) -> int | float | None:
    """Convert a numeric value or numeric string to ``int``/``float``."""
    if not is_numeric(value):
        return None
    if isinstance(value, (int, float)):
        return value
    text = str(value)
    if any(c in text for c in ".eE"):
        return float(text)
    return int(text)


def positive_int(value: Any, fallback: int | None = None) -> int | None:
    """Return *value* as a strictly positive integer, else *fallback*.

    ``"3"``, ``3`` and ``3.0`` all yield ``3``; ``0``, ``-1``, ``2.5``,
    ``True`` and ``"abc"`` yield *fallback*.
    """
    number = to_number(value)
    if number is None or number <= 0 or not float(number).is_integer():
        return fallback
    return int(number)


def non_empty_str(value: Any, fallback: str | None = None) -> str | None:
    return value if isinstance(value, str) and value != "" else fallback


def non_empty_list(value: Any, fallback: list[T] | None = None) -> list[T] | None:
    return list(value) if isinstance(value, (list, tuple)) and len(value) > 0 else fallback


def mapping_or(value: Any, fallback: T | None = None) -> dict[str, Any] | T | None:
    return dict(value) if isinstance(value, Mapping) else fallback


def remove_zero(value: Any, *, keep_none: bool = False) -> dict[str, Any]:
    """Drop entries holding an empty list, an empty mapping or ``None``.

    With ``keep_none=True`` a ``None`` entry survives; filter maps use this
    because ``None`` is the JSON ``null`` primitive there, not "unset".
    Non-mapping input yields an empty dict.
    """
    if not isinstance(value, Mapping):
        return {}
    result: dict[str, Any] = {}
    for key, item in value.items():
        if item is None and not keep_none:
            continue
        if isinstance(item, (list, tuple)) and not item:
            continue
        if isinstance(item, Mapping) and not item:
            continue
        result[key] = item
    return result


def format_scalar(value: Any) -> str:
    """Render a primitive the way it travels in query strings and digests.

    ``None`` → ``[null]``, booleans → ``true``/``false``, integral floats
    drop the ``.0`` so ``2.0`` and ``2`` render alike.
    """
    if value is None:
        return "[null]"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)
