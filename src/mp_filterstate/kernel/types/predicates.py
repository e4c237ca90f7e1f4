"""Kernel types – runtime predicates for filter values.

A *compound* value is a primitive, a list of primitives or a mapping of
string keys to primitives.  Anything nested deeper is not representable in
a query string and is rejected by :func:`is_compound`.
"""
from __future__ import annotations

import math
import re
from collections.abc import Mapping
from typing import Any, Final

__all__ = [
    "NUMERIC_LITERAL",
    "SORT_ORDERS",
    "is_compound",
    "is_filter_map",
    "is_numeric",
    "is_order",
    "is_primitive",
    "is_primitive_list",
    "is_primitive_map",
    "is_sort",
]

NUMERIC_LITERAL: Final = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
SORT_ORDERS: Final[frozenset[str]] = frozenset({"asc", "desc"})


def is_primitive(value: Any) -> bool:
    return value is None or isinstance(value, (str, bool, int, float))


def is_primitive_list(value: Any) -> bool:
    return isinstance(value, (list, tuple)) and all(is_primitive(v) for v in value)


def is_primitive_map(value: Any) -> bool:
    return isinstance(value, Mapping) and all(
        isinstance(k, str) and is_primitive(v) for k, v in value.items()
    )


def is_compound(value: Any) -> bool:
    return is_primitive(value) or is_primitive_list(value) or is_primitive_map(value)


def is_numeric(value: Any) -> bool:
    """Return ``True`` for finite numbers and strings spelling a number.

    Booleans are never numeric even though ``bool`` subclasses ``int``.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, str) and NUMERIC_LITERAL.fullmatch(value):
        return math.isfinite(float(value))
    return False


def is_order(value: Any) -> bool:
    return isinstance(value, str) and value in SORT_ORDERS


def is_sort(value: Any) -> bool:
    """A sort is a mapping with a non-empty string ``field`` and a valid ``order``."""
    return (
        isinstance(value, Mapping)
        and isinstance(value.get("field"), str)
        and value["field"].strip() != ""
        and is_order(value.get("order"))
    )


def is_filter_map(value: Any) -> bool:
    return isinstance(value, Mapping) and all(
        isinstance(k, str) and is_compound(v) for k, v in value.items()
    )
