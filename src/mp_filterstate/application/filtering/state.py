"""Application filtering – FilterState, Sort and normalisation helpers."""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Literal, TypedDict, Union

from mp_filterstate.kernel.types import is_compound, is_sort, remove_zero

__all__ = [
    "DEFAULT_LIMIT",
    "RESERVED_KEYS",
    "CompoundValue",
    "FilterMap",
    "FilterParams",
    "FilterState",
    "PrimitiveValue",
    "Sort",
    "SortOrder",
    "default_state",
    "normalize_filters",
    "normalize_sorts",
]

PrimitiveValue = Union[str, int, float, bool, None]
CompoundValue = Union[PrimitiveValue, list[PrimitiveValue], dict[str, PrimitiveValue]]
FilterMap = dict[str, CompoundValue]
SortOrder = Literal["asc", "desc"]

DEFAULT_LIMIT = 20
RESERVED_KEYS: frozenset[str] = frozenset({"page", "limit", "search", "sorts"})


class Sort(TypedDict):
    """Single sort criterion; the first entry of a sort list is the primary sort."""
    field: str
    order: SortOrder


class FilterState(TypedDict):
    page: int
    limit: int
    search: str
    sorts: list[Sort]
    filters: FilterMap


class FilterParams(TypedDict, total=False):
    """A partial :class:`FilterState`; values are untrusted until merged."""
    page: int
    limit: int
    search: str
    sorts: list[Sort]
    filters: FilterMap


def default_state(limit: int = DEFAULT_LIMIT) -> FilterState:
    return FilterState(page=1, limit=limit, search="", sorts=[], filters={})


def normalize_sorts(value: Iterable[Any]) -> list[Sort]:
    """Keep well-formed sort entries in their original order, drop the rest.

    Duplicated fields are kept; the sequence is not de-duplicated.
    """
    return [
        Sort(field=item["field"].strip(), order=item["order"])
        for item in value
        if is_sort(item)
    ]


def normalize_filters(value: Mapping[str, Any]) -> FilterMap:
    """Prune empty lists/maps and values that are not compound.

    Lists and maps are copied so the stored state never aliases the caller's
    objects.
    """
    result: FilterMap = {}
    for key, item in remove_zero(value, keep_none=True).items():
        if not isinstance(key, str) or not key or not is_compound(item):
            continue
        if isinstance(item, (list, tuple)):
            result[key] = list(item)
        elif isinstance(item, Mapping):
            result[key] = dict(item)
        else:
            result[key] = item
    return result
