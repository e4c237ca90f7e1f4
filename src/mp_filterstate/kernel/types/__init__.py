"""Kernel types – value predicates and coercion helpers."""
from mp_filterstate.kernel.types.coerce import (
    format_scalar,
    mapping_or,
    non_empty_list,
    non_empty_str,
    positive_int,
    remove_zero,
    to_number,
)
from mp_filterstate.kernel.types.predicates import (
    SORT_ORDERS,
    is_compound,
    is_filter_map,
    is_numeric,
    is_order,
    is_primitive,
    is_primitive_list,
    is_primitive_map,
    is_sort,
)

__all__ = [
    "SORT_ORDERS",
    "format_scalar",
    "is_compound",
    "is_filter_map",
    "is_numeric",
    "is_order",
    "is_primitive",
    "is_primitive_list",
    "is_primitive_map",
    "is_sort",
    "mapping_or",
    "non_empty_list",
    "non_empty_str",
    "positive_int",
    "remove_zero",
    "to_number",
]
