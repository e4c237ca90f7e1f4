"""Testing generators – Hypothesis strategies for filter states."""
from mp_filterstate.testing.generators.strategies import (
    filter_state_strategy,
    filters_strategy,
    primitive_strategy,
    sorts_strategy,
)

__all__ = [
    "filter_state_strategy",
    "filters_strategy",
    "primitive_strategy",
    "sorts_strategy",
]
