"""Application – filter-state use-case building blocks (framework-agnostic)."""

from mp_filterstate.application.filtering import (
    FilterParams,
    FilterState,
    FilterStore,
    QueryCodec,
    ResponseExtractor,
    Signer,
    Sort,
)

__all__ = [
    "FilterParams",
    "FilterState",
    "FilterStore",
    "QueryCodec",
    "ResponseExtractor",
    "Signer",
    "Sort",
]
