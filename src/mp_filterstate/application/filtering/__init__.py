"""Application filtering – filter state, query codec, signer and store."""
from mp_filterstate.application.filtering.codec import NULL_TOKEN, QueryCodec
from mp_filterstate.application.filtering.response import ResponseExtractor
from mp_filterstate.application.filtering.signer import DigestProvider, HashlibDigestProvider, Signer
from mp_filterstate.application.filtering.state import (
    DEFAULT_LIMIT,
    RESERVED_KEYS,
    CompoundValue,
    FilterMap,
    FilterParams,
    FilterState,
    PrimitiveValue,
    Sort,
    SortOrder,
    default_state,
    normalize_filters,
    normalize_sorts,
)
from mp_filterstate.application.filtering.store import DEFAULT_STORABLES, ApplyCallback, FilterStore

__all__ = [
    "DEFAULT_LIMIT",
    "DEFAULT_STORABLES",
    "NULL_TOKEN",
    "RESERVED_KEYS",
    "ApplyCallback",
    "CompoundValue",
    "DigestProvider",
    "FilterMap",
    "FilterParams",
    "FilterState",
    "FilterStore",
    "HashlibDigestProvider",
    "PrimitiveValue",
    "QueryCodec",
    "ResponseExtractor",
    "Signer",
    "Sort",
    "SortOrder",
    "default_state",
    "normalize_filters",
    "normalize_sorts",
]
