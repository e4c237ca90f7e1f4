"""Application filtering – ResponseExtractor.

Reads pagination metadata and records out of an arbitrary paginated response
(a mapping with any of ``page``, ``limit``, ``search``, ``sorts``,
``filters``, ``data``, ``meta``, ``total``, ``from``, ``to``, ``pages``).
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from mp_filterstate.application.filtering.codec import QueryCodec
from mp_filterstate.application.filtering.state import (
    FilterMap,
    FilterParams,
    Sort,
    normalize_filters,
    normalize_sorts,
)
from mp_filterstate.kernel.types import (
    mapping_or,
    non_empty_list,
    non_empty_str,
    positive_int,
    remove_zero,
)
from mp_filterstate.observability.logging import get_logger

__all__ = ["ResponseExtractor"]

logger = get_logger(__name__)


class ResponseExtractor:
    """Retains the last response snapshot and derives filter fields from it.

    Fields are merged shallowly: a response carrying only ``{"page": 2}``
    keeps ``total``/``data`` from the previous one.  Anything that is not a
    mapping resets the snapshot.
    """

    def __init__(self, codec: QueryCodec | None = None) -> None:
        self._codec = codec or QueryCodec()
        self._response: dict[str, Any] = {}

    def parse(self, raw: Any) -> FilterParams:
        if not isinstance(raw, Mapping):
            logger.debug("response.reset", type=type(raw).__name__)
            self._response.clear()
            return FilterParams()

        self._response.update(raw)
        return remove_zero(  # type: ignore[return-value]
            {
                "page": self.page,
                "limit": self.limit,
                "search": self.search,
                "sorts": self.sorts,
                "filters": self.filters,
            }
        )

    def reset(self) -> None:
        self._response.clear()

    @property
    def snapshot(self) -> dict[str, Any]:
        return dict(self._response)

    # -- filter fields -------------------------------------------------

    @property
    def page(self) -> int | None:
        return positive_int(self._response.get("page"))

    @property
    def limit(self) -> int | None:
        return positive_int(self._response.get("limit"))

    @property
    def search(self) -> str | None:
        return non_empty_str(self._response.get("search"))

    @property
    def sorts(self) -> list[Sort]:
        raw = self._response.get("sorts")
        if isinstance(raw, str):
            return self._codec.decode_sorts(raw)
        return normalize_sorts(non_empty_list(raw, []))

    @property
    def filters(self) -> FilterMap:
        return normalize_filters(mapping_or(self._response.get("filters"), {}))

    # -- pagination metadata -------------------------------------------

    @property
    def total(self) -> int:
        return positive_int(self._response.get("total"), 0)  # type: ignore[return-value]

    @property
    def from_(self) -> int:
        """Index of the first returned record in the full result set."""
        return positive_int(self._response.get("from"), 0)  # type: ignore[return-value]

    @property
    def to(self) -> int:
        return positive_int(self._response.get("to"), 0)  # type: ignore[return-value]

    @property
    def pages(self) -> int:
        return positive_int(self._response.get("pages"), 0)  # type: ignore[return-value]

    @property
    def meta(self) -> dict[str, Any]:
        return mapping_or(self._response.get("meta"), {})  # type: ignore[return-value]

    @property
    def records(self) -> list[Any]:
        return non_empty_list(self._response.get("data"), [])  # type: ignore[return-value]

    @property
    def is_empty(self) -> bool:
        return not self.records
