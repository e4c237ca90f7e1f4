"""Application filtering – QueryCodec (FilterState <-> URL query string).

Every key and every primitive is percent-encoded on its own; the compound
separators ``,`` (between items) and ``:`` (between a key and its value) are
written literally.  A separator that appears *inside* a value is therefore
always escaped and the decoder can classify a raw value before unescaping it.

Decoding infers scalar types in this order: ``"true"``, ``"false"``,
``"[null]"``, numeral, string.  Strings that spell one of those tokens come
back as the inferred type; that loss is part of the format.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any
from urllib.parse import quote, unquote_plus

from mp_filterstate.application.filtering.state import (
    RESERVED_KEYS,
    CompoundValue,
    FilterMap,
    FilterParams,
    PrimitiveValue,
    Sort,
    normalize_sorts,
)
from mp_filterstate.kernel.types import (
    format_scalar,
    is_numeric,
    is_order,
    positive_int,
    to_number,
)
from mp_filterstate.observability.logging import get_logger

__all__ = ["NULL_TOKEN", "QueryCodec"]

NULL_TOKEN = "[null]"
_SAFE = "!*'()"

logger = get_logger(__name__)


class QueryCodec:
    """Encode a filter state to a query string and decode it back."""

    # ------------------------------------------------------------------
    # Scalars
    # ------------------------------------------------------------------

    def encode_value(self, value: PrimitiveValue) -> str:
        return quote(format_scalar(value), safe=_SAFE)

    def decode_value(self, value: str) -> str:
        return unquote_plus(value)

    def infer_type(self, value: str) -> PrimitiveValue:
        """Decode *value* and infer its primitive type."""
        text = self.decode_value(value)
        if text == "true":
            return True
        if text == "false":
            return False
        if text == NULL_TOKEN:
            return None
        if is_numeric(text):
            return to_number(text)
        return text

    # ------------------------------------------------------------------
    # Compounds
    # ------------------------------------------------------------------

    def encode_array(self, values: Sequence[PrimitiveValue]) -> str:
        return ",".join(self.encode_value(v) for v in values)

    def decode_array(self, encoded: str) -> list[PrimitiveValue]:
        return [self.infer_type(part) for part in encoded.split(",")]

    def encode_object(self, value: Mapping[str, PrimitiveValue]) -> str:
        return ",".join(f"{self.encode_value(k)}:{self.encode_value(v)}" for k, v in value.items())

    def decode_object(self, encoded: str) -> dict[str, PrimitiveValue]:
        result: dict[str, PrimitiveValue] = {}
        for part in encoded.split(","):
            key, _, value = part.partition(":")
            if not key.strip() or not value:
                logger.debug("codec.map_entry_dropped", fragment=part)
                continue
            result[self.decode_value(key.strip())] = self.infer_type(value)
        return result

    def encode_sorts(self, sorts: Sequence[Any]) -> str:
        return ",".join(
            f"{self.encode_value(s['field'])}:{self.encode_value(s['order'])}"
            for s in normalize_sorts(sorts)
        )

    def decode_sorts(self, encoded: str) -> list[Sort]:
        """Decode ``field:order`` pairs, keeping their order and dropping bad ones."""
        sorts: list[Sort] = []
        for part in encoded.split(","):
            if ":" not in part:
                if part:
                    logger.debug("codec.sort_dropped", fragment=part)
                continue
            field, _, order = part.partition(":")
            name = self.decode_value(field.strip()).strip()
            direction = self.decode_value(order)
            if not name or not is_order(direction):
                logger.debug("codec.sort_dropped", fragment=part)
                continue
            sorts.append(Sort(field=name, order=direction))  # type: ignore[typeddict-item]
        return sorts

    def encode_compound(self, value: CompoundValue) -> str:
        if isinstance(value, (list, tuple)):
            return self.encode_array(value)
        if isinstance(value, Mapping):
            return self.encode_object(value)
        return self.encode_value(value)

    def decode_compound(self, encoded: str) -> CompoundValue:
        """Classify a raw value: ``,`` without ``:`` is a list, any ``:`` a map."""
        if "," in encoded and ":" not in encoded:
            return self.decode_array(encoded)
        if ":" in encoded:
            return self.decode_object(encoded)
        return self.infer_type(encoded)

    # ------------------------------------------------------------------
    # Query strings
    # ------------------------------------------------------------------

    def encode_filters(self, filters: Mapping[str, CompoundValue]) -> str:
        return "&".join(
            f"{self.encode_value(key)}={self.encode_compound(value)}"
            for key, value in filters.items()
        )

    def decode_filters(self, query: str) -> FilterMap:
        filters: FilterMap = {}
        for key, value in self._pairs(query):
            if key not in RESERVED_KEYS:
                filters[key] = self.decode_compound(value)
        return filters

    def encode(self, state: Mapping[str, Any]) -> str:
        """Render *state* as ``page``, ``limit``, ``search``, ``sorts`` then filters."""
        parts: list[str] = []

        page = positive_int(state.get("page"))
        if page is not None:
            parts.append(f"page={page}")

        limit = positive_int(state.get("limit"))
        if limit is not None:
            parts.append(f"limit={limit}")

        search = state.get("search")
        if isinstance(search, str) and search != "":
            parts.append(f"search={self.encode_value(search)}")

        sorts = state.get("sorts")
        if isinstance(sorts, (list, tuple)) and sorts:
            encoded = self.encode_sorts(sorts)
            if encoded:
                parts.append(f"sorts={encoded}")

        filters = state.get("filters")
        if isinstance(filters, Mapping) and filters:
            parts.append(self.encode_filters(filters))

        return "&".join(parts)

    def decode(self, query: str) -> FilterParams:
        """Decode *query* into a partial state.

        ``page`` and ``limit`` are present only when they are strictly
        positive integers; ``search`` only when its key is present.
        ``sorts`` and ``filters`` are always present so an applied URL
        replaces both.
        """
        result = FilterParams()
        sorts: list[Sort] = []
        filters: FilterMap = {}
        search: str | None = None

        for key, value in self._pairs(query):
            if key == "page" or key == "limit":
                number = positive_int(self.decode_value(value))
                if number is None:
                    logger.debug("codec.param_dropped", key=key, value=value)
                    continue
                result[key] = number  # type: ignore[literal-required]
            elif key == "search":
                search = self.decode_value(value)
            elif key == "sorts":
                sorts = self.decode_sorts(value.strip())
            else:
                filters[key] = self.decode_compound(value)

        if search is not None:
            result["search"] = search
        result["sorts"] = sorts
        result["filters"] = filters
        return result

    def _pairs(self, query: str) -> list[tuple[str, str]]:
        """Split a query into ``(decoded key, raw value)`` pairs; empty keys are dropped."""
        pairs: list[tuple[str, str]] = []
        for piece in query.lstrip("?").split("&"):
            if not piece:
                continue
            raw_key, _, value = piece.partition("=")
            key = self.decode_value(raw_key).strip()
            if not key:
                logger.debug("codec.param_dropped", fragment=piece)
                continue
            pairs.append((key, value))
        return pairs
