"""Storage – NamespacedStorage, a fault-tolerant prefixed view of a backend."""
from __future__ import annotations

import math
import re
from typing import Any

from mp_filterstate.kernel.types import to_number
from mp_filterstate.observability.logging import get_logger

__all__ = ["NamespacedStorage", "normalize_key"]

logger = get_logger(__name__)

_WHITESPACE = re.compile(r"\s+")
_REPEATED_SEPARATOR = re.compile(r"(::)+")


def normalize_key(*parts: str | None) -> str:
    """Join key segments with ``::``.

    Segments are trimmed, inner whitespace becomes ``::``, empty segments
    are skipped and repeated separators collapse into one.
    """
    segments: list[str] = []
    for part in parts:
        segment = _WHITESPACE.sub("::", (part or "").strip())
        if segment:
            segments.append(segment)
    return _REPEATED_SEPARATOR.sub("::", "::".join(segments))


class NamespacedStorage:
    """:class:`StorageAdapter` that prefixes every key and swallows backend errors.

    Usage::

        storage = NamespacedStorage(InMemoryStorageBackend(), prefix="orders")
        storage.set("limit", "50")      # stored under "orders::limit"
        storage.number("limit")         # 50
    """

    def __init__(self, backend: Any, prefix: str | None = None) -> None:
        self._backend = backend
        self.prefix = (prefix or "").strip()

    def is_valid(self) -> bool:
        try:
            return self._backend is not None and all(
                callable(getattr(self._backend, name, None))
                for name in ("get_item", "set_item", "remove_item")
            )
        except Exception:  # noqa: BLE001
            return False

    def get(self, key: str) -> str | None:
        """Return the trimmed stored string, or ``None`` when missing/empty/failing."""
        key = normalize_key(key)
        if not key or not self.is_valid():
            return None
        try:
            value = self._backend.get_item(normalize_key(self.prefix, key))
        except Exception as exc:  # noqa: BLE001
            logger.warning("storage.read_failed", key=key, prefix=self.prefix, error=repr(exc))
            return None
        if not isinstance(value, str):
            return None
        return value.strip() or None

    string = get

    def number(self, key: str) -> int | float | None:
        value = to_number(self.get(key))
        if value is None or not math.isfinite(value):
            return None
        return value

    def boolean(self, key: str) -> bool | None:
        value = self.get(key)
        if value in ("true", "1"):
            return True
        if value in ("false", "0"):
            return False
        return None

    def set(self, key: str, value: str | None) -> bool:
        """Store *value*; empty values are refused and nothing is written."""
        key = normalize_key(key)
        value = (value or "").strip()
        if not key or not value or not self.is_valid():
            return False
        try:
            self._backend.set_item(normalize_key(self.prefix, key), value)
        except Exception as exc:  # noqa: BLE001
            logger.warning("storage.write_failed", key=key, prefix=self.prefix, error=repr(exc))
            return False
        return True

    def remove(self, key: str) -> bool:
        key = normalize_key(key)
        if not key or not self.is_valid():
            return False
        try:
            self._backend.remove_item(normalize_key(self.prefix, key))
        except Exception as exc:  # noqa: BLE001
            logger.warning("storage.remove_failed", key=key, prefix=self.prefix, error=repr(exc))
            return False
        return True
