"""Storage – backend and adapter ports."""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class StorageBackend(Protocol):
    """Port: raw string key/value store (the shape of browser ``Storage``)."""

    def get_item(self, key: str) -> str | None: ...
    def set_item(self, key: str, value: str) -> None: ...
    def remove_item(self, key: str) -> None: ...


@runtime_checkable
class StorageAdapter(Protocol):
    """Port consumed by the filter store.

    Implementations never raise: reads yield ``None`` and writes ``False``
    when the underlying store is missing or failing.
    """

    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str | None) -> bool: ...
    def remove(self, key: str) -> bool: ...


__all__ = ["StorageAdapter", "StorageBackend"]
