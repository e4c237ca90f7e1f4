"""Storage – InMemoryStorageBackend."""
from __future__ import annotations


class InMemoryStorageBackend:
    """:class:`StorageBackend` backed by a plain ``dict``."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def items(self) -> dict[str, str]:
        return dict(self._items)

    def clear(self) -> None:
        self._items.clear()


__all__ = ["InMemoryStorageBackend"]
