"""Storage – RedisStorageBackend."""
from __future__ import annotations

from typing import Any


def _require_redis() -> Any:
    try:
        import redis
        return redis
    except ImportError as exc:
        raise ImportError("Install 'mp-filterstate[redis]' to use the Redis storage backend") from exc


class RedisStorageBackend:
    """:class:`StorageBackend` over a synchronous Redis client.

    Values are stored as plain strings with an optional TTL so persisted
    preferences expire with the session they belong to.
    """

    def __init__(self, url: str | None = None, *, client: Any = None, ttl: int | None = None, **kwargs: Any) -> None:
        if client is None:
            if not url:
                raise ValueError("either url or client is required")
            client = _require_redis().Redis.from_url(url, decode_responses=True, **kwargs)
        self._client = client
        self._ttl = ttl

    def get_item(self, key: str) -> str | None:
        value = self._client.get(key)
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    def set_item(self, key: str, value: str) -> None:
        self._client.set(key, value, ex=self._ttl)

    def remove_item(self, key: str) -> None:
        self._client.delete(key)

    def close(self) -> None:
        self._client.close()


__all__ = ["RedisStorageBackend"]
