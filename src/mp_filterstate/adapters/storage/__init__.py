"""Storage – ports, the namespaced adapter and concrete backends."""
from mp_filterstate.adapters.storage.memory import InMemoryStorageBackend
from mp_filterstate.adapters.storage.namespaced import NamespacedStorage, normalize_key
from mp_filterstate.adapters.storage.port import StorageAdapter, StorageBackend
from mp_filterstate.adapters.storage.redis import RedisStorageBackend

__all__ = [
    "InMemoryStorageBackend",
    "NamespacedStorage",
    "RedisStorageBackend",
    "StorageAdapter",
    "StorageBackend",
    "normalize_key",
]
