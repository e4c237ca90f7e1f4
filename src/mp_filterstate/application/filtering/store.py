"""Application filtering – FilterStore.

The store owns the canonical filter state.  Every change goes through
:meth:`FilterStore.apply`, which merges the incoming fields, signs the
resulting snapshot and, only when the signature differs from the last
committed one, notifies listeners and persists the allowlisted fields.

Usage::

    store = FilterStore(NamespacedStorage(InMemoryStorageBackend(), "orders"))
    store.on_apply(lambda state, query: fetch(f"/orders?{query}"))

    await store.parse_url("page=2&sorts=created:desc&status=open")
    await store.parse_response(payload)   # same state: no second fetch
"""
from __future__ import annotations

import asyncio
from collections.abc import Callable, Mapping, Sequence
from typing import TYPE_CHECKING, Any, Literal

from mp_filterstate.adapters.storage import NamespacedStorage, RedisStorageBackend, StorageAdapter
from mp_filterstate.application.filtering.codec import QueryCodec
from mp_filterstate.application.filtering.response import ResponseExtractor
from mp_filterstate.application.filtering.signer import HashlibDigestProvider, Signer
from mp_filterstate.application.filtering.state import (
    DEFAULT_LIMIT,
    CompoundValue,
    FilterMap,
    FilterParams,
    FilterState,
    Sort,
    default_state,
    normalize_filters,
    normalize_sorts,
)
from mp_filterstate.config.settings.filters import PERSISTABLE_FIELDS
from mp_filterstate.kernel.types import is_compound, is_filter_map, positive_int
from mp_filterstate.observability.logging import get_logger

if TYPE_CHECKING:
    from mp_filterstate.config.settings import FilterSettings

__all__ = ["DEFAULT_STORABLES", "ApplyCallback", "FilterStore"]

ApplyCallback = Callable[[FilterState, str], None]

DEFAULT_STORABLES: tuple[str, ...] = ("limit", "sorts")

logger = get_logger(__name__)


class FilterStore:
    """Single source of truth for page, limit, search, sorts and filters.

    Args:
        storage: Where allowlisted fields are persisted; ``None`` disables
            persistence.
        storables: Fields to persist and restore, or ``"all"``.
        defaults: Caller defaults applied over the built-in ones, before
            values restored from *storage*.
        signer: Signs snapshots; inject one with a custom digest provider
            in tests.
        codec: Query-string codec.
        response: Extractor used by :meth:`parse_response`.
        default_limit: Built-in page size.
    """

    def __init__(
        self,
        storage: StorageAdapter | None = None,
        *,
        storables: Sequence[str] | Literal["all"] = DEFAULT_STORABLES,
        defaults: Mapping[str, Any] | None = None,
        signer: Signer | None = None,
        codec: QueryCodec | None = None,
        response: ResponseExtractor | None = None,
        default_limit: int = DEFAULT_LIMIT,
    ) -> None:
        self._codec = codec or QueryCodec()
        self._signer = signer or Signer()
        self._response = response or ResponseExtractor(self._codec)
        self._storage = storage
        self._storables = self._resolve_storables(storables)
        self._lock = asyncio.Lock()
        self._signature = ""
        self._listeners: list[ApplyCallback] = []

        initial = default_state(positive_int(default_limit, DEFAULT_LIMIT))  # type: ignore[arg-type]
        self._page = initial["page"]
        self._limit = initial["limit"]
        self._search = initial["search"]
        self._sorts: list[Sort] = initial["sorts"]
        self._filters: FilterMap = initial["filters"]

        self._merge(defaults or {})
        self._merge(self._restore())

    @classmethod
    def from_settings(
        cls,
        settings: FilterSettings,
        backend: Any = None,
        *,
        defaults: Mapping[str, Any] | None = None,
    ) -> "FilterStore":
        """Build a store from :class:`FilterSettings`.

        Without an explicit *backend*, a Redis backend is used when
        ``settings.redis_url`` is set; otherwise nothing is persisted.
        """
        if backend is None and settings.redis_url:
            backend = RedisStorageBackend(settings.redis_url)
        storage = NamespacedStorage(backend, settings.storage_prefix) if backend is not None else None
        storables: Sequence[str] | Literal["all"] = (
            "all" if settings.persist_all else tuple(settings.storables)
        )
        return cls(
            storage,
            storables=storables,
            defaults=defaults,
            signer=Signer(HashlibDigestProvider(settings.digest_algorithm)),
            default_limit=settings.default_limit,
        )

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------

    @property
    def page(self) -> int:
        return self._page

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def search(self) -> str:
        return self._search

    @property
    def sort(self) -> Sort | None:
        """The primary sort, if any."""
        return Sort(**self._sorts[0]) if self._sorts else None

    @property
    def sorts(self) -> list[Sort]:
        return [Sort(**s) for s in self._sorts]

    @property
    def filters(self) -> FilterMap:
        return normalize_filters(self._filters)

    @property
    def is_filtered(self) -> bool:
        return bool(self._filters)

    def filter(self, key: str) -> CompoundValue:
        """Return a copy of a single filter value, or ``None`` when unset."""
        value = self._filters.get(key)
        if isinstance(value, list):
            return list(value)
        if isinstance(value, dict):
            return dict(value)
        return value

    @property
    def signature(self) -> str:
        """Signature of the last committed snapshot (empty before the first commit)."""
        return self._signature

    @property
    def storables(self) -> tuple[str, ...]:
        return self._storables

    def snapshot(self) -> FilterState:
        return FilterState(
            page=self._page,
            limit=self._limit,
            search=self._search,
            sorts=self.sorts,
            filters=self.filters,
        )

    @property
    def query_string(self) -> str:
        return self._codec.encode(self.snapshot())

    # -- response metadata ---------------------------------------------

    @property
    def response(self) -> ResponseExtractor:
        return self._response

    @property
    def total(self) -> int:
        return self._response.total

    @property
    def from_(self) -> int:
        return self._response.from_

    @property
    def to(self) -> int:
        return self._response.to

    @property
    def pages(self) -> int:
        return self._response.pages

    @property
    def meta(self) -> dict[str, Any]:
        return self._response.meta

    @property
    def records(self) -> list[Any]:
        return self._response.records

    @property
    def is_empty(self) -> bool:
        return self._response.is_empty

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def on_apply(self, callback: ApplyCallback) -> Callable[[], None]:
        """Register *callback* for committed changes; returns an unsubscribe function."""
        self._listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    async def parse_url(self, query: str) -> None:
        await self.apply(self._codec.decode(query))

    async def parse_response(self, raw: Any) -> None:
        await self.apply(self._response.parse(raw))

    async def apply(self, params: FilterParams | Mapping[str, Any]) -> None:
        """Merge *params* and commit the result if it changed.

        A call made while another commit is in flight is dropped, not queued.

        Raises:
            UnavailableCryptoError: when the snapshot cannot be signed.
        """
        if self._lock.locked():
            logger.debug("filters.apply_dropped", reason="commit_in_progress")
            return

        async with self._lock:
            self._merge(params)
            snapshot = self.snapshot()
            signature = await self._signer.sign(self._signable(snapshot))
            if signature == self._signature:
                logger.debug("filters.apply_unchanged", signature=signature)
                return

            self._signature = signature
            query = self._codec.encode(snapshot)
            logger.info("filters.committed", query=query, listeners=len(self._listeners))
            try:
                for listener in list(self._listeners):
                    listener(snapshot, query)
            finally:
                self._persist()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _resolve_storables(storables: Sequence[str] | Literal["all"]) -> tuple[str, ...]:
        if storables == "all":
            return PERSISTABLE_FIELDS
        unknown = [s for s in storables if s not in PERSISTABLE_FIELDS]
        if unknown:
            raise ValueError(f"unknown storable fields: {', '.join(unknown)}")
        return tuple(dict.fromkeys(storables))

    def _signable(self, snapshot: FilterState) -> dict[str, Any]:
        """Snapshot with every sequence rendered as its encoded wire form.

        The signer is blind to element order inside a keyed list; sort
        priority and list-filter order both change the fetched page, so they
        are signed as single ordered tokens.  Map-valued filters stay
        mappings and keep signing independently of key order.
        """
        filters: dict[str, Any] = {}
        for key, value in snapshot["filters"].items():
            if isinstance(value, list):
                filters[key] = f"[{self._codec.encode_array(value)}]"
            elif isinstance(value, dict):
                filters[key] = value
            else:
                filters[key] = self._codec.encode_value(value)
        return {
            "page": snapshot["page"],
            "limit": snapshot["limit"],
            "search": snapshot["search"],
            "sorts": self._codec.encode_sorts(snapshot["sorts"]),
            "filters": filters,
        }

    def _merge(self, params: Any) -> None:
        if not isinstance(params, Mapping):
            return

        page = positive_int(params.get("page"))
        if page is not None:
            self._page = page

        limit = positive_int(params.get("limit"))
        if limit is not None:
            self._limit = limit

        search = params.get("search")
        if isinstance(search, str) and search != "":
            self._search = search

        sorts = params.get("sorts")
        if isinstance(sorts, (list, tuple)):
            self._sorts = normalize_sorts(sorts)

        filters = params.get("filters")
        if isinstance(filters, Mapping):
            if not is_filter_map(filters):
                logger.debug(
                    "filters.entries_pruned",
                    keys=sorted(str(k) for k, v in filters.items() if not is_compound(v)),
                )
            self._filters = normalize_filters(filters)

    def _restore(self) -> FilterParams:
        restored = FilterParams()
        if self._storage is None:
            return restored
        for name in self._storables:
            raw = self._storage.get(name)
            if raw is None:
                continue
            if name in ("page", "limit"):
                number = positive_int(raw)
                if number is not None:
                    restored[name] = number  # type: ignore[literal-required]
            elif name == "search":
                restored["search"] = self._codec.decode_value(raw)
            elif name == "sorts":
                restored["sorts"] = self._codec.decode_sorts(raw)
            elif name == "filters":
                restored["filters"] = self._codec.decode_filters(raw)
        if restored:
            logger.debug("filters.restored", fields=sorted(restored))
        return restored

    def _persist(self) -> None:
        if self._storage is None:
            return
        # search is percent-escaped so the adapter's trimming keeps its whitespace
        encoded = {
            "page": str(self._page),
            "limit": str(self._limit),
            "search": self._codec.encode_value(self._search) if self._search else "",
            "sorts": self._codec.encode_sorts(self._sorts),
            "filters": self._codec.encode_filters(self._filters),
        }
        for name in self._storables:
            if encoded[name]:
                self._storage.set(name, encoded[name])
            else:
                self._storage.remove(name)
