"""Config settings – FilterSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from mp_filterstate.config.errors import InvalidSettingValueError

PERSISTABLE_FIELDS: tuple[str, ...] = ("page", "limit", "search", "sorts", "filters")
DIGEST_ALGORITHMS: frozenset[str] = frozenset({"sha256", "sha3_256", "blake2s"})


@dataclasses.dataclass
class FilterSettings:
    """Settings for a :class:`~mp_filterstate.application.filtering.FilterStore`.

    Environment variables use the ``FILTERS_`` prefix::

        FILTERS_STORAGE_PREFIX=orders
        FILTERS_DEFAULT_LIMIT=50
        FILTERS_STORABLES=limit,sorts

    ``storables`` accepts any of :data:`PERSISTABLE_FIELDS` or ``all``.
    """

    env_prefix: ClassVar[str] = "FILTERS"

    storage_prefix: str = ""
    default_limit: int = 20
    storables: list[str] = dataclasses.field(default_factory=lambda: ["limit", "sorts"])
    digest_algorithm: str = "sha256"
    redis_url: str = ""

    def __post_init__(self) -> None:
        if self.default_limit < 1:
            raise InvalidSettingValueError("default_limit", self.default_limit, "must be >= 1")
        unknown = [s for s in self.storables if s != "all" and s not in PERSISTABLE_FIELDS]
        if unknown:
            raise InvalidSettingValueError(
                "storables", self.storables, f"unknown fields {', '.join(unknown)}"
            )
        if self.digest_algorithm not in DIGEST_ALGORITHMS:
            raise InvalidSettingValueError(
                "digest_algorithm", self.digest_algorithm, "unsupported 256-bit digest"
            )

    @property
    def persist_all(self) -> bool:
        return "all" in self.storables


__all__ = ["DIGEST_ALGORITHMS", "PERSISTABLE_FIELDS", "FilterSettings"]
