"""Application filtering – order-independent content signatures.

A value is flattened into ``"<dotted.path>:<scalar>"`` tokens which are
sorted before hashing, so two mappings that differ only in key insertion
order sign identically.  List elements nested under a mapping key share that
key's path; lists at the root (or nested directly in a list) contribute
their indices instead.
"""
from __future__ import annotations

import asyncio
import hashlib
import hmac
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from mp_filterstate.kernel.errors import UnavailableCryptoError
from mp_filterstate.kernel.types import format_scalar

__all__ = ["DigestProvider", "HashlibDigestProvider", "Signer"]

SEPARATOR = "|"


@runtime_checkable
class DigestProvider(Protocol):
    """Port: asynchronous fixed-size digest of a byte string (hex encoded)."""

    async def digest(self, data: bytes) -> str: ...


class HashlibDigestProvider:
    """:class:`DigestProvider` backed by :mod:`hashlib` (SHA-256 by default)."""

    def __init__(self, algorithm: str = "sha256") -> None:
        self.algorithm = algorithm

    async def digest(self, data: bytes) -> str:
        try:
            hasher = hashlib.new(self.algorithm)
        except (ValueError, TypeError) as exc:
            raise UnavailableCryptoError(self.algorithm) from exc
        hasher.update(data)
        await asyncio.sleep(0)
        return hasher.hexdigest()


def _is_container(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple))


class Signer:
    """Sign arbitrary JSON-like values and validate signatures."""

    def __init__(self, provider: DigestProvider | None = None) -> None:
        self._provider = provider or HashlibDigestProvider()

    def flatten(self, value: Any, prefix: str = "") -> list[str]:
        if not _is_container(value):
            return [f"{prefix or 'value'}:{format_scalar(value)}"]

        items = value.items() if isinstance(value, Mapping) else enumerate(value)
        tokens: list[str] = []
        for key, item in items:
            path = f"{prefix}.{key}" if prefix else str(key)
            if isinstance(item, Mapping):
                tokens.extend(self.flatten(item, path))
            elif isinstance(item, (list, tuple)):
                for element in item:
                    if _is_container(element):
                        tokens.extend(self.flatten(element, path))
                    else:
                        tokens.append(f"{path}:{format_scalar(element)}")
            else:
                tokens.append(f"{path}:{format_scalar(item)}")
        return sorted(tokens)

    async def sign(self, value: Any) -> str:
        """Return the hex digest of *value*'s sorted token list.

        Raises:
            UnavailableCryptoError: when the digest primitive cannot be used.
        """
        payload = SEPARATOR.join(self.flatten(value)).encode("utf-8")
        return await self._provider.digest(payload)

    async def validate(self, value: Any, signature: str) -> bool:
        expected = await self.sign(value)
        return hmac.compare_digest(expected.encode(), signature.encode())
