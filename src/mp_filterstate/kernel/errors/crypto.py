"""Kernel errors – UnavailableCryptoError."""

from __future__ import annotations

from mp_filterstate.kernel.errors.base import FilterStateError


class UnavailableCryptoError(FilterStateError):
    """The hashing primitive backing the signer cannot be used.

    Fatal to the commit path: the pending ``apply`` is rejected and no
    weaker comparison is attempted instead.
    """

    default_code = "unavailable_crypto"

    def __init__(self, algorithm: str, message: str | None = None) -> None:
        super().__init__(
            message or f"Digest algorithm '{algorithm}' is unavailable",
            algorithm=algorithm,
        )
        self.algorithm = algorithm


__all__ = ["UnavailableCryptoError"]
