"""Kernel errors – FilterStateError, the root of every error this package raises."""

from __future__ import annotations

from typing import Any


class FilterStateError(Exception):
    """Root error carrying a stable ``code`` and structured ``detail``.

    ``detail`` holds the values a log line needs (algorithm name, setting
    name, offending value) so callers never parse the message.
    """

    default_code: str = "filter_state_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        **detail: Any,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Plain dict suitable as structlog event data."""
        return {"code": self.code, "message": self.message, **self.detail}


__all__ = ["FilterStateError"]
