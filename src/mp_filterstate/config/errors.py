"""Config – errors raised while loading or validating :class:`FilterSettings`."""
from __future__ import annotations

from mp_filterstate.kernel.errors import FilterStateError


class ConfigError(FilterStateError):
    """Settings could not be built from the environment."""
    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """A setting is present but cannot be used.

    ``setting`` is the environment variable when the raw string failed to
    coerce, and the field name when validation rejected the coerced value.
    """
    default_code = "invalid_setting_value"

    def __init__(self, setting: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting}' has invalid value {value!r}: {reason}",
            setting=setting,
            value=value,
        )
        self.setting = setting
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError"]
