"""Config – FilterSettings, env/dotenv loaders and config errors."""

from mp_filterstate.config.errors import ConfigError, InvalidSettingValueError
from mp_filterstate.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    FilterSettings,
    SettingsLoader,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "FilterSettings",
    "InvalidSettingValueError",
    "SettingsLoader",
]
