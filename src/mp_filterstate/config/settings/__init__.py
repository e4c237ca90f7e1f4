"""Config settings – FilterSettings and its env/dotenv loaders."""
from mp_filterstate.config.settings.filters import (
    DIGEST_ALGORITHMS,
    PERSISTABLE_FIELDS,
    FilterSettings,
)
from mp_filterstate.config.settings.loaders import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    SettingsLoader,
)

__all__ = [
    "DIGEST_ALGORITHMS",
    "PERSISTABLE_FIELDS",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "FilterSettings",
    "SettingsLoader",
]
