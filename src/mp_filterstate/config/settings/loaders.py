"""Config settings – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
import typing
from typing import Any

from dotenv import load_dotenv

from mp_filterstate.config.errors import InvalidSettingValueError
from mp_filterstate.config.settings.filters import FilterSettings


class SettingsLoader(abc.ABC):
    """Port: build :class:`FilterSettings` from an external source."""

    @abc.abstractmethod
    def load(self) -> FilterSettings: ...


class EnvSettingsLoader(SettingsLoader):
    """Read ``FILTERS_<FIELD>`` environment variables.

    Unset variables keep the field default.  ``FILTERS_STORABLES`` is a
    comma-separated list; ``FILTERS_DEFAULT_LIMIT`` must parse as an int.
    """

    def load(self) -> FilterSettings:
        hints = typing.get_type_hints(FilterSettings)
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(FilterSettings):
            env_key = f"{FilterSettings.env_prefix}_{field.name}".upper()
            raw = os.environ.get(env_key)
            if raw is None:
                continue
            try:
                kwargs[field.name] = self._coerce(raw, hints[field.name])
            except ValueError as exc:
                raise InvalidSettingValueError(env_key, raw, str(exc)) from exc

        return FilterSettings(**kwargs)

    @staticmethod
    def _coerce(value: str, type_hint: Any) -> Any:
        if type_hint is int:
            return int(value)
        if typing.get_origin(type_hint) is list:
            return [v.strip() for v in value.split(",") if v.strip()]
        return value.strip()


class DotenvSettingsLoader(SettingsLoader):
    """Load a ``.env`` file into the environment, then read it like :class:`EnvSettingsLoader`."""

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self) -> FilterSettings:
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load()


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
