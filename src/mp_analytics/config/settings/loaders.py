"""Config settings – EnvSettingsLoader, MappingSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
import typing
from collections.abc import Mapping
from typing import Any, TypeVar

from mp_analytics.config.settings.base import Settings
from mp_analytics.config.validation import ConfigError, InvalidSettingValueError

T = TypeVar("T", bound=Settings)

_TRUTHY = ("1", "true", "yes", "on")


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...

    def _build(self, settings_class: type[T], raw_values: Mapping[str, str]) -> T:
        """Coerce *raw_values* (keyed by field name) and construct the settings."""
        hints = typing.get_type_hints(settings_class)
        kwargs: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            if field.name not in raw_values:
                continue
            kwargs[field.name] = _coerce(field.name, raw_values[field.name], hints.get(field.name, str))

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(
                f"Failed to load {settings_class.__name__}: {exc}",
                detail={"settings": settings_class.__name__, "fields": sorted(kwargs)},
            ) from exc


class EnvSettingsLoader(SettingsLoader):
    """Load settings from environment-style ``PREFIX_FIELD`` keys.

    *environ* defaults to :data:`os.environ`; pass any mapping to resolve
    configuration from somewhere else (tests, a config service snapshot).
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    def load(self, settings_class: type[T]) -> T:
        prefix = getattr(settings_class, "_prefix", "").upper()
        raw: dict[str, str] = {}
        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = f"{prefix}_{field.name}".upper().lstrip("_")
            value = self._environ.get(env_key)
            if value is not None:
                raw[field.name] = value
        return self._build(settings_class, raw)


class MappingSettingsLoader(SettingsLoader):
    """Load settings from a plain ``{field_name: value}`` mapping."""

    def __init__(self, values: Mapping[str, str]) -> None:
        self._values = dict(values)

    def load(self, settings_class: type[T]) -> T:
        return self._build(settings_class, self._values)


def _coerce(name: str, value: Any, type_hint: Any) -> Any:
    if not isinstance(value, str):
        raise InvalidSettingValueError(name, value, "expected a string")
    if type_hint is bool:
        return value.strip().lower() in _TRUTHY
    if type_hint is int:
        try:
            return int(value)
        except ValueError as exc:
            raise InvalidSettingValueError(name, value, "expected an integer") from exc
    if type_hint is float:
        try:
            return float(value)
        except ValueError as exc:
            raise InvalidSettingValueError(name, value, "expected a number") from exc
    return value


__all__ = ["EnvSettingsLoader", "MappingSettingsLoader", "SettingsLoader"]
