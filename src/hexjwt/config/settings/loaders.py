"""Config settings – EnvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, TypeVar

from hexjwt.config.settings.base import Settings
from hexjwt.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

T = TypeVar("T", bound=Settings)


class SettingsLoader(abc.ABC):
    """Port: build a :class:`Settings` subclass from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Read ``<PREFIX>_<FIELD>`` environment variables.

    Fields typed ``int`` are parsed as base-10 integers; every other field
    receives the raw string. Unset fields fall back to their defaults.
    """

    def load(self, settings_class: type[T]) -> T:
        values: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            key = settings_class.setting_key(field.name)
            raw = os.environ.get(key)
            if raw is None:
                if field.default is dataclasses.MISSING:
                    raise MissingRequiredSettingError(key)
                continue
            values[field.name] = self._parse(key, raw, field.type)

        try:
            return settings_class(**values)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load {settings_class.__name__}: {exc}") from exc

    @staticmethod
    def _parse(key: str, raw: str, type_hint: Any) -> Any:
        # annotations are strings under ``from __future__ import annotations``
        if type_hint is int or type_hint == "int":
            try:
                return int(raw)
            except ValueError as exc:
                raise InvalidSettingValueError(key, "must be an integer") from exc
        return raw


__all__ = ["EnvSettingsLoader", "SettingsLoader"]
