"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Base class for environment-backed settings.

    ``_prefix`` names the environment namespace (``JWT`` reads ``JWT_*``).
    Errors always name a setting by its environment key, whether it came
    from the environment or was passed to the constructor.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def setting_key(cls, field_name: str) -> str:
        """Environment key for *field_name*, e.g. ``secret`` -> ``JWT_SECRET``."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def _validate(self) -> None:
        """Override to add cross-field validation."""


__all__ = ["Settings"]
