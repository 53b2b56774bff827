"""Config settings – TokenSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from hexjwt.config.settings.base import Settings
from hexjwt.config.validation import InvalidSettingValueError
from hexjwt.kernel.errors import InvalidSecretError
from hexjwt.security.jwt.signer import validate_secret


@dataclasses.dataclass(repr=False)
class TokenSettings(Settings):
    """Secret, issuer and lifetime used by :class:`~hexjwt.security.jwt.JwtIssuer`.

    Loaded from ``JWT_SECRET``, ``JWT_ISSUER`` and ``JWT_LIFETIME`` by
    :class:`~hexjwt.config.settings.EnvSettingsLoader`.
    """

    _prefix: ClassVar[str] = "JWT"

    secret: str
    issuer: str = ""
    lifetime: int = 3600

    def _validate(self) -> None:
        try:
            validate_secret(self.secret)
        except InvalidSecretError as exc:
            raise InvalidSettingValueError(self.setting_key("secret"), "must be a hex string") from exc
        if self.lifetime <= 0:
            raise InvalidSettingValueError(self.setting_key("lifetime"), "must be a positive number of seconds")

    def __repr__(self) -> str:
        return f"TokenSettings(secret='***', issuer={self.issuer!r}, lifetime={self.lifetime!r})"


__all__ = ["TokenSettings"]
