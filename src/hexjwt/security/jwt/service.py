from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

from hexjwt.kernel.time import Clock, SystemClock, unix_time
from hexjwt.kernel.types import JsonValue
from hexjwt.security.jwt.token import Token

if TYPE_CHECKING:
    from hexjwt.config.settings import TokenSettings

__all__ = ["JwtDecoder", "JwtIssuer"]


class JwtIssuer:
    """Issues (signs) tokens with the secret, issuer and lifetime from *settings*."""

    def __init__(self, settings: TokenSettings, clock: Clock | None = None) -> None:
        self._settings = settings
        self._clock = clock or SystemClock()

    def build(self, claims: Mapping[str, JsonValue] | None = None, **extra: Any) -> Token:
        now = unix_time(self._clock)
        token = Token(
            self._settings.issuer or None,
            now + self._settings.lifetime,
            now,
        )
        if "iat" not in token:
            token.add_claim("iat", now)
        for name, value in {**(claims or {}), **extra}.items():
            token.add_claim(name, value)
        return token

    def issue(self, claims: Mapping[str, JsonValue] | None = None, **extra: Any) -> str:
        return self.build(claims, **extra).get_token(self._settings.secret)


class JwtDecoder:
    """Verifies and decodes tokens signed with the secret from *settings*."""

    def __init__(self, settings: TokenSettings, clock: Clock | None = None) -> None:
        self._settings = settings
        self._clock = clock or SystemClock()

    def verify(self, token: str) -> bool:
        return Token.verify(token, self._settings.secret)

    def expired(self, token: str) -> bool:
        return Token.expired(token, self._settings.secret, clock=self._clock)

    def decode(self, token: str) -> Token | None:
        """Return the token's claims, or ``None`` if it is invalid or expired."""
        if self.expired(token):
            return None
        return Token.from_token(token, self._settings.secret)
