"""Token entity — claim set, signing and decoding of HS256 JWTs."""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from types import MappingProxyType
from typing import Any, Mapping

from hexjwt.kernel.errors import DecodeError
from hexjwt.kernel.time import Clock, unix_time
from hexjwt.kernel.types import JsonObject, JsonValue, Nothing, Option, Some
from hexjwt.security.jwt import codec, verifier
from hexjwt.security.jwt.parts import SEPARATOR, assemble, signing_input
from hexjwt.security.jwt.signer import ALGORITHM, sign, validate_secret

__all__ = ["Header", "Token"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Header:
    """JOSE header. Always ``{"alg": "HS256", "typ": "JWT"}`` for tokens built here."""

    alg: str = ALGORITHM
    typ: str = "JWT"

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


class Token:
    """A mutable claim set that can be signed into a compact HS256 token.

    The secret is never stored on the instance; it is passed to each
    signing or verification call.

    Usage::

        token = Token("liao.gg", unix_time() + 3600).add_claim("username", "kevin")
        compact = token.get_token(secret)

        if Token.verify(compact, secret):
            restored = Token.from_token(compact, secret)
    """

    __slots__ = ("_header", "_payload")

    def __init__(
        self,
        issuer: str | None = None,
        expiration: int | float | None = None,
        issued_at: int | float | None = None,
        *,
        clock: Clock | None = None,
    ) -> None:
        self._header = Header()
        self._payload: JsonObject = {}
        if issuer is not None:
            self._payload["iss"] = issuer
        if expiration is not None:
            self._payload["exp"] = expiration
        # iat is only filled in for a fully configured token
        if issuer is not None and expiration is not None:
            self._payload["iat"] = issued_at if issued_at is not None else unix_time(clock)

    @property
    def header(self) -> Header:
        return self._header

    @property
    def claims(self) -> Mapping[str, JsonValue]:
        """Read-only view of the payload."""
        return MappingProxyType(self._payload)

    def add_claim(self, name: str, value: JsonValue) -> Token:
        """Set claim *name* to *value*, replacing any previous value. Chainable."""
        self._payload[name] = value
        return self

    def get_claim(self, name: str) -> Option[JsonValue]:
        if name in self._payload:
            return Some(self._payload[name])
        return Nothing()

    def get_token(self, secret: str) -> str:
        """Sign the current claims and return the compact token.

        Raises
        ------
        InvalidSecretError
            *secret* is not a hex string.
        """
        validate_secret(secret)
        header = codec.encode(self._header.to_dict())
        payload = codec.encode(self._payload)
        return assemble(header, payload, sign(signing_input(header, payload), secret))

    def __contains__(self, name: object) -> bool:
        return name in self._payload

    def __repr__(self) -> str:
        return f"Token(claims={self._payload!r})"

    # ------------------------------------------------------------------
    # Decoding received tokens
    # ------------------------------------------------------------------

    @staticmethod
    def verify(token: str, secret: str) -> bool:
        return verifier.verify(token, secret)

    @staticmethod
    def unwrap(token: str, secret: str) -> tuple[JsonValue, JsonValue] | None:
        """Return the decoded ``(header, payload)`` of a verified token.

        Neither part is checked against the expected shape and expiry is not
        looked at. Returns ``None`` if the token does not verify.
        """
        if not verifier.verify(token, secret):
            return None
        header, payload, _ = token.split(SEPARATOR)
        try:
            return codec.decode(header), codec.decode(payload)
        except DecodeError as exc:
            logger.debug("token rejected reason=undecodable code=%s", exc.code)
            return None

    @classmethod
    def from_token(cls, token: str, secret: str) -> Token | None:
        """Rebuild a :class:`Token` from a verified token.

        Claims are copied in the order they were decoded. The received
        header is discarded and the default one is used.
        """
        payload = cls._verified_payload(token, secret)
        if payload is None:
            return None
        result = cls()
        for name, value in payload.items():
            result.add_claim(name, value)
        return result

    @classmethod
    def expired(cls, token: str, secret: str, *, clock: Clock | None = None) -> bool:
        """Whether *token* should be treated as expired.

        A token that does not verify, or has no numeric ``exp`` claim,
        counts as expired. Otherwise it is expired once ``now >= exp``.
        """
        payload = cls._verified_payload(token, secret)
        if payload is None:
            return True
        exp = payload.get("exp")
        if isinstance(exp, bool) or not isinstance(exp, (int, float)):
            return True
        return unix_time(clock) >= exp

    @staticmethod
    def _verified_payload(token: str, secret: str) -> dict[str, Any] | None:
        unwrapped = Token.unwrap(token, secret)
        if unwrapped is None:
            return None
        payload = unwrapped[1]
        if not isinstance(payload, dict):
            logger.debug("token rejected reason=payload_not_object")
            return None
        return payload
