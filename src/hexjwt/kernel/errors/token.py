"""Token errors — secret format and segment decoding failures."""

from __future__ import annotations

from hexjwt.kernel.errors.base import BaseError


class TokenError(BaseError):
    """Base class for errors raised by the token layer."""

    default_code = "token_error"


class InvalidSecretError(TokenError):
    """The supplied secret is not a non-empty string of hex digits.

    This is the only error token operations raise; every other failure is
    reported as ``False`` / ``None`` / ``Nothing()``.
    """

    default_code = "invalid_secret"

    def __init__(self, message: str = "Secret must be a hex string (no 0x prefix)") -> None:
        super().__init__(message)


class DecodeError(TokenError):
    """A token segment is not base64url-encoded JSON."""

    default_code = "decode_error"


__all__ = ["DecodeError", "InvalidSecretError", "TokenError"]
