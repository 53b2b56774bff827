"""Kernel – dependency-free building blocks shared by every layer."""

from hexjwt.kernel.errors import (
    BaseError,
    DecodeError,
    InvalidSecretError,
    TokenError,
)

__all__ = [
    "BaseError",
    "DecodeError",
    "InvalidSecretError",
    "TokenError",
]
