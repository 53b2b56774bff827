"""Compact serialisation — join and split ``header.payload.signature``."""
from __future__ import annotations

from typing import Any, NamedTuple

__all__ = ["SEPARATOR", "TokenParts", "assemble", "signing_input", "split"]

SEPARATOR = "."


class TokenParts(NamedTuple):
    header: str
    payload: str
    signature: str


def signing_input(header: str, payload: str) -> bytes:
    """The bytes the signature is computed over."""
    return (header + SEPARATOR + payload).encode("utf-8", "surrogatepass")


def assemble(header: str, payload: str, signature: str) -> str:
    return SEPARATOR.join((header, payload, signature))


def split(token: Any) -> TokenParts | None:
    """Split a compact token into its three parts.

    Returns ``None`` for anything that is not a string with exactly two
    separators. Empty parts are allowed here; they simply fail verification.
    """
    if not isinstance(token, str):
        return None
    pieces = token.split(SEPARATOR)
    if len(pieces) != 3:
        return None
    return TokenParts(*pieces)
