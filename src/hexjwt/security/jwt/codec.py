"""Segment codec — JSON values to and from unpadded base64url text."""
from __future__ import annotations

import json
from typing import Any

from jwt.utils import base64url_decode, base64url_encode

from hexjwt.kernel.errors import DecodeError
from hexjwt.kernel.types import JsonValue

__all__ = ["decode", "encode"]


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def encode(obj: Any) -> str:
    """Serialise *obj* to compact JSON and return it as base64url without padding.

    Key order is the mapping's iteration order. Non-ASCII text is emitted as
    UTF-8 rather than ``\\u`` escapes, and ``NaN``/``Infinity`` are refused.
    A lone surrogate has no UTF-8 form and is written as its ``\\udXXX``
    JSON escape.
    """
    text = json.dumps(obj, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    return base64url_encode(text.encode("utf-8", "backslashreplace")).decode("ascii")


def decode(text: str) -> JsonValue:
    """Inverse of :func:`encode`.

    Raises
    ------
    DecodeError
        *text* is not base64url, or the bytes are not UTF-8 JSON.
    """
    try:
        raw = base64url_decode(text)
    except (TypeError, ValueError) as exc:
        raise DecodeError("Segment is not valid base64url") from exc
    try:
        return json.loads(raw.decode("utf-8"), parse_constant=_reject_constant)
    except ValueError as exc:
        raise DecodeError("Segment is not valid JSON") from exc
