"""HS256 signer — hex secret validation and HMAC-SHA256 signatures."""
from __future__ import annotations

import re
from typing import Any

from jwt.algorithms import HMACAlgorithm
from jwt.utils import base64url_encode

from hexjwt.kernel.errors import InvalidSecretError

__all__ = ["ALGORITHM", "secret_key", "sign", "validate_secret"]

ALGORITHM = "HS256"

_HEX_RE = re.compile(r"[0-9a-fA-F]+")
_HS256 = HMACAlgorithm(HMACAlgorithm.SHA256)


def validate_secret(secret: Any) -> str:
    """Return *secret* unchanged if it is a non-empty hex string.

    Raises
    ------
    InvalidSecretError
        For anything else, including ``None`` and ``""``.
    """
    if not isinstance(secret, str) or _HEX_RE.fullmatch(secret) is None:
        raise InvalidSecretError()
    return secret


def secret_key(secret: str) -> bytes:
    """Decode a hex secret into HMAC key bytes.

    An odd number of digits is read as a big-endian number and gets one
    leading ``0`` nibble, so ``"abc"`` is the key ``0a bc``.
    """
    digits = validate_secret(secret)
    if len(digits) % 2:
        digits = "0" + digits
    return bytes.fromhex(digits)


def sign(message: bytes, secret: str) -> str:
    """HMAC-SHA256 *message* with the hex *secret*; base64url without padding."""
    key = secret_key(secret)
    digest = _HS256.sign(message, key)
    return base64url_encode(digest).decode("ascii")
