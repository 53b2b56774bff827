"""Signature verification for compact HS256 tokens."""
from __future__ import annotations

import hmac
import logging

from hexjwt.security.jwt.parts import signing_input, split
from hexjwt.security.jwt.signer import sign, validate_secret

__all__ = ["verify"]

logger = logging.getLogger(__name__)


def verify(token: str, secret: str) -> bool:
    """Return ``True`` iff *token* carries a valid HS256 signature for *secret*.

    The secret is validated first, so a malformed secret raises
    :class:`~hexjwt.kernel.errors.InvalidSecretError` even for a malformed
    token. Every other problem yields ``False``.
    """
    validate_secret(secret)
    token_parts = split(token)
    if token_parts is None:
        logger.debug("token rejected reason=malformed")
        return False
    expected = sign(signing_input(token_parts.header, token_parts.payload), secret)
    # compare_digest only accepts ASCII str, the received part may not be
    if not hmac.compare_digest(expected.encode("ascii"), token_parts.signature.encode("utf-8", "surrogatepass")):
        logger.debug("token rejected reason=signature_mismatch")
        return False
    return True
