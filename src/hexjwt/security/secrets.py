from __future__ import annotations

import secrets

__all__ = ["DEFAULT_SECRET_BYTES", "generate_secret"]

# 512 bits, the upper end of the recommended range
DEFAULT_SECRET_BYTES = 64


def generate_secret(nbytes: int = DEFAULT_SECRET_BYTES) -> str:
    """Return a fresh random secret as lowercase hex (``2 * nbytes`` digits)."""
    if nbytes < 1:
        raise ValueError("nbytes must be at least 1")
    return secrets.token_hex(nbytes)
