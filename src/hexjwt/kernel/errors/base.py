"""Root error class for the hexjwt error hierarchy."""

from __future__ import annotations


class BaseError(Exception):
    """Root of every exception raised by hexjwt.

    ``code`` is a stable slug (``invalid_secret``, ``decode_error``, ...) so
    callers can branch on the failure without matching message text. The
    triggering exception, if any, is chained with ``raise ... from``.
    """

    default_code: str = "hexjwt_error"

    def __init__(self, message: str, *, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


__all__ = ["BaseError"]
