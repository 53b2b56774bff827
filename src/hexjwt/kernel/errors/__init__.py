"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── TokenError           (token.py)
    │   ├── InvalidSecretError
    │   └── DecodeError
    └── ConfigError          (hexjwt.config.validation)
        ├── MissingRequiredSettingError
        └── InvalidSettingValueError
"""

from hexjwt.kernel.errors.base import BaseError
from hexjwt.kernel.errors.token import DecodeError, InvalidSecretError, TokenError

__all__ = [
    "BaseError",
    "DecodeError",
    "InvalidSecretError",
    "TokenError",
]
