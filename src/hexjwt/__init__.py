"""
hexjwt – HS256 JSON Web Tokens signed with hex-encoded shared secrets.

Import path convention::

    from hexjwt import Token
    from hexjwt.kernel.errors import InvalidSecretError
    from hexjwt.security.jwt import JwtIssuer, JwtDecoder
    from hexjwt.config import TokenSettings, EnvSettingsLoader
"""

from hexjwt.kernel.errors import DecodeError, InvalidSecretError
from hexjwt.security.jwt import Header, Token

__version__ = "0.1.0"
__all__ = ["DecodeError", "Header", "InvalidSecretError", "Token", "__version__"]
