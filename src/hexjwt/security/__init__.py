"""Security — HS256 tokens and secret generation."""
from hexjwt.security.jwt import Header, JwtDecoder, JwtIssuer, Token
from hexjwt.security.secrets import generate_secret

__all__ = [
    "Header",
    "JwtDecoder",
    "JwtIssuer",
    "Token",
    "generate_secret",
]
