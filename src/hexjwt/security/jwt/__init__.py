"""Security – HS256 JSON Web Tokens with hex secrets."""
from hexjwt.security.jwt.parts import TokenParts, assemble, split
from hexjwt.security.jwt.signer import ALGORITHM, sign, validate_secret
from hexjwt.security.jwt.token import Header, Token
from hexjwt.security.jwt.verifier import verify
from hexjwt.security.jwt.service import JwtDecoder, JwtIssuer

__all__ = [
    "ALGORITHM",
    "Header",
    "JwtDecoder",
    "JwtIssuer",
    "Token",
    "TokenParts",
    "assemble",
    "sign",
    "split",
    "validate_secret",
    "verify",
]
