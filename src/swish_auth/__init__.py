"""Swish Auth - session token infrastructure.

This package issues and verifies the signed bearer tokens used by the API.
It knows nothing about users beyond their id.

Architecture:
    swish_auth/
    ├── services/           # JWT issuing and verification
    ├── schemas.py          # Decoded token payload
    └── exceptions.py       # Missing / invalid token errors

Usage:
    from swish_auth import JWTService, InvalidTokenError
"""

from swish_auth.exceptions import AuthError, InvalidTokenError, MissingTokenError
from swish_auth.schemas import TokenPayload
from swish_auth.services import JWTService

__all__ = [
    "AuthError",
    "InvalidTokenError",
    "JWTService",
    "MissingTokenError",
    "TokenPayload",
]
