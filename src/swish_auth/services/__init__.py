"""Authentication services."""

from swish_auth.services.jwt_service import JWTService

__all__ = ["JWTService"]
