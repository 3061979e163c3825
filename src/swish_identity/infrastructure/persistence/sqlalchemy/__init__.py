"""SQLAlchemy implementation for swish_identity persistence.

Provides:
- IdentityBase: Declarative base for identity models
- UserModel: SQLAlchemy model for users
- UserCredentialModel: SQLAlchemy model for credentials
- UserRepositorySQLAlchemy: Repository implementation for users
- UserCredentialRepositorySQLAlchemy: Repository implementation for credentials
"""

from swish_identity.infrastructure.persistence.sqlalchemy.base import IdentityBase
from swish_identity.infrastructure.persistence.sqlalchemy.models import (
    UserCredentialModel,
    UserModel,
)
from swish_identity.infrastructure.persistence.sqlalchemy.repositories import (
    UserCredentialRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

__all__ = [
    "IdentityBase",
    "UserCredentialModel",
    "UserCredentialRepositorySQLAlchemy",
    "UserModel",
    "UserRepositorySQLAlchemy",
]
