"""SQLAlchemy repository implementations for identities."""

from swish_identity.infrastructure.persistence.sqlalchemy.repositories.user_credential_repository import (
    UserCredentialRepositorySQLAlchemy,
)
from swish_identity.infrastructure.persistence.sqlalchemy.repositories.user_repository import (
    UserRepositorySQLAlchemy,
)

__all__ = ["UserCredentialRepositorySQLAlchemy", "UserRepositorySQLAlchemy"]
