"""SQLAlchemy repository implementations for the feed."""

from swish.infrastructure.persistence.sqlalchemy.repositories.post_repository import (
    PostRepositorySQLAlchemy,
)

__all__ = ["PostRepositorySQLAlchemy"]
