"""SQLAlchemy persistence for the feed.

Provides:
- Base / TimestampMixin: declarative base shared with the identity tables
- PostModel, PostLikeModel, PostCommentModel: feed tables
- PostRepositorySQLAlchemy: repository implementation for posts
"""

from swish.infrastructure.persistence.sqlalchemy.models import (
    Base,
    PostCommentModel,
    PostLikeModel,
    PostModel,
    TimestampMixin,
)
from swish.infrastructure.persistence.sqlalchemy.repositories import (
    PostRepositorySQLAlchemy,
)

__all__ = [
    "Base",
    "PostCommentModel",
    "PostLikeModel",
    "PostModel",
    "PostRepositorySQLAlchemy",
    "TimestampMixin",
]
