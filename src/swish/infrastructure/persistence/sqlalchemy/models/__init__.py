"""SQLAlchemy models for the feed."""

from swish.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from swish.infrastructure.persistence.sqlalchemy.models.post_model import (
    PostCommentModel,
    PostLikeModel,
    PostModel,
)

__all__ = [
    "Base",
    "PostCommentModel",
    "PostLikeModel",
    "PostModel",
    "TimestampMixin",
]
