"""SQLAlchemy models for posts, likes and comments."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import (
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column

from swish.domain.shared.time import utc_now
from swish.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class PostModel(Base, TimestampMixin):
    """A campus post.

    Likes and comments live in child tables so each mutation is a single
    row insert or delete taken while the post row is locked.
    """

    __tablename__ = "posts"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    # No FK to users: identity and feed tables are owned by separate packages
    author_id: Mapped[UUID] = mapped_column(Uuid, nullable=False, index=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    image_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)

    def __repr__(self) -> str:
        return f"<PostModel(id={self.id}, author_id={self.author_id})>"


class PostLikeModel(Base):
    """One user's like on one post. The composite key forbids duplicates."""

    __tablename__ = "post_likes"

    post_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("posts.id", ondelete="CASCADE"),
        primary_key=True,
    )
    user_id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<PostLikeModel(post_id={self.post_id}, user_id={self.user_id})>"


class PostCommentModel(Base):
    """A comment, ordered within its post by ``position``."""

    __tablename__ = "post_comments"
    __table_args__ = (
        UniqueConstraint("post_id", "position", name="uq_post_comments_position"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    post_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    user_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)
    user_name: Mapped[str] = mapped_column(String(100), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )

    def __repr__(self) -> str:
        return (
            f"<PostCommentModel(post_id={self.post_id}, position={self.position})>"
        )
