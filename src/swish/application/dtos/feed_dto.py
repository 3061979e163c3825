"""DTOs for the assembled feed."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Optional
from uuid import UUID

if TYPE_CHECKING:
    from swish.domain.feed import Comment, Post
    from swish_identity.domain.user import User

UNKNOWN_AUTHOR_NAME = "Unknown User"


@dataclass(frozen=True)
class AuthorView:
    """Public projection of a post's author."""

    id: Optional[UUID]
    name: str
    profile_photo: Optional[str]
    role: Optional[str]
    department: Optional[str]

    @classmethod
    def from_user(cls, user: User) -> AuthorView:
        return cls(
            id=user.id,
            name=user.name,
            profile_photo=user.profile_photo or None,
            role=user.role.value,
            department=user.department,
        )

    @classmethod
    def unknown(cls) -> AuthorView:
        return cls(
            id=None,
            name=UNKNOWN_AUTHOR_NAME,
            profile_photo=None,
            role=None,
            department=None,
        )


@dataclass(frozen=True)
class CommentView:
    content: str
    user_id: UUID
    user_name: str
    timestamp: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> CommentView:
        return cls(
            content=comment.content,
            user_id=comment.user_id,
            user_name=comment.user_name,
            timestamp=comment.timestamp,
        )


@dataclass(frozen=True)
class PostView:
    """A post joined with its author's public profile."""

    id: UUID
    content: str
    image_url: Optional[str]
    likes: tuple[UUID, ...]
    comments: tuple[CommentView, ...]
    created_at: datetime
    updated_at: datetime
    author: AuthorView

    @property
    def like_count(self) -> int:
        return len(self.likes)

    @classmethod
    def from_post(cls, post: Post, author: AuthorView) -> PostView:
        return cls(
            id=post.id,
            content=post.content,
            image_url=post.image_url,
            likes=post.likes,
            comments=tuple(CommentView.from_comment(c) for c in post.comments),
            created_at=post.created_at,
            updated_at=post.updated_at,
            author=author,
        )
