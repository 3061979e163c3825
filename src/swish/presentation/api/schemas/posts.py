"""Feed schemas for request/response models."""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from swish.application.dtos import AuthorView, CommentView, PostView


class CreatePostRequest(BaseModel):
    """Request schema for creating a post.

    Content is trimmed and length-checked by the domain, so blank content
    fails with EMPTY_CONTENT rather than a generic validation error.
    """

    content: Optional[str] = None
    image_url: Optional[str] = Field(default=None, max_length=1024)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"content": "Hackathon this Friday in Lab 3!"},
        },
    )


class LikeRequest(BaseModel):
    """Optional body for liking a post; ``user_id`` must match the token."""

    user_id: Optional[UUID] = None


class AddCommentRequest(BaseModel):
    """Request schema for commenting on a post."""

    content: Optional[str] = None
    user_id: Optional[UUID] = None
    user_name: Optional[str] = Field(default=None, max_length=100)


class AuthorResponse(BaseModel):
    id: Optional[UUID]
    name: str
    profile_photo: Optional[str]
    role: Optional[str]
    department: Optional[str]

    @classmethod
    def from_view(cls, author: AuthorView) -> AuthorResponse:
        return cls(
            id=author.id,
            name=author.name,
            profile_photo=author.profile_photo,
            role=author.role,
            department=author.department,
        )


class CommentResponse(BaseModel):
    content: str
    user_id: UUID
    user_name: str
    timestamp: datetime

    @classmethod
    def from_view(cls, comment: CommentView) -> CommentResponse:
        return cls(
            content=comment.content,
            user_id=comment.user_id,
            user_name=comment.user_name,
            timestamp=comment.timestamp,
        )


class PostResponse(BaseModel):
    """A post as shown in the feed, with its author's public profile."""

    id: UUID
    content: str
    image_url: Optional[str]
    likes: list[UUID]
    like_count: int
    comments: list[CommentResponse]
    created_at: datetime
    updated_at: datetime
    user: AuthorResponse

    @classmethod
    def from_view(cls, view: PostView) -> PostResponse:
        return cls(
            id=view.id,
            content=view.content,
            image_url=view.image_url,
            likes=list(view.likes),
            like_count=view.like_count,
            comments=[CommentResponse.from_view(c) for c in view.comments],
            created_at=view.created_at,
            updated_at=view.updated_at,
            user=AuthorResponse.from_view(view.author),
        )
