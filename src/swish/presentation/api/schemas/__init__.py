"""Pydantic schemas for API request/response models."""

from swish.presentation.api.schemas.auth import (
    AuthResponse,
    LoginRequest,
    ProfileResponse,
    UpdateProfileRequest,
    UserResponse,
)
from swish.presentation.api.schemas.common import (
    ApiInfoResponse,
    ErrorResponse,
    HealthResponse,
)
from swish.presentation.api.schemas.posts import (
    AddCommentRequest,
    AuthorResponse,
    CommentResponse,
    CreatePostRequest,
    LikeRequest,
    PostResponse,
)

__all__ = [
    "AddCommentRequest",
    "ApiInfoResponse",
    "AuthResponse",
    "AuthorResponse",
    "CommentResponse",
    "CreatePostRequest",
    "ErrorResponse",
    "HealthResponse",
    "LikeRequest",
    "LoginRequest",
    "PostResponse",
    "ProfileResponse",
    "UpdateProfileRequest",
    "UserResponse",
]
