"""Feed router for posts, likes and comments."""

import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, status

from swish.application.commands import (
    AddCommentCommand,
    CreatePostCommand,
    ToggleLikeCommand,
)
from swish.application.queries import ListFeedQuery
from swish.application.services import FeedAssembler
from swish.presentation.api.dependencies import RepoFactory
from swish.presentation.api.schemas.common import ErrorResponse
from swish.presentation.api.schemas.posts import (
    AddCommentRequest,
    CreatePostRequest,
    LikeRequest,
    PostResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a post",
    responses={
        201: {"description": "Post created"},
        400: {"model": ErrorResponse, "description": "Empty or too long content"},
        401: {"model": ErrorResponse, "description": "Missing or invalid token"},
    },
)
async def create_post(
    request: CreatePostRequest,
    factory: RepoFactory,
) -> PostResponse:
    """Publish a post as the authenticated user."""
    command = CreatePostCommand.from_factory(factory)

    try:
        post = await command.execute(content=request.content, image_url=request.image_url)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    view = await FeedAssembler.from_factory(factory).enrich(post)
    return PostResponse.from_view(view)


@router.get(
    "",
    summary="List the feed",
    responses={
        200: {"description": "All posts, newest first"},
        401: {"model": ErrorResponse, "description": "Missing or invalid token"},
    },
)
async def list_posts(factory: RepoFactory) -> list[PostResponse]:
    views = await ListFeedQuery.from_factory(factory).execute()
    return [PostResponse.from_view(view) for view in views]


@router.post(
    "/{post_id}/like",
    summary="Like or unlike a post",
    responses={
        200: {"description": "Updated post"},
        400: {"model": ErrorResponse, "description": "user_id does not match token"},
        401: {"model": ErrorResponse, "description": "Missing or invalid token"},
        404: {"model": ErrorResponse, "description": "Post not found"},
    },
)
async def toggle_like(
    post_id: UUID,
    factory: RepoFactory,
    request: Optional[LikeRequest] = None,
) -> PostResponse:
    """
    Toggle the caller's like: liked posts become unliked and vice versa.

    The body is optional. A ``user_id`` in it must be the caller's own id.
    """
    command = ToggleLikeCommand.from_factory(factory)

    try:
        post = await command.execute(
            post_id=post_id,
            claimed_user_id=request.user_id if request else None,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    view = await FeedAssembler.from_factory(factory).enrich(post)
    return PostResponse.from_view(view)


@router.post(
    "/{post_id}/comment",
    summary="Comment on a post",
    responses={
        200: {"description": "Updated post"},
        400: {"model": ErrorResponse, "description": "Empty comment"},
        401: {"model": ErrorResponse, "description": "Missing or invalid token"},
        404: {"model": ErrorResponse, "description": "Post not found"},
    },
)
async def add_comment(
    post_id: UUID,
    request: AddCommentRequest,
    factory: RepoFactory,
) -> PostResponse:
    """
    Append a comment by the caller.

    ``user_name`` defaults to the caller's current display name and is
    stored with the comment as written.
    """
    command = AddCommentCommand.from_factory(factory)

    try:
        post = await command.execute(
            post_id=post_id,
            content=request.content,
            claimed_user_id=request.user_id,
            user_name=request.user_name,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    view = await FeedAssembler.from_factory(factory).enrich(post)
    return PostResponse.from_view(view)
