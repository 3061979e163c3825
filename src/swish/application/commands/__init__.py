"""Application commands - write operations."""

from swish.application.commands.feed import (
    AddCommentCommand,
    CreatePostCommand,
    ToggleLikeCommand,
)

__all__ = ["AddCommentCommand", "CreatePostCommand", "ToggleLikeCommand"]
