"""Data transfer objects returned by the application layer."""

from swish.application.dtos.feed_dto import (
    UNKNOWN_AUTHOR_NAME,
    AuthorView,
    CommentView,
    PostView,
)

__all__ = ["UNKNOWN_AUTHOR_NAME", "AuthorView", "CommentView", "PostView"]
