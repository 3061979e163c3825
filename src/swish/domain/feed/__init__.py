"""Feed domain: posts, likes and comments.

This domain handles:
- Post aggregate (content, author reference, likes set, ordered comments)
- Comment value object with a snapshot of the author's display name
- Repository contract for atomic like toggling and comment appends
"""

from swish.domain.feed.aggregates import Post
from swish.domain.feed.exceptions import (
    ContentTooLongError,
    EmptyContentError,
    PostNotFoundError,
)
from swish.domain.feed.repositories import PostRepository
from swish.domain.feed.value_objects import (
    COMMENT_CONTENT_MAX_LENGTH,
    POST_CONTENT_MAX_LENGTH,
    Comment,
)

__all__ = [
    "COMMENT_CONTENT_MAX_LENGTH",
    "POST_CONTENT_MAX_LENGTH",
    "Comment",
    "ContentTooLongError",
    "EmptyContentError",
    "Post",
    "PostNotFoundError",
    "PostRepository",
]
