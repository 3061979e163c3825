"""Feed value objects."""

from swish.domain.feed.value_objects.comment import Comment
from swish.domain.feed.value_objects.content import (
    COMMENT_CONTENT_MAX_LENGTH,
    POST_CONTENT_MAX_LENGTH,
    normalize_content,
)

__all__ = [
    "COMMENT_CONTENT_MAX_LENGTH",
    "POST_CONTENT_MAX_LENGTH",
    "Comment",
    "normalize_content",
]
