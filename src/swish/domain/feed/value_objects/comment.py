"""Comment value object embedded in a post."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from swish.domain.feed.value_objects.content import (
    COMMENT_CONTENT_MAX_LENGTH,
    normalize_content,
)
from swish.domain.shared.time import utc_now


@dataclass(frozen=True)
class Comment:
    """A comment on a post.

    ``user_name`` is the author's display name as it was when the comment
    was written. It is stored with the comment and never re-resolved.
    """

    content: str
    user_id: UUID
    user_name: str
    timestamp: datetime

    @classmethod
    def create(
        cls,
        content: str | None,
        user_id: UUID,
        user_name: str,
    ) -> Comment:
        return cls(
            content=normalize_content(
                content,
                subject="Comment",
                max_length=COMMENT_CONTENT_MAX_LENGTH,
            ),
            user_id=user_id,
            user_name=user_name,
            timestamp=utc_now(),
        )
