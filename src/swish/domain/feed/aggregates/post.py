"""Post aggregate root for the feed domain."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional
from uuid import UUID, uuid4

from swish.domain.feed.value_objects import (
    POST_CONTENT_MAX_LENGTH,
    Comment,
    normalize_content,
)
from swish.domain.shared.time import utc_now


class Post:
    """
    A post on the campus feed.

    Likes are a set of user ids (kept in the order they were given, without
    duplicates). Comments are append-only and keep insertion order. Both
    collections are only ever changed by the post repository, which applies
    each change as one atomic step against the stored post.
    """

    def __init__(  # NOQA: PLR0913
        self,
        content: str,
        author_id: UUID,
        image_url: Optional[str] = None,
        likes: Optional[Iterable[UUID]] = None,
        comments: Optional[Iterable[Comment]] = None,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._content = content
        self._author_id = author_id
        self._image_url = image_url or None
        self._likes: tuple[UUID, ...] = tuple(dict.fromkeys(likes or ()))
        self._comments: tuple[Comment, ...] = tuple(comments or ())
        now = utc_now()
        self._created_at = created_at or now
        self._updated_at = updated_at or self._created_at

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def content(self) -> str:
        return self._content

    @property
    def author_id(self) -> UUID:
        return self._author_id

    @property
    def image_url(self) -> Optional[str]:
        return self._image_url

    @property
    def likes(self) -> tuple[UUID, ...]:
        return self._likes

    @property
    def like_count(self) -> int:
        return len(self._likes)

    @property
    def comments(self) -> tuple[Comment, ...]:
        return self._comments

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @classmethod
    def create(
        cls,
        author_id: UUID,
        content: str | None,
        image_url: Optional[str] = None,
    ) -> Post:
        normalized = normalize_content(
            content,
            subject="Post",
            max_length=POST_CONTENT_MAX_LENGTH,
        )
        return cls(content=normalized, author_id=author_id, image_url=image_url)

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        content: str,
        author_id: UUID,
        image_url: Optional[str],
        likes: Iterable[UUID],
        comments: Iterable[Comment],
        created_at: datetime,
        updated_at: datetime,
    ) -> Post:
        return cls(
            id=id,
            content=content,
            author_id=author_id,
            image_url=image_url,
            likes=likes,
            comments=comments,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Post):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Post(id={self._id}, author_id={self._author_id}, "
            f"likes={len(self._likes)}, comments={len(self._comments)})"
        )
