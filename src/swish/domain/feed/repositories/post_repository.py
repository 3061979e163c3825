"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from swish.domain.feed.aggregates.post import Post
from swish.domain.feed.value_objects import Comment


class PostRepository(ABC):
    """Repository interface for Post aggregates.

    ``toggle_like`` and ``append_comment`` must each be a single atomic
    mutation of the stored post: concurrent calls against the same post are
    applied one after the other, never interleaved.
    """

    @abstractmethod
    async def save(self, post: Post) -> None:
        """Persist a newly created post."""

    @abstractmethod
    async def find_by_id(self, post_id: UUID) -> Optional[Post]:
        """Find a post by its ID, with likes and comments loaded."""

    @abstractmethod
    async def list_all(self) -> list[Post]:
        """List every post, most recently created first."""

    @abstractmethod
    async def toggle_like(self, post_id: UUID, user_id: UUID) -> Optional[Post]:
        """Add the user to the post's likes, or remove them if present.

        Returns the updated post, or None if the post does not exist.
        """

    @abstractmethod
    async def append_comment(self, post_id: UUID, comment: Comment) -> Optional[Post]:
        """Append a comment after all existing comments.

        Returns the updated post, or None if the post does not exist.
        """
