"""Like or unlike a post."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional
from uuid import UUID

from swish.application.commands.feed._acting_user import ensure_acting_user
from swish.domain.feed import Post, PostNotFoundError, PostRepository

if TYPE_CHECKING:
    from swish.application.context import UserContext
    from swish.application.factories import RepositoryFactory


class ToggleLikeCommand:
    """Flip the current user's like on a post.

    Calling it twice leaves the post as it was.
    """

    def __init__(self, post_repository: PostRepository, current_user: UserContext):
        self._post_repo = post_repository
        self._user_id = current_user.user_id

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ToggleLikeCommand:
        return cls(
            post_repository=factory.post_repository(),
            current_user=factory.user_context,
        )

    async def execute(
        self,
        post_id: UUID,
        claimed_user_id: Optional[UUID] = None,
    ) -> Post:
        ensure_acting_user(self._user_id, claimed_user_id)

        post = await self._post_repo.toggle_like(post_id, self._user_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post
