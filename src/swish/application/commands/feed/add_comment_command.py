"""Comment on a post."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from swish.application.commands.feed._acting_user import ensure_acting_user
from swish.domain.feed import Comment, Post, PostNotFoundError, PostRepository
from swish_identity.domain.user import UserNotFoundError, UserRepository

if TYPE_CHECKING:
    from swish.application.context import UserContext
    from swish.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class AddCommentCommand:
    """Append a comment by the current user to a post.

    The comment keeps the display name it was written under; later name
    changes do not rewrite old comments.
    """

    def __init__(
        self,
        post_repository: PostRepository,
        user_repository: UserRepository,
        current_user: UserContext,
    ):
        self._post_repo = post_repository
        self._user_repo = user_repository
        self._user_id = current_user.user_id

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> AddCommentCommand:
        return cls(
            post_repository=factory.post_repository(),
            user_repository=factory.user_repository(),
            current_user=factory.user_context,
        )

    async def execute(
        self,
        post_id: UUID,
        content: Optional[str],
        claimed_user_id: Optional[UUID] = None,
        user_name: Optional[str] = None,
    ) -> Post:
        ensure_acting_user(self._user_id, claimed_user_id)

        comment = Comment.create(
            content=content,
            user_id=self._user_id,
            user_name=await self._resolve_user_name(user_name),
        )
        post = await self._post_repo.append_comment(post_id, comment)
        if post is None:
            raise PostNotFoundError(post_id)

        logger.info("User %s commented on post %s", self._user_id, post_id)
        return post

    async def _resolve_user_name(self, user_name: Optional[str]) -> str:
        if user_name and user_name.strip():
            return user_name.strip()
        user = await self._user_repo.find_by_id(self._user_id)
        if user is None:
            raise UserNotFoundError(self._user_id)
        return user.name
