"""Create a post on the campus feed."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from swish.domain.feed import Post, PostRepository

if TYPE_CHECKING:
    from swish.application.context import UserContext
    from swish.application.factories import RepositoryFactory


class CreatePostCommand:
    """Command to publish a post as the current user."""

    def __init__(self, post_repository: PostRepository, current_user: UserContext):
        self._post_repo = post_repository
        self._user_id = current_user.user_id

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreatePostCommand:
        return cls(
            post_repository=factory.post_repository(),
            current_user=factory.user_context,
        )

    async def execute(
        self,
        content: Optional[str],
        image_url: Optional[str] = None,
    ) -> Post:
        post = Post.create(
            author_id=self._user_id,
            content=content,
            image_url=(image_url or "").strip() or None,
        )
        await self._post_repo.save(post)
        return post
