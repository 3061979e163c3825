"""Joins posts with their authors' public profiles."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

from swish.application.dtos import AuthorView, PostView

if TYPE_CHECKING:
    from swish.application.factories import RepositoryFactory
    from swish.domain.feed import Post
    from swish_identity.domain.user import UserRepository

logger = logging.getLogger(__name__)


class FeedAssembler:
    """Read-only service turning posts into ``PostView``s.

    Authors are resolved with one batched lookup per call. A post whose
    author cannot be found is still shown, attributed to "Unknown User".
    """

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> FeedAssembler:
        return cls(user_repository=factory.user_repository())

    async def enrich(self, post: Post) -> PostView:
        return (await self.enrich_all([post]))[0]

    async def enrich_all(self, posts: Iterable[Post]) -> list[PostView]:
        posts = list(posts)
        if not posts:
            return []

        authors = await self._user_repo.find_by_ids({p.author_id for p in posts})
        views = []
        for post in posts:
            user = authors.get(post.author_id)
            if user is None:
                logger.debug("Author %s of post %s not found", post.author_id, post.id)
                author = AuthorView.unknown()
            else:
                author = AuthorView.from_user(user)
            views.append(PostView.from_post(post, author))
        return views
