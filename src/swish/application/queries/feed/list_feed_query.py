"""Query returning the whole campus feed."""

from __future__ import annotations

from typing import TYPE_CHECKING

from swish.application.dtos import PostView
from swish.application.services import FeedAssembler
from swish.domain.feed import PostRepository

if TYPE_CHECKING:
    from swish.application.factories import RepositoryFactory


class ListFeedQuery:
    """All posts, newest first, with their authors resolved."""

    def __init__(self, post_repository: PostRepository, assembler: FeedAssembler):
        self._post_repo = post_repository
        self._assembler = assembler

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListFeedQuery:
        return cls(
            post_repository=factory.post_repository(),
            assembler=FeedAssembler.from_factory(factory),
        )

    async def execute(self) -> list[PostView]:
        posts = await self._post_repo.list_all()
        return await self._assembler.enrich_all(posts)
