"""SQLAlchemy implementation of PostRepository.

Like toggles and comment appends lock the post row (``SELECT ... FOR UPDATE``)
and then change a single child row in one statement, so two requests against
the same post are serialized by the database rather than by read-modify-write
in Python.
"""

import logging
from collections import defaultdict
from typing import Iterable, Optional
from uuid import UUID

from sqlalchemy import delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from swish.domain.feed import Comment, Post, PostRepository
from swish.domain.shared.time import ensure_tz_aware, utc_now
from swish.infrastructure.persistence.sqlalchemy.models import (
    PostCommentModel,
    PostLikeModel,
    PostModel,
)

logger = logging.getLogger(__name__)


class PostRepositorySQLAlchemy(PostRepository):
    """SQLAlchemy implementation of the PostRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, post: Post) -> None:
        model = PostModel(
            id=post.id,
            author_id=post.author_id,
            content=post.content,
            image_url=post.image_url,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )
        self._session.add(model)
        for user_id in post.likes:
            self._session.add(PostLikeModel(post_id=post.id, user_id=user_id))
        for position, comment in enumerate(post.comments):
            self._session.add(self._comment_to_model(post.id, position, comment))
        await self._session.flush()
        logger.info("Created post: %s (author: %s)", post.id, post.author_id)

    async def find_by_id(self, post_id: UUID) -> Optional[Post]:
        stmt = select(PostModel).where(PostModel.id == post_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return (await self._map_all_to_domain([model]))[0]

    async def list_all(self) -> list[Post]:
        stmt = select(PostModel).order_by(
            PostModel.created_at.desc(),
            PostModel.id.desc(),
        )
        result = await self._session.execute(stmt)
        models = list(result.scalars().all())
        return await self._map_all_to_domain(models)

    async def toggle_like(self, post_id: UUID, user_id: UUID) -> Optional[Post]:
        model = await self._lock_post(post_id)
        if model is None:
            return None

        removed = await self._session.execute(
            delete(PostLikeModel).where(
                PostLikeModel.post_id == post_id,
                PostLikeModel.user_id == user_id,
            ),
        )
        if removed.rowcount == 0:  # type: ignore[attr-defined]
            await self._session.execute(
                insert(PostLikeModel).values(
                    post_id=post_id,
                    user_id=user_id,
                    created_at=utc_now(),
                ),
            )
            logger.debug("User %s liked post %s", user_id, post_id)
        else:
            logger.debug("User %s unliked post %s", user_id, post_id)

        model.updated_at = utc_now()
        await self._session.flush()
        return await self.find_by_id(post_id)

    async def append_comment(self, post_id: UUID, comment: Comment) -> Optional[Post]:
        model = await self._lock_post(post_id)
        if model is None:
            return None

        # The INSERT computes the position, so it is read under the write lock
        next_position = (
            select(func.coalesce(func.max(PostCommentModel.position), -1) + 1)
            .where(PostCommentModel.post_id == post_id)
            .scalar_subquery()
        )
        await self._session.execute(
            insert(PostCommentModel).values(
                post_id=post_id,
                position=next_position,
                user_id=comment.user_id,
                user_name=comment.user_name,
                content=comment.content,
                created_at=comment.timestamp,
            ),
        )
        model.updated_at = utc_now()
        await self._session.flush()
        logger.debug("Comment by %s added to post %s", comment.user_id, post_id)
        return await self.find_by_id(post_id)

    async def _lock_post(self, post_id: UUID) -> PostModel | None:
        # SQLite ignores FOR UPDATE; there the first write statement takes the lock
        stmt = select(PostModel).where(PostModel.id == post_id).with_for_update()
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def _map_all_to_domain(self, models: Iterable[PostModel]) -> list[Post]:
        models = list(models)
        if not models:
            return []
        post_ids = [model.id for model in models]

        likes: dict[UUID, list[UUID]] = defaultdict(list)
        like_rows = await self._session.execute(
            select(PostLikeModel.post_id, PostLikeModel.user_id)
            .where(PostLikeModel.post_id.in_(post_ids))
            .order_by(PostLikeModel.created_at, PostLikeModel.user_id),
        )
        for like_post_id, like_user_id in like_rows:
            likes[like_post_id].append(like_user_id)

        comments: dict[UUID, list[Comment]] = defaultdict(list)
        comment_rows = await self._session.execute(
            select(PostCommentModel)
            .where(PostCommentModel.post_id.in_(post_ids))
            .order_by(PostCommentModel.post_id, PostCommentModel.position),
        )
        for comment_model in comment_rows.scalars():
            comments[comment_model.post_id].append(
                self._comment_to_domain(comment_model),
            )

        return [
            Post.reconstitute(
                id=model.id,
                content=model.content,
                author_id=model.author_id,
                image_url=model.image_url,
                likes=likes.get(model.id, []),
                comments=comments.get(model.id, []),
                created_at=ensure_tz_aware(model.created_at),
                updated_at=ensure_tz_aware(model.updated_at),
            )
            for model in models
        ]

    def _comment_to_model(
        self,
        post_id: UUID,
        position: int,
        comment: Comment,
    ) -> PostCommentModel:
        return PostCommentModel(
            post_id=post_id,
            position=position,
            user_id=comment.user_id,
            user_name=comment.user_name,
            content=comment.content,
            created_at=comment.timestamp,
        )

    def _comment_to_domain(self, model: PostCommentModel) -> Comment:
        return Comment(
            content=model.content,
            user_id=model.user_id,
            user_name=model.user_name,
            timestamp=ensure_tz_aware(model.created_at),
        )
