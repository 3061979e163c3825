"""Unit tests for the Post aggregate."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from swish.domain.feed import (
    POST_CONTENT_MAX_LENGTH,
    Comment,
    ContentTooLongError,
    EmptyContentError,
    Post,
)
from swish.domain.shared.exceptions import ErrorCode


class TestPostCreate:
    def test_create_trims_content(self):
        author_id = uuid4()

        post = Post.create(author_id=author_id, content="  Hello campus  ")

        assert post.content == "Hello campus"
        assert post.author_id == author_id
        assert post.likes == ()
        assert post.comments == ()
        assert post.image_url is None

    def test_create_sets_timestamps(self):
        post = Post.create(author_id=uuid4(), content="Hi")

        assert post.created_at.tzinfo is not None
        assert post.updated_at == post.created_at

    @pytest.mark.parametrize("content", [None, "", "   ", "\n\t"])
    def test_create_rejects_blank_content(self, content):
        with pytest.raises(EmptyContentError) as exc_info:
            Post.create(author_id=uuid4(), content=content)

        assert exc_info.value.code == ErrorCode.EMPTY_CONTENT
        assert exc_info.value.message == "Post content is required"

    def test_create_rejects_overlong_content(self):
        with pytest.raises(ContentTooLongError):
            Post.create(author_id=uuid4(), content="x" * (POST_CONTENT_MAX_LENGTH + 1))

    def test_create_accepts_content_at_limit(self):
        post = Post.create(author_id=uuid4(), content="x" * POST_CONTENT_MAX_LENGTH)

        assert len(post.content) == POST_CONTENT_MAX_LENGTH

    def test_blank_image_url_becomes_none(self):
        post = Post.create(author_id=uuid4(), content="Hi", image_url="")

        assert post.image_url is None


class TestPostReconstitute:
    def test_likes_are_deduplicated_in_order(self):
        first, second = uuid4(), uuid4()
        now = datetime.now(tz=timezone.utc)

        post = Post.reconstitute(
            id=uuid4(),
            content="Hi",
            author_id=uuid4(),
            image_url=None,
            likes=[first, second, first],
            comments=[],
            created_at=now,
            updated_at=now,
        )

        assert post.likes == (first, second)
        assert post.like_count == 2
        assert first in post.likes

    def test_comments_keep_order(self):
        user_id = uuid4()
        comments = [
            Comment.create(content=text, user_id=user_id, user_name="Alice")
            for text in ("one", "two", "three")
        ]
        now = datetime.now(tz=timezone.utc)

        post = Post.reconstitute(
            id=uuid4(),
            content="Hi",
            author_id=uuid4(),
            image_url=None,
            likes=[],
            comments=comments,
            created_at=now,
            updated_at=now,
        )

        assert [c.content for c in post.comments] == ["one", "two", "three"]

    def test_equality_is_by_id(self):
        post_id = uuid4()
        now = datetime.now(tz=timezone.utc)
        kwargs = dict(
            id=post_id,
            author_id=uuid4(),
            image_url=None,
            likes=[],
            comments=[],
            created_at=now,
            updated_at=now,
        )

        assert Post.reconstitute(content="a", **kwargs) == Post.reconstitute(
            content="b",
            **kwargs,
        )
