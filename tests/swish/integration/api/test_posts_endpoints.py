"""Integration tests for the /api/posts endpoints."""

import asyncio
from uuid import uuid4

from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from swish.domain.feed import Post
from swish.infrastructure.persistence.sqlalchemy import PostRepositorySQLAlchemy


def _create_post(client: TestClient, prefix: str, headers: dict, content: str) -> dict:
    response = client.post(f"{prefix}/posts", headers=headers, json={"content": content})
    assert response.status_code == 201, response.text
    return response.json()


def _feed(client: TestClient, prefix: str, headers: dict) -> list[dict]:
    response = client.get(f"{prefix}/posts", headers=headers)
    assert response.status_code == 200, response.text
    return response.json()


class TestCreatePost:
    """Tests for POST /api/posts."""

    def test_create_post(
        self,
        test_client: TestClient,
        registered_user: dict,
        auth_headers: dict,
        api_prefix: str,
    ):
        response = test_client.post(
            f"{api_prefix}/posts",
            headers=auth_headers,
            json={"content": "  Hackathon this Friday!  ", "image_url": "https://i/1.png"},
        )

        assert response.status_code == 201
        post = response.json()
        assert post["content"] == "Hackathon this Friday!"
        assert post["image_url"] == "https://i/1.png"
        assert post["likes"] == []
        assert post["like_count"] == 0
        assert post["comments"] == []
        assert post["user"] == {
            "id": registered_user["user"]["id"],
            "name": "Asha Kulkarni",
            "profile_photo": None,
            "role": "student",
            "department": "Computer Science",
        }

    def test_empty_content(
        self,
        test_client: TestClient,
        auth_headers: dict,
        api_prefix: str,
    ):
        for body in ({"content": "   "}, {"content": ""}, {}):
            response = test_client.post(
                f"{api_prefix}/posts",
                headers=auth_headers,
                json=body,
            )

            assert response.status_code == 400
            assert response.json()["code"] == "EMPTY_CONTENT"

        assert _feed(test_client, api_prefix, auth_headers) == []

    def test_too_long_content(
        self,
        test_client: TestClient,
        auth_headers: dict,
        api_prefix: str,
    ):
        response = test_client.post(
            f"{api_prefix}/posts",
            headers=auth_headers,
            json={"content": "x" * 2001},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_without_token_nothing_is_stored(
        self,
        test_client: TestClient,
        auth_headers: dict,
        api_prefix: str,
    ):
        response = test_client.post(
            f"{api_prefix}/posts",
            json={"content": "sneaky"},
        )

        assert response.status_code == 401
        assert response.json()["code"] == "MISSING_TOKEN"
        assert _feed(test_client, api_prefix, auth_headers) == []

    def test_with_invalid_token_nothing_is_stored(
        self,
        test_client: TestClient,
        auth_headers: dict,
        api_prefix: str,
    ):
        response = test_client.post(
            f"{api_prefix}/posts",
            headers={"Authorization": "Bearer abc.def.ghi"},
            json={"content": "sneaky"},
        )

        assert response.status_code == 401
        assert response.json()["code"] == "INVALID_TOKEN"
        assert _feed(test_client, api_prefix, auth_headers) == []


class TestListPosts:
    """Tests for GET /api/posts."""

    def test_newest_first(
        self,
        test_client: TestClient,
        auth_headers: dict,
        other_headers: dict,
        api_prefix: str,
    ):
        _create_post(test_client, api_prefix, auth_headers, "first")
        _create_post(test_client, api_prefix, other_headers, "second")
        _create_post(test_client, api_prefix, auth_headers, "third")

        feed = _feed(test_client, api_prefix, auth_headers)

        assert [p["content"] for p in feed] == ["third", "second", "first"]
        assert [p["user"]["name"] for p in feed] == [
            "Asha Kulkarni",
            "Ravi Deshpande",
            "Asha Kulkarni",
        ]
        assert feed[1]["user"]["role"] == "faculty"
        assert feed[1]["user"]["department"] == "Mechanical"

    def test_requires_token(self, test_client: TestClient, api_prefix: str):
        response = test_client.get(f"{api_prefix}/posts")

        assert response.status_code == 401

    def test_author_shows_current_profile(
        self,
        test_client: TestClient,
        auth_headers: dict,
        api_prefix: str,
    ):
        _create_post(test_client, api_prefix, auth_headers, "hello")
        test_client.put(
            f"{api_prefix}/auth/profile",
            headers=auth_headers,
            json={"name": "Asha K.", "department": "Electronics"},
        )

        feed = _feed(test_client, api_prefix, auth_headers)

        assert feed[0]["user"]["name"] == "Asha K."
        assert feed[0]["user"]["department"] == "Electronics"

    def test_missing_author_is_unknown_user(
        self,
        test_client: TestClient,
        async_engine,
        auth_headers: dict,
        api_prefix: str,
    ):
        async def _insert_orphan():
            session_maker = async_sessionmaker(async_engine, class_=AsyncSession)
            async with session_maker() as session:
                await PostRepositorySQLAlchemy(session).save(
                    Post.create(author_id=uuid4(), content="ghost post"),
                )
                await session.commit()

        loop = asyncio.new_event_loop()
        try:
            loop.run_until_complete(_insert_orphan())
        finally:
            loop.close()

        feed = _feed(test_client, api_prefix, auth_headers)

        assert len(feed) == 1
        assert feed[0]["content"] == "ghost post"
        assert feed[0]["user"]["name"] == "Unknown User"
        assert feed[0]["user"]["id"] is None


class TestToggleLike:
    """Tests for POST /api/posts/{id}/like."""

    def test_like_then_unlike(
        self,
        test_client: TestClient,
        registered_user: dict,
        auth_headers: dict,
        api_prefix: str,
    ):
        post = _create_post(test_client, api_prefix, auth_headers, "like me")
        user_id = registered_user["user"]["id"]

        liked = test_client.post(
            f"{api_prefix}/posts/{post['id']}/like",
            headers=auth_headers,
        )
        assert liked.status_code == 200
        assert liked.json()["likes"] == [user_id]
        assert liked.json()["like_count"] == 1

        unliked = test_client.post(
            f"{api_prefix}/posts/{post['id']}/like",
            headers=auth_headers,
        )
        assert unliked.status_code == 200
        assert unliked.json()["likes"] == []
        assert unliked.json()["like_count"] == 0

    def test_like_with_own_user_id(
        self,
        test_client: TestClient,
        registered_user: dict,
        auth_headers: dict,
        api_prefix: str,
    ):
        post = _create_post(test_client, api_prefix, auth_headers, "like me")
        user_id = registered_user["user"]["id"]

        response = test_client.post(
            f"{api_prefix}/posts/{post['id']}/like",
            headers=auth_headers,
            json={"user_id": user_id},
        )

        assert response.status_code == 200
        assert response.json()["likes"] == [user_id]

    def test_like_on_behalf_of_someone_else(
        self,
        test_client: TestClient,
        auth_headers: dict,
        other_user: dict,
        api_prefix: str,
    ):
        post = _create_post(test_client, api_prefix, auth_headers, "like me")

        response = test_client.post(
            f"{api_prefix}/posts/{post['id']}/like",
            headers=auth_headers,
            json={"user_id": other_user["user"]["id"]},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"
        assert _feed(test_client, api_prefix, auth_headers)[0]["likes"] == []

    def test_likes_from_two_users(
        self,
        test_client: TestClient,
        registered_user: dict,
        auth_headers: dict,
        other_user: dict,
        other_headers: dict,
        api_prefix: str,
    ):
        post = _create_post(test_client, api_prefix, auth_headers, "like me")
        url = f"{api_prefix}/posts/{post['id']}/like"

        test_client.post(url, headers=auth_headers)
        response = test_client.post(url, headers=other_headers)

        assert set(response.json()["likes"]) == {
            registered_user["user"]["id"],
            other_user["user"]["id"],
        }

    def test_like_unknown_post(
        self,
        test_client: TestClient,
        auth_headers: dict,
        api_prefix: str,
    ):
        response = test_client.post(
            f"{api_prefix}/posts/{uuid4()}/like",
            headers=auth_headers,
        )

        assert response.status_code == 404
        assert response.json() == {"detail": "Post not found", "code": "POST_NOT_FOUND"}

    def test_like_without_token_changes_nothing(
        self,
        test_client: TestClient,
        auth_headers: dict,
        api_prefix: str,
    ):
        post = _create_post(test_client, api_prefix, auth_headers, "like me")

        response = test_client.post(f"{api_prefix}/posts/{post['id']}/like")

        assert response.status_code == 401
        assert _feed(test_client, api_prefix, auth_headers)[0]["likes"] == []


class TestAddComment:
    """Tests for POST /api/posts/{id}/comment."""

    def test_comments_in_order(
        self,
        test_client: TestClient,
        registered_user: dict,
        auth_headers: dict,
        other_headers: dict,
        api_prefix: str,
    ):
        post = _create_post(test_client, api_prefix, auth_headers, "thoughts?")
        url = f"{api_prefix}/posts/{post['id']}/comment"

        test_client.post(url, headers=auth_headers, json={"content": "first"})
        test_client.post(url, headers=other_headers, json={"content": "second"})
        response = test_client.post(url, headers=auth_headers, json={"content": "third"})

        assert response.status_code == 200
        comments = response.json()["comments"]
        assert [c["content"] for c in comments] == ["first", "second", "third"]
        assert [c["user_name"] for c in comments] == [
            "Asha Kulkarni",
            "Ravi Deshpande",
            "Asha Kulkarni",
        ]
        assert comments[0]["user_id"] == registered_user["user"]["id"]
        assert response.json()["user"]["name"] == "Asha Kulkarni"

    def test_comment_keeps_name_it_was_written_under(
        self,
        test_client: TestClient,
        auth_headers: dict,
        api_prefix: str,
    ):
        post = _create_post(test_client, api_prefix, auth_headers, "thoughts?")
        test_client.post(
            f"{api_prefix}/posts/{post['id']}/comment",
            headers=auth_headers,
            json={"content": "mine"},
        )
        test_client.put(
            f"{api_prefix}/auth/profile",
            headers=auth_headers,
            json={"name": "Renamed"},
        )

        feed = _feed(test_client, api_prefix, auth_headers)

        assert feed[0]["comments"][0]["user_name"] == "Asha Kulkarni"
        assert feed[0]["user"]["name"] == "Renamed"

    def test_explicit_user_name(
        self,
        test_client: TestClient,
        auth_headers: dict,
        api_prefix: str,
    ):
        post = _create_post(test_client, api_prefix, auth_headers, "thoughts?")

        response = test_client.post(
            f"{api_prefix}/posts/{post['id']}/comment",
            headers=auth_headers,
            json={"content": "hi", "user_name": "Asha"},
        )

        assert response.json()["comments"][0]["user_name"] == "Asha"

    def test_empty_comment(
        self,
        test_client: TestClient,
        auth_headers: dict,
        api_prefix: str,
    ):
        post = _create_post(test_client, api_prefix, auth_headers, "thoughts?")

        response = test_client.post(
            f"{api_prefix}/posts/{post['id']}/comment",
            headers=auth_headers,
            json={"content": "  "},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "EMPTY_CONTENT"
        assert _feed(test_client, api_prefix, auth_headers)[0]["comments"] == []

    def test_comment_on_unknown_post(
        self,
        test_client: TestClient,
        auth_headers: dict,
        api_prefix: str,
    ):
        response = test_client.post(
            f"{api_prefix}/posts/{uuid4()}/comment",
            headers=auth_headers,
            json={"content": "hello"},
        )

        assert response.status_code == 404
        assert response.json()["code"] == "POST_NOT_FOUND"

    def test_comment_without_token(
        self,
        test_client: TestClient,
        auth_headers: dict,
        api_prefix: str,
    ):
        post = _create_post(test_client, api_prefix, auth_headers, "thoughts?")

        response = test_client.post(
            f"{api_prefix}/posts/{post['id']}/comment",
            json={"content": "anon"},
        )

        assert response.status_code == 401
        assert _feed(test_client, api_prefix, auth_headers)[0]["comments"] == []
