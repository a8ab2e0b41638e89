"""End-to-end tests for the comments API.

Requests go through the full FastAPI app over ASGI with in-memory
persistence; users and posts are seeded through the app's container.
"""

from uuid import uuid4

import pytest

from commentary.domain.service import JWTService
from tests.conftest import auth_headers, seed_post, seed_user
from tests.harness import create_api_fixture

api_env = create_api_fixture()


async def _create(api_env, post_id, headers, content="Hello", parent_id=None):
    body = {"content": content}
    if parent_id:
        body["parent_id"] = parent_id
    return await api_env.client.post(
        f"/posts/{post_id}/comments", json=body, headers=headers
    )


class TestHealth:
    """Health endpoint."""

    @pytest.mark.asyncio
    async def test_health(self, api_env):
        response = await api_env.client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestCreateComment:
    """POST /posts/{post_id}/comments."""

    @pytest.mark.asyncio
    async def test_create_returns_201_with_author(self, api_env):
        # Arrange
        user = await seed_user(api_env.container, "alice")
        post = await seed_post(api_env.container, user.id)
        headers = await auth_headers(api_env.container, user)

        # Act
        response = await _create(api_env, post.id, headers, "First!")

        # Assert
        assert response.status_code == 201
        data = response.json()
        assert data["content"] == "First!"
        assert data["depth"] == 1
        assert data["thread_id"] == data["id"]
        assert data["created_by"] == str(user.id)
        assert data["author"]["username"] == "alice"

    @pytest.mark.asyncio
    async def test_cookie_auth_is_accepted(self, api_env):
        # Arrange
        user = await seed_user(api_env.container)
        post = await seed_post(api_env.container)
        async with api_env.container() as request_container:
            jwt_service = await request_container.get(JWTService)
            token = jwt_service.create_token(str(user.id), str(user.username))
        api_env.client.cookies.set("auth_token", token)

        # Act
        response = await _create(api_env, post.id, headers={})

        # Assert
        assert response.status_code == 201

    @pytest.mark.asyncio
    async def test_missing_token_returns_401(self, api_env):
        post = await seed_post(api_env.container)

        response = await _create(api_env, post.id, headers={})

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_invalid_token_returns_401(self, api_env):
        post = await seed_post(api_env.container)

        response = await _create(
            api_env, post.id, headers={"Authorization": "Bearer not-a-jwt"}
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_unknown_post_returns_404(self, api_env):
        user = await seed_user(api_env.container)
        headers = await auth_headers(api_env.container, user)

        response = await _create(api_env, uuid4(), headers)

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_parent_on_other_post_returns_400(self, api_env):
        # Arrange
        user = await seed_user(api_env.container)
        headers = await auth_headers(api_env.container, user)
        post_a = await seed_post(api_env.container)
        post_b = await seed_post(api_env.container)
        parent = (await _create(api_env, post_a.id, headers)).json()

        # Act
        response = await _create(api_env, post_b.id, headers, parent_id=parent["id"])

        # Assert
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_empty_content_returns_422(self, api_env):
        user = await seed_user(api_env.container)
        headers = await auth_headers(api_env.container, user)
        post = await seed_post(api_env.container)

        response = await _create(api_env, post.id, headers, content="   ")

        assert response.status_code == 422


class TestEditAndDelete:
    """PATCH and DELETE /comments/{comment_id}."""

    @pytest.mark.asyncio
    async def test_author_edits_and_deletes(self, api_env):
        # Arrange
        user = await seed_user(api_env.container)
        headers = await auth_headers(api_env.container, user)
        post = await seed_post(api_env.container)
        comment = (await _create(api_env, post.id, headers)).json()

        # Act
        edited = await api_env.client.patch(
            f"/comments/{comment['id']}", json={"content": "Edited"}, headers=headers
        )
        deleted = await api_env.client.delete(
            f"/comments/{comment['id']}", headers=headers
        )
        fetched = await api_env.client.get(f"/comments/{comment['id']}")
        deleted_again = await api_env.client.delete(
            f"/comments/{comment['id']}", headers=headers
        )

        # Assert
        assert edited.status_code == 200
        assert edited.json()["content"] == "Edited"
        assert edited.json()["updated_at"] is not None
        assert deleted.status_code == 200
        assert deleted.json()["success"] is True
        assert fetched.status_code == 404
        assert deleted_again.status_code == 404

    @pytest.mark.asyncio
    async def test_other_user_gets_403(self, api_env):
        # Arrange
        author = await seed_user(api_env.container, "author")
        intruder = await seed_user(api_env.container, "intruder")
        post = await seed_post(api_env.container)
        comment = (
            await _create(
                api_env, post.id, await auth_headers(api_env.container, author)
            )
        ).json()
        intruder_headers = await auth_headers(api_env.container, intruder)

        # Act
        edit = await api_env.client.patch(
            f"/comments/{comment['id']}",
            json={"content": "Mine now"},
            headers=intruder_headers,
        )
        delete = await api_env.client.delete(
            f"/comments/{comment['id']}", headers=intruder_headers
        )

        # Assert
        assert edit.status_code == 403
        assert delete.status_code == 403


class TestReadPaths:
    """Listings, replies and thread views."""

    @pytest.mark.asyncio
    async def test_threaded_conversation(self, api_env):
        """A and B build C1 <- C2 <- C3; B deletes C2; counts and views stay consistent."""
        # Arrange
        user_a = await seed_user(api_env.container, "alice")
        user_b = await seed_user(api_env.container, "bob")
        headers_a = await auth_headers(api_env.container, user_a)
        headers_b = await auth_headers(api_env.container, user_b)
        post = await seed_post(api_env.container, user_a.id)

        # Act
        c1 = (await _create(api_env, post.id, headers_a, "C1")).json()
        c2 = (await _create(api_env, post.id, headers_b, "C2", c1["id"])).json()
        c1_after_c2 = (await api_env.client.get(f"/comments/{c1['id']}")).json()
        c3 = (await _create(api_env, post.id, headers_a, "C3", c2["id"])).json()
        c1_after_c3 = (await api_env.client.get(f"/comments/{c1['id']}")).json()
        c2_after_c3 = (await api_env.client.get(f"/comments/{c2['id']}")).json()
        listing = await api_env.client.get(f"/posts/{post.id}/comments")
        replies = await api_env.client.get(f"/comments/{c1['id']}/replies")
        denied = await api_env.client.delete(
            f"/comments/{c2['id']}", headers=headers_a
        )
        deleted = await api_env.client.delete(
            f"/comments/{c2['id']}", headers=headers_b
        )
        thread = await api_env.client.get(f"/threads/{c1['id']}")
        c1_after_delete = (await api_env.client.get(f"/comments/{c1['id']}")).json()

        # Assert
        assert c1["path"] == []
        assert c1["thread_id"] == c1["id"]
        assert c1["replies_count"] == 0
        assert c2["path"] == [c1["id"]]
        assert c2["thread_id"] == c1["id"]
        assert c2["author"]["username"] == "bob"
        assert c1_after_c2["replies_count"] == 1
        assert c3["path"] == [c1["id"], c2["id"]]
        assert c3["thread_id"] == c1["id"]
        assert c3["depth"] == 3
        assert c2_after_c3["replies_count"] == 1
        assert c1_after_c3["replies_count"] == 1

        listed = listing.json()
        assert [c["id"] for c in listed["comments"]] == [c1["id"]]
        assert listed["pagination"]["total"] == 1
        assert [r["id"] for r in replies.json()["replies"]] == [c2["id"]]

        assert denied.status_code == 403
        assert deleted.status_code == 200
        assert c1_after_delete["replies_count"] == 0

        view = thread.json()
        assert view["total"] == 2
        assert [c["id"] for c in view["comments"]] == [c1["id"], c3["id"]]
        assert view["comments"][1]["anchor_id"] == c1["id"]
        assert view["comments"][1]["path"] == [c1["id"], c2["id"]]

    @pytest.mark.asyncio
    async def test_deep_thread_is_served(self, api_env):
        """A 300-level reply chain comes back whole from the thread view."""
        # Arrange
        user = await seed_user(api_env.container)
        headers = await auth_headers(api_env.container, user)
        post = await seed_post(api_env.container)
        root = (await _create(api_env, post.id, headers, "Root")).json()
        parent_id = root["id"]
        for i in range(300):
            reply = await _create(api_env, post.id, headers, f"Level {i}", parent_id)
            assert reply.status_code == 201
            parent_id = reply.json()["id"]

        # Act
        response = await api_env.client.get(f"/threads/{root['id']}")

        # Assert
        assert response.status_code == 200
        view = response.json()
        assert view["total"] == 301
        assert view["comments"][0]["anchor_id"] is None
        assert view["comments"][-1]["id"] == parent_id
        assert view["comments"][-1]["depth"] == 301
        assert all(
            item["anchor_id"] == previous["id"]
            for previous, item in zip(view["comments"], view["comments"][1:])
        )

    @pytest.mark.asyncio
    async def test_pagination_envelope(self, api_env):
        # Arrange
        user = await seed_user(api_env.container)
        headers = await auth_headers(api_env.container, user)
        post = await seed_post(api_env.container)
        for i in range(3):
            await _create(api_env, post.id, headers, f"Comment {i}")

        # Act
        first = await api_env.client.get(
            f"/posts/{post.id}/comments", params={"limit": 2}
        )
        beyond = await api_env.client.get(
            f"/posts/{post.id}/comments", params={"limit": 2, "offset": 10}
        )

        # Assert
        assert len(first.json()["comments"]) == 2
        assert first.json()["pagination"] == {
            "limit": 2,
            "offset": 0,
            "total": 3,
            "has_more": True,
        }
        assert beyond.json()["comments"] == []
        assert beyond.json()["pagination"]["has_more"] is False

    @pytest.mark.asyncio
    async def test_user_comments(self, api_env):
        user = await seed_user(api_env.container)
        headers = await auth_headers(api_env.container, user)
        post = await seed_post(api_env.container)
        await _create(api_env, post.id, headers)

        response = await api_env.client.get(f"/users/{user.id}/comments")

        assert response.status_code == 200
        assert response.json()["pagination"]["total"] == 1

    @pytest.mark.asyncio
    async def test_list_on_missing_post_returns_404(self, api_env):
        response = await api_env.client.get(f"/posts/{uuid4()}/comments")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_malformed_id_returns_422(self, api_env):
        response = await api_env.client.get("/comments/not-a-uuid")

        assert response.status_code == 422
