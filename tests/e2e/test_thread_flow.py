"""End-to-end tests for the forum HTTP API.

The app runs against the test container with in-memory persistence.
"""

import pytest
import pytest_asyncio
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from httpx import ASGITransport, AsyncClient

from forum.config import Settings
from forum.interface.api.app import create_app
from forum.persistence.repository.inmemory import InMemoryDatabase
from forum.util.jwt import create_token
from tests.conftest import seed_user
from tests.di import build_test_container


@pytest_asyncio.fixture
async def container():
    container = build_test_container(None, FastapiProvider())
    database = await container.get(InMemoryDatabase)
    seed_user(database, "user-123", "dicoding")
    seed_user(database, "user-456", "johndoe")
    yield container
    await container.close()


@pytest_asyncio.fixture
async def client(container):
    app = create_app(with_container=False)
    setup_dishka(container, app)
    # Unhandled errors are answered by the 500 handler, then re-raised by Starlette
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as test_client:
        yield test_client


def auth_header(user_id: str, username: str) -> dict[str, str]:
    token = create_token(user_id, username, Settings().auth)
    return {"Authorization": f"Bearer {token}"}


DICODING = auth_header("user-123", "dicoding")
JOHNDOE = auth_header("user-456", "johndoe")


async def post_thread(client) -> str:
    response = await client.post(
        "/threads",
        json={"title": "sebuah thread", "body": "sebuah body"},
        headers=DICODING,
    )
    assert response.status_code == 201
    return response.json()["data"]["addedThread"]["id"]


async def post_comment(client, thread_id: str, headers=DICODING) -> str:
    response = await client.post(
        f"/threads/{thread_id}/comments",
        json={"content": "sebuah comment"},
        headers=headers,
    )
    assert response.status_code == 201
    return response.json()["data"]["addedComment"]["id"]


class TestThreadFlow:
    """End-to-end tests for threads, comments, replies and likes."""

    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    @pytest.mark.asyncio
    async def test_add_thread_returns_added_thread(self, client):
        # Act
        response = await client.post(
            "/threads",
            json={"title": "sebuah thread", "body": "sebuah body"},
            headers=DICODING,
        )

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "success"
        added = body["data"]["addedThread"]
        assert added["id"].startswith("thread-")
        assert added["title"] == "sebuah thread"
        assert added["owner"] == "user-123"

    @pytest.mark.asyncio
    async def test_add_thread_requires_authentication(self, client):
        response = await client.post(
            "/threads", json={"title": "sebuah thread", "body": "sebuah body"}
        )

        assert response.status_code == 401
        assert response.json()["status"] == "fail"

    @pytest.mark.asyncio
    async def test_incomplete_payload_is_bad_request(self, client):
        response = await client.post(
            "/threads", json={"title": "sebuah thread"}, headers=DICODING
        )

        assert response.status_code == 400
        assert response.json() == {
            "status": "fail",
            "message": "NEW_THREAD.MISSING_PROPERTY",
        }

    @pytest.mark.asyncio
    async def test_mistyped_payload_is_bad_request(self, client):
        response = await client.post(
            "/threads", json={"title": 123, "body": "sebuah body"}, headers=DICODING
        )

        assert response.status_code == 400
        assert response.json()["message"] == "NEW_THREAD.TYPE_MISMATCH"

    @pytest.mark.asyncio
    async def test_unknown_thread_is_not_found(self, client):
        response = await client.get("/threads/thread-xxx")

        assert response.status_code == 404
        assert response.json()["status"] == "fail"

    @pytest.mark.asyncio
    async def test_thread_with_unknown_owner_is_server_error(self, client):
        """A thread whose owner has no user record is a storage fault, not a bad request."""
        # Arrange
        response = await client.post(
            "/threads",
            json={"title": "sebuah thread", "body": "sebuah body"},
            headers=auth_header("user-999", "ghost"),
        )
        thread_id = response.json()["data"]["addedThread"]["id"]

        # Act
        response = await client.get(f"/threads/{thread_id}")

        # Assert
        assert response.status_code == 500
        assert response.json() == {
            "status": "error",
            "message": "terjadi kegagalan pada server kami",
        }

    @pytest.mark.asyncio
    async def test_full_discussion_view(self, client):
        """Comments, replies, likes and deletion show up in the thread view."""
        # Arrange
        thread_id = await post_thread(client)
        kept_id = await post_comment(client, thread_id)
        deleted_id = await post_comment(client, thread_id, headers=JOHNDOE)

        reply = await client.post(
            f"/threads/{thread_id}/comments/{kept_id}/replies",
            json={"content": "sebuah balasan"},
            headers=JOHNDOE,
        )
        assert reply.status_code == 201
        reply_id = reply.json()["data"]["addedReply"]["id"]

        for headers in (DICODING, JOHNDOE):
            like = await client.put(
                f"/threads/{thread_id}/comments/{kept_id}/likes", headers=headers
            )
            assert like.status_code == 200

        delete = await client.delete(
            f"/threads/{thread_id}/comments/{deleted_id}", headers=JOHNDOE
        )
        assert delete.status_code == 200

        # Act
        response = await client.get(f"/threads/{thread_id}")

        # Assert
        assert response.status_code == 200
        thread = response.json()["data"]["thread"]
        assert thread["username"] == "dicoding"
        kept, deleted = thread["comments"]
        assert kept["id"] == kept_id
        assert kept["content"] == "sebuah comment"
        assert kept["likeCount"] == 2
        assert [r["id"] for r in kept["replies"]] == [reply_id]
        assert kept["replies"][0]["username"] == "johndoe"
        assert deleted["content"] == "**komentar telah dihapus**"
        assert deleted["replies"] == []
        assert "isDeleted" not in deleted

    @pytest.mark.asyncio
    async def test_toggle_like_twice_restores_count(self, client):
        # Arrange
        thread_id = await post_thread(client)
        comment_id = await post_comment(client, thread_id)
        url = f"/threads/{thread_id}/comments/{comment_id}/likes"

        # Act
        await client.put(url, headers=JOHNDOE)
        await client.put(url, headers=JOHNDOE)

        # Assert
        thread = (await client.get(f"/threads/{thread_id}")).json()["data"]["thread"]
        assert thread["comments"][0]["likeCount"] == 0

    @pytest.mark.asyncio
    async def test_non_owner_cannot_delete_comment(self, client):
        # Arrange
        thread_id = await post_thread(client)
        comment_id = await post_comment(client, thread_id)

        # Act
        response = await client.delete(
            f"/threads/{thread_id}/comments/{comment_id}", headers=JOHNDOE
        )

        # Assert
        assert response.status_code == 403
        thread = (await client.get(f"/threads/{thread_id}")).json()["data"]["thread"]
        assert thread["comments"][0]["content"] == "sebuah comment"

    @pytest.mark.asyncio
    async def test_deleted_reply_is_masked(self, client):
        # Arrange
        thread_id = await post_thread(client)
        comment_id = await post_comment(client, thread_id)
        reply = await client.post(
            f"/threads/{thread_id}/comments/{comment_id}/replies",
            json={"content": "sebuah balasan"},
            headers=JOHNDOE,
        )
        reply_id = reply.json()["data"]["addedReply"]["id"]

        # Act
        response = await client.delete(
            f"/threads/{thread_id}/comments/{comment_id}/replies/{reply_id}",
            headers=JOHNDOE,
        )

        # Assert
        assert response.status_code == 200
        thread = (await client.get(f"/threads/{thread_id}")).json()["data"]["thread"]
        replies = thread["comments"][0]["replies"]
        assert replies[0]["content"] == "**balasan telah dihapus**"
