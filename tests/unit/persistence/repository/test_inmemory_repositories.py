"""Unit tests for the in-memory repositories."""

from datetime import datetime, timezone

import pytest

from forum.domain.error import AuthorizationError, NotFoundError
from forum.domain.model import NewComment, NewReply, NewThread
from forum.domain.value import CommentId, UserId
from forum.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryDatabase,
    InMemoryReplyRepository,
    InMemoryThreadRepository,
)
from tests.conftest import SequenceIds, TickingClock, seed_user


@pytest.fixture
def database():
    database = InMemoryDatabase()
    seed_user(database, "user-123", "dicoding")
    seed_user(database, "user-456", "johndoe")
    return database


@pytest.fixture
def repositories(database):
    ids, clock = SequenceIds(), TickingClock()
    return (
        InMemoryThreadRepository(database, ids, clock),
        InMemoryCommentRepository(database, ids, clock),
        InMemoryReplyRepository(database, ids, clock),
    )


async def add_thread_and_comment(repositories):
    threads, comments, _ = repositories
    thread = await threads.add_thread(
        NewThread(title="sebuah thread", body="sebuah body", owner="user-123")
    )
    comment = await comments.add_comment(
        NewComment(thread_id=thread.id, content="sebuah comment", owner="user-456")
    )
    return thread, comment


class TestInMemoryThreadRepository:
    """Tests for InMemoryThreadRepository."""

    @pytest.mark.asyncio
    async def test_get_thread_joins_username(self, repositories):
        threads, _, _ = repositories
        added = await threads.add_thread(
            NewThread(title="sebuah thread", body="sebuah body", owner="user-123")
        )

        row = await threads.get_thread_by_id(added.id)

        assert row.username == "dicoding"
        assert row.date == datetime(2021, 8, 8, 7, 19, 9, tzinfo=timezone.utc)

    @pytest.mark.asyncio
    async def test_verify_missing_thread(self, repositories):
        threads, _, _ = repositories

        with pytest.raises(NotFoundError):
            await threads.verify_thread_exists("thread-xxx")
        with pytest.raises(NotFoundError):
            await threads.get_thread_by_id("thread-xxx")


class TestInMemoryCommentRepository:
    """Tests for InMemoryCommentRepository."""

    @pytest.mark.asyncio
    async def test_comments_are_ordered_by_creation(self, repositories):
        threads, comments, _ = repositories
        thread, first = await add_thread_and_comment(repositories)
        second = await comments.add_comment(
            NewComment(thread_id=thread.id, content="lagi", owner="user-123")
        )

        rows = await comments.get_comments_by_thread_id(thread.id)

        assert [r.id for r in rows] == [first.id, second.id]
        assert [r.username for r in rows] == ["johndoe", "dicoding"]

    @pytest.mark.asyncio
    async def test_verify_owner(self, repositories):
        _, comments, _ = repositories
        _, comment = await add_thread_and_comment(repositories)

        await comments.verify_comment_owner(comment.id, UserId("user-456"))
        with pytest.raises(AuthorizationError):
            await comments.verify_comment_owner(comment.id, UserId("user-123"))
        with pytest.raises(NotFoundError):
            await comments.verify_comment_owner(CommentId("comment-xxx"), "user-123")

    @pytest.mark.asyncio
    async def test_add_like_is_idempotent(self, repositories, database):
        """A duplicate like is reported and never double counts."""
        _, comments, _ = repositories
        _, comment = await add_thread_and_comment(repositories)

        assert await comments.add_comment_like(comment.id, "user-123") is True
        assert await comments.add_comment_like(comment.id, "user-123") is False

        assert await comments.get_comment_like_count(comment.id) == 1
        like = database.likes[(comment.id, "user-123")]
        assert like.id.startswith("like-")

    @pytest.mark.asyncio
    async def test_remove_like_is_idempotent(self, repositories):
        _, comments, _ = repositories
        _, comment = await add_thread_and_comment(repositories)
        await comments.add_comment_like(comment.id, "user-123")

        assert await comments.remove_comment_like(comment.id, "user-123") is True
        assert await comments.remove_comment_like(comment.id, "user-123") is False

        assert await comments.get_comment_like_count(comment.id) == 0

    @pytest.mark.asyncio
    async def test_like_on_missing_comment_is_a_no_op(self, repositories, database):
        _, comments, _ = repositories

        assert await comments.add_comment_like("comment-xxx", "user-123") is False
        assert database.likes == {}


class TestInMemoryReplyRepository:
    """Tests for InMemoryReplyRepository."""

    @pytest.mark.asyncio
    async def test_empty_input_returns_empty(self, repositories):
        _, _, replies = repositories

        assert await replies.get_replies_by_comment_ids([]) == []

    @pytest.mark.asyncio
    async def test_batch_lookup_filters_by_comment(self, repositories):
        _, comments, replies = repositories
        thread, comment = await add_thread_and_comment(repositories)
        other = await comments.add_comment(
            NewComment(thread_id=thread.id, content="lain", owner="user-123")
        )
        first = await replies.add_reply(
            NewReply(
                thread_id=thread.id,
                comment_id=comment.id,
                content="r1",
                owner="user-123",
            )
        )
        await replies.add_reply(
            NewReply(
                thread_id=thread.id, comment_id=other.id, content="r2", owner="user-456"
            )
        )

        rows = await replies.get_replies_by_comment_ids([comment.id])

        assert [r.id for r in rows] == [first.id]
        assert rows[0].username == "dicoding"
        assert rows[0].comment_id == comment.id
