"""Unit tests for AddReplyUseCase."""

import pytest

from forum.application.usecase.comment import AddCommentUseCase
from forum.application.usecase.reply import AddReplyUseCase
from forum.application.usecase.thread import AddThreadUseCase
from forum.domain.error import NotFoundError
from forum.persistence.repository.inmemory import InMemoryDatabase
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def given_comment(unit_env) -> tuple[str, str]:
    add_thread = await unit_env.get(AddThreadUseCase)
    add_comment = await unit_env.get(AddCommentUseCase)
    thread = await add_thread.execute(
        {"title": "sebuah thread", "body": "sebuah body", "owner": "user-123"}
    )
    comment = await add_comment.execute(
        {"threadId": thread.id, "content": "sebuah comment", "owner": "user-123"}
    )
    return thread.id, comment.id


class TestAddReplyUseCase:
    """Tests for AddReplyUseCase."""

    @pytest.mark.asyncio
    async def test_add_reply(self, unit_env):
        # Arrange
        thread_id, comment_id = await given_comment(unit_env)
        use_case = await unit_env.get(AddReplyUseCase)
        database = await unit_env.get(InMemoryDatabase)

        # Act
        added = await use_case.execute(
            {
                "threadId": thread_id,
                "commentId": comment_id,
                "content": "sebuah balasan",
                "owner": "user-456",
            }
        )

        # Assert
        assert added.id.startswith("reply-")
        assert added.content == "sebuah balasan"
        assert added.owner == "user-456"
        assert database.replies[added.id].comment_id == comment_id

    @pytest.mark.asyncio
    async def test_missing_thread_raises_not_found(self, unit_env):
        # Arrange
        _, comment_id = await given_comment(unit_env)
        use_case = await unit_env.get(AddReplyUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError) as exc_info:
            await use_case.execute(
                {
                    "threadId": "thread-xxx",
                    "commentId": comment_id,
                    "content": "sebuah balasan",
                    "owner": "user-456",
                }
            )
        assert exc_info.value.resource == "Thread"

    @pytest.mark.asyncio
    async def test_comment_must_belong_to_thread(self, unit_env):
        # Arrange
        _, comment_id = await given_comment(unit_env)
        other_thread_id, _ = await given_comment(unit_env)
        use_case = await unit_env.get(AddReplyUseCase)
        database = await unit_env.get(InMemoryDatabase)

        # Act & Assert
        with pytest.raises(NotFoundError) as exc_info:
            await use_case.execute(
                {
                    "threadId": other_thread_id,
                    "commentId": comment_id,
                    "content": "sebuah balasan",
                    "owner": "user-456",
                }
            )
        assert exc_info.value.resource == "Comment"
        assert database.replies == {}
