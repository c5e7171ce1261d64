"""Unit tests for AddCommentUseCase."""

import pytest

from forum.application.usecase.comment import AddCommentUseCase
from forum.application.usecase.thread import AddThreadUseCase
from forum.domain.error import NotFoundError, ValidationError
from forum.persistence.repository.inmemory import InMemoryDatabase
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestAddCommentUseCase:
    """Tests for AddCommentUseCase."""

    @pytest.mark.asyncio
    async def test_add_comment_matches_persisted_record(self, unit_env):
        """The returned comment mirrors what was stored."""
        # Arrange
        add_thread = await unit_env.get(AddThreadUseCase)
        use_case = await unit_env.get(AddCommentUseCase)
        database = await unit_env.get(InMemoryDatabase)
        thread = await add_thread.execute(
            {"title": "sebuah thread", "body": "sebuah body", "owner": "user-123"}
        )

        # Act
        added = await use_case.execute(
            {"threadId": thread.id, "content": "sebuah comment", "owner": "user-456"}
        )

        # Assert
        assert added.id.startswith("comment-")
        stored = database.comments[added.id]
        assert stored.content == added.content == "sebuah comment"
        assert stored.owner == added.owner == "user-456"
        assert stored.thread_id == thread.id
        assert stored.is_deleted is False
        assert stored.like_count == 0

    @pytest.mark.asyncio
    async def test_missing_thread_raises_not_found(self, unit_env):
        # Arrange
        use_case = await unit_env.get(AddCommentUseCase)
        database = await unit_env.get(InMemoryDatabase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                {
                    "threadId": "thread-xxx",
                    "content": "sebuah comment",
                    "owner": "user-456",
                }
            )
        assert database.comments == {}

    @pytest.mark.asyncio
    async def test_validation_precedes_thread_lookup(self, unit_env):
        """An invalid payload fails validation even if the thread is absent."""
        use_case = await unit_env.get(AddCommentUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute({"threadId": "thread-xxx", "owner": "user-456"})
