"""Add thread use case."""

from collections.abc import Mapping
from typing import Any

import logfire

from forum.application.usecase.base import BaseUseCase
from forum.domain.model import AddedThread, NewThread
from forum.domain.repository import ThreadRepository


class AddThreadUseCase(BaseUseCase[Mapping[str, Any], AddedThread]):
    """Use case for starting a new discussion thread."""

    def __init__(self, thread_repository: ThreadRepository) -> None:
        """Initialize add thread use case.

        Args:
            thread_repository: Thread repository
        """
        self.thread_repository = thread_repository

    async def execute(self, request: Mapping[str, Any]) -> AddedThread:
        """Execute add thread flow.

        Args:
            request: Thread payload with title, body and owner

        Returns:
            The added thread

        Raises:
            ValidationError: If the payload is incomplete or mistyped
        """
        new_thread = NewThread.from_payload(request)

        with logfire.span("add_thread", owner=new_thread.owner):
            added_thread = await self.thread_repository.add_thread(new_thread)
            logfire.info(
                "Thread added", thread_id=added_thread.id, owner=added_thread.owner
            )
            return added_thread
