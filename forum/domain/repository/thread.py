"""Thread repository interface."""

from abc import ABC, abstractmethod

from forum.domain.model.thread import AddedThread, NewThread, ThreadRow
from forum.domain.value import ThreadId


class ThreadRepository(ABC):
    """Repository for Thread entity.

    Defines the contract for thread persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def add_thread(self, new_thread: NewThread) -> AddedThread:
        """Persist a new thread.

        Args:
            new_thread: Validated thread payload

        Returns:
            The added thread with its generated id
        """
        pass

    @abstractmethod
    async def get_thread_by_id(self, thread_id: ThreadId) -> ThreadRow:
        """Get a thread for display.

        Args:
            thread_id: The thread's unique identifier

        Returns:
            The thread joined with its owner's username

        Raises:
            NotFoundError: If no thread has this id
        """
        pass

    @abstractmethod
    async def verify_thread_exists(self, thread_id: ThreadId) -> None:
        """Check that a thread exists.

        Args:
            thread_id: The thread's unique identifier

        Raises:
            NotFoundError: If no thread has this id
        """
        pass
