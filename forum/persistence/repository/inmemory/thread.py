"""In-memory thread repository for testing."""

from forum.domain.error import NotFoundError
from forum.domain.model import AddedThread, NewThread, Thread, ThreadRow
from forum.domain.repository import ThreadRepository
from forum.domain.value import (
    Clock,
    EntityKind,
    IdGenerator,
    ThreadId,
    UserId,
    make_id,
)
from forum.persistence.repository.inmemory.database import InMemoryDatabase


class InMemoryThreadRepository(ThreadRepository):
    """In-memory implementation of ThreadRepository for testing."""

    def __init__(
        self, database: InMemoryDatabase, id_generator: IdGenerator, clock: Clock
    ) -> None:
        self.database = database
        self.id_generator = id_generator
        self.clock = clock

    async def add_thread(self, new_thread: NewThread) -> AddedThread:
        """Store a new thread."""
        thread = Thread(
            id=ThreadId(make_id(EntityKind.THREAD, self.id_generator)),
            title=new_thread.title,
            body=new_thread.body,
            owner=UserId(new_thread.owner),
            created_at=self.clock(),
        )
        self.database.threads[thread.id] = thread
        return AddedThread(id=thread.id, title=thread.title, owner=thread.owner)

    async def get_thread_by_id(self, thread_id: ThreadId) -> ThreadRow:
        """Get a thread with its owner's username."""
        thread = self.database.threads.get(thread_id)
        if thread is None:
            raise NotFoundError("Thread", thread_id)
        return ThreadRow(
            id=thread.id,
            title=thread.title,
            body=thread.body,
            date=thread.created_at,
            username=self.database.username_of(thread.owner),
        )

    async def verify_thread_exists(self, thread_id: ThreadId) -> None:
        """Raise NotFoundError unless the thread exists."""
        if thread_id not in self.database.threads:
            raise NotFoundError("Thread", thread_id)
