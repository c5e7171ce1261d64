"""PostgreSQL implementation of Thread repository."""

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

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
from forum.persistence.mappers import row_to_thread_row, thread_to_dict
from forum.persistence.tables import threads_table, users_table


class PostgresThreadRepository(ThreadRepository):
    """PostgreSQL implementation of ThreadRepository."""

    def __init__(
        self, session: AsyncSession, id_generator: IdGenerator, clock: Clock
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            id_generator: Source of unique id suffixes
            clock: Current-time source for creation timestamps
        """
        self.session = session
        self.id_generator = id_generator
        self.clock = clock

    async def add_thread(self, new_thread: NewThread) -> AddedThread:
        """Persist a new thread."""
        thread = Thread(
            id=ThreadId(make_id(EntityKind.THREAD, self.id_generator)),
            title=new_thread.title,
            body=new_thread.body,
            owner=UserId(new_thread.owner),
            created_at=self.clock(),
        )
        stmt = (
            insert(threads_table)
            .values(**thread_to_dict(thread))
            .returning(threads_table.c.id, threads_table.c.title, threads_table.c.owner)
        )
        result = await self.session.execute(stmt)
        row = result.one()
        await self.session.flush()
        return AddedThread.from_payload(row._asdict())

    async def get_thread_by_id(self, thread_id: ThreadId) -> ThreadRow:
        """Get a thread joined with its owner's username."""
        stmt = (
            select(
                threads_table.c.id,
                threads_table.c.title,
                threads_table.c.body,
                threads_table.c.created_at.label("date"),
                users_table.c.username,
            )
            .select_from(
                threads_table.outerjoin(
                    users_table, users_table.c.id == threads_table.c.owner
                )
            )
            .where(threads_table.c.id == thread_id)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            raise NotFoundError("Thread", thread_id)
        return row_to_thread_row(row._asdict())

    async def verify_thread_exists(self, thread_id: ThreadId) -> None:
        """Raise NotFoundError unless the thread exists."""
        stmt = select(threads_table.c.id).where(threads_table.c.id == thread_id)
        result = await self.session.execute(stmt)
        if result.first() is None:
            raise NotFoundError("Thread", thread_id)
