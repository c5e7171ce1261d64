"""PostgreSQL persistence component."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from forum.config import DatabaseSettings, Settings
from forum.domain.repository import (
    CommentRepository,
    ReplyRepository,
    ThreadRepository,
)
from forum.domain.value import Clock, IdGenerator
from forum.persistence.repository import (
    PostgresCommentRepository,
    PostgresReplyRepository,
    PostgresThreadRepository,
)
from forum.util.di.base import ProviderBase
from forum.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Swappable storage component; tests use an in-memory mock."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Repositories over one asyncpg pool, one session per request."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_database_settings(self, settings: Settings) -> DatabaseSettings:
        return settings.database

    @provide(scope=Scope.APP)
    async def get_engine(self, database: DatabaseSettings) -> AsyncIterator[AsyncEngine]:
        """Open the pool; it is disposed when the container closes."""
        engine = create_async_engine(
            database.url,
            echo=database.echo,
            pool_pre_ping=True,
            pool_size=database.pool_size,
            max_overflow=database.max_overflow,
        )
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """One transaction per request: commit on success, roll back on error."""
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Rolling back request transaction", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_thread_repository(
        self, session: AsyncSession, id_generator: IdGenerator, clock: Clock
    ) -> ThreadRepository:
        return PostgresThreadRepository(session, id_generator, clock)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(
        self, session: AsyncSession, id_generator: IdGenerator, clock: Clock
    ) -> CommentRepository:
        return PostgresCommentRepository(session, id_generator, clock)

    @provide(scope=Scope.REQUEST)
    def get_reply_repository(
        self, session: AsyncSession, id_generator: IdGenerator, clock: Clock
    ) -> ReplyRepository:
        return PostgresReplyRepository(session, id_generator, clock)
