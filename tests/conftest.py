"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from itertools import count

import logfire

from forum.domain.model import User
from forum.domain.value import UserId
from forum.persistence.repository.inmemory import InMemoryDatabase

# Keep spans local; tests never ship telemetry
logfire.configure(send_to_logfire=False, console=False)


class SequenceIds:
    """Id generator yielding "1", "2", ... or a fixed suffix."""

    def __init__(self, fixed: str | None = None) -> None:
        self.fixed = fixed
        self._counter = count(1)

    def __call__(self) -> str:
        return self.fixed or str(next(self._counter))


class TickingClock:
    """Clock advancing one second per call, so creation order is strict."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2021, 8, 8, 7, 19, 9, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        current = self.now
        self.now += timedelta(seconds=1)
        return current


def seed_user(database: InMemoryDatabase, user_id: str, username: str) -> User:
    """Register a user in the in-memory store."""
    return database.add_user(User(id=UserId(user_id), username=username))
