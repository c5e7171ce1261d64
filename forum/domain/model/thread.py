"""Thread entities.

A thread is the top-level discussion topic. Threads are immutable once
created; the core has no edit or delete operation for them.
"""

from datetime import datetime
from typing import ClassVar

from pydantic import Field, StrictStr

from forum.domain.model.comment import CommentDetail
from forum.domain.model.common import DomainModel, Entity
from forum.domain.value import ThreadId, UserId


class NewThread(Entity):
    """Payload for creating a thread."""

    entity_code: ClassVar[str] = "NEW_THREAD"

    title: StrictStr
    body: StrictStr
    owner: StrictStr


class AddedThread(Entity):
    """Thread as returned right after creation."""

    entity_code: ClassVar[str] = "ADDED_THREAD"

    id: StrictStr
    title: StrictStr
    owner: StrictStr


class Thread(DomainModel):
    """Stored thread record."""

    id: ThreadId
    title: str = Field(min_length=1)
    body: str = Field(min_length=1)
    owner: UserId
    created_at: datetime


class ThreadRow(DomainModel):
    """Thread as read for display, joined with the owner's username."""

    id: ThreadId
    title: str
    body: str
    date: datetime
    username: str | None = None


class ThreadDetail(Entity):
    """Nested read model of a thread with its comments and their replies.

    Every comment is validated as a CommentDetail, so each one must carry
    id, username, date and content.
    """

    entity_code: ClassVar[str] = "THREAD_DETAIL"

    id: StrictStr
    title: StrictStr
    body: StrictStr
    date: datetime
    username: StrictStr
    comments: list[CommentDetail]
