"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .database import InMemoryDatabase
from .reply import InMemoryReplyRepository
from .thread import InMemoryThreadRepository

__all__ = [
    "InMemoryDatabase",
    "InMemoryThreadRepository",
    "InMemoryCommentRepository",
    "InMemoryReplyRepository",
]
