"""PostgreSQL repository implementations."""

from forum.persistence.repository.comment import PostgresCommentRepository
from forum.persistence.repository.reply import PostgresReplyRepository
from forum.persistence.repository.thread import PostgresThreadRepository

__all__ = [
    "PostgresThreadRepository",
    "PostgresCommentRepository",
    "PostgresReplyRepository",
]
