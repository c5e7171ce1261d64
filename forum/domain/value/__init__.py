"""Domain value objects for the forum."""

from forum.domain.value.identifiers import (
    CommentId,
    EntityKind,
    IdGenerator,
    ReplyId,
    ThreadId,
    UserId,
    make_id,
)
from forum.domain.value.types import (
    DELETED_COMMENT_PLACEHOLDER,
    DELETED_REPLY_PLACEHOLDER,
    Clock,
)

__all__ = [
    # Identifiers
    "UserId",
    "ThreadId",
    "CommentId",
    "ReplyId",
    "EntityKind",
    "IdGenerator",
    "make_id",
    # Types
    "Clock",
    "DELETED_COMMENT_PLACEHOLDER",
    "DELETED_REPLY_PLACEHOLDER",
]
