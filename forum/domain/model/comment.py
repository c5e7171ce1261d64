"""Comment entities.

Comments are first-level replies to a thread. They are soft-deleted and
carry a denormalized like counter kept equal to the number of like rows.
"""

from datetime import datetime
from typing import Any, ClassVar

from pydantic import Field, StrictBool, StrictInt, StrictStr

from forum.domain.model.common import DomainModel, Entity
from forum.domain.model.reply import ReplyDetail
from forum.domain.value import (
    DELETED_COMMENT_PLACEHOLDER,
    CommentId,
    ThreadId,
    UserId,
)


class NewComment(Entity):
    """Payload for creating a comment on a thread."""

    entity_code: ClassVar[str] = "NEW_COMMENT"

    thread_id: StrictStr
    content: StrictStr
    owner: StrictStr


class AddedComment(Entity):
    """Comment as returned right after creation."""

    entity_code: ClassVar[str] = "ADDED_COMMENT"

    id: StrictStr
    content: StrictStr
    owner: StrictStr


class Comment(DomainModel):
    """Stored comment record."""

    id: CommentId
    thread_id: ThreadId
    content: str
    owner: UserId
    created_at: datetime
    is_deleted: bool = False
    like_count: int = Field(default=0, ge=0)


class CommentRow(DomainModel):
    """Comment as read for display, joined with the owner's username."""

    id: CommentId
    username: str | None = None
    date: datetime
    content: str
    is_deleted: bool = False
    like_count: int = Field(default=0, ge=0)


class CommentDetail(Entity):
    """Comment as shown to readers.

    The content of a deleted comment is replaced by a placeholder when the
    detail is built. The deletion flag itself is never serialized.
    """

    entity_code: ClassVar[str] = "COMMENT_DETAIL"

    id: StrictStr
    username: StrictStr
    date: datetime
    content: StrictStr
    like_count: StrictInt = Field(default=0, ge=0)
    replies: list[ReplyDetail] = Field(default_factory=list)
    is_deleted: StrictBool = Field(exclude=True)

    @classmethod
    def prepare_payload(cls, data: dict[str, Any]) -> dict[str, Any]:
        if data.get("isDeleted", data.get("is_deleted")) is True:
            data["content"] = DELETED_COMMENT_PLACEHOLDER
        return data


class AddCommentLike(Entity):
    """Payload for liking a comment."""

    entity_code: ClassVar[str] = "ADD_COMMENT_LIKE"

    comment_id: StrictStr
    user_id: StrictStr


class CommentLike(Entity):
    """A user's like on a comment.

    At most one like exists per (comment, user) pair; the surrogate id and
    timestamp are kept for audit.
    """

    entity_code: ClassVar[str] = "COMMENT_LIKE"

    id: StrictStr
    comment_id: StrictStr
    user_id: StrictStr
    created_at: datetime | None = None

    @property
    def key(self) -> tuple[CommentId, UserId]:
        return CommentId(self.comment_id), UserId(self.user_id)
