"""Reply entities.

Replies are second-level answers attached to a comment.
"""

from datetime import datetime
from typing import Any, ClassVar

from pydantic import Field, StrictBool, StrictStr

from forum.domain.model.common import DomainModel, Entity
from forum.domain.value import DELETED_REPLY_PLACEHOLDER, CommentId, ReplyId, UserId


class NewReply(Entity):
    """Payload for replying to a comment of a thread."""

    entity_code: ClassVar[str] = "NEW_REPLY"

    thread_id: StrictStr
    comment_id: StrictStr
    content: StrictStr
    owner: StrictStr


class AddedReply(Entity):
    """Reply as returned right after creation."""

    entity_code: ClassVar[str] = "ADDED_REPLY"

    id: StrictStr
    content: StrictStr
    owner: StrictStr


class Reply(DomainModel):
    """Stored reply record."""

    id: ReplyId
    comment_id: CommentId
    content: str
    owner: UserId
    created_at: datetime
    is_deleted: bool = False


class ReplyRow(DomainModel):
    """Reply as read for display, keyed by its comment."""

    id: ReplyId
    comment_id: CommentId
    content: str
    date: datetime
    is_deleted: bool = False
    username: str | None = None


class ReplyDetail(Entity):
    """Reply as shown to readers, masked when deleted."""

    entity_code: ClassVar[str] = "REPLY_DETAIL"

    id: StrictStr
    content: StrictStr
    date: datetime
    username: StrictStr
    is_deleted: StrictBool = Field(exclude=True)

    @classmethod
    def prepare_payload(cls, data: dict[str, Any]) -> dict[str, Any]:
        if data.get("isDeleted", data.get("is_deleted")) is True:
            data["content"] = DELETED_REPLY_PLACEHOLDER
        return data
