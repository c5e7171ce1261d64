"""Delete reply use case."""

from collections.abc import Mapping
from typing import Any, ClassVar

import logfire
from pydantic import StrictStr

from forum.application.usecase.base import BaseUseCase
from forum.domain.model.common import Entity
from forum.domain.repository import (
    CommentRepository,
    ReplyRepository,
    ThreadRepository,
)
from forum.domain.value import CommentId, ReplyId, ThreadId, UserId


class DeleteReplyRequest(Entity):
    """Delete reply request."""

    entity_code: ClassVar[str] = "DELETE_REPLY"

    thread_id: StrictStr
    comment_id: StrictStr
    reply_id: StrictStr
    owner: StrictStr  # User ID from authenticated user


class DeleteReplyUseCase(BaseUseCase[Mapping[str, Any], None]):
    """Use case for soft-deleting one's own reply."""

    def __init__(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
    ) -> None:
        """Initialize delete reply use case.

        Args:
            thread_repository: Thread repository
            comment_repository: Comment repository
            reply_repository: Reply repository
        """
        self.thread_repository = thread_repository
        self.comment_repository = comment_repository
        self.reply_repository = reply_repository

    async def execute(self, request: Mapping[str, Any]) -> None:
        """Execute delete reply flow.

        Args:
            request: Payload with threadId, commentId, replyId and owner

        Raises:
            ValidationError: If the payload is incomplete or mistyped
            NotFoundError: If the thread, comment or reply does not exist
            AuthorizationError: If the caller does not own the reply
        """
        req = DeleteReplyRequest.from_payload(request)
        thread_id = ThreadId(req.thread_id)
        comment_id = CommentId(req.comment_id)
        reply_id = ReplyId(req.reply_id)

        with logfire.span("delete_reply", reply_id=reply_id, owner=req.owner):
            await self.thread_repository.verify_thread_exists(thread_id)
            await self.comment_repository.verify_comment_exists(comment_id, thread_id)
            await self.reply_repository.verify_reply_exists(reply_id, comment_id)
            await self.reply_repository.verify_reply_owner(reply_id, UserId(req.owner))
            await self.reply_repository.delete_reply_by_id(reply_id)
            logfire.info("Reply deleted", reply_id=reply_id)
