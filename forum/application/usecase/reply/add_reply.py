"""Add reply use case."""

from collections.abc import Mapping
from typing import Any

import logfire

from forum.application.usecase.base import BaseUseCase
from forum.domain.model import AddedReply, NewReply
from forum.domain.repository import (
    CommentRepository,
    ReplyRepository,
    ThreadRepository,
)
from forum.domain.value import CommentId, ThreadId


class AddReplyUseCase(BaseUseCase[Mapping[str, Any], AddedReply]):
    """Use case for replying to a comment."""

    def __init__(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
    ) -> None:
        """Initialize add reply use case.

        Args:
            thread_repository: Thread repository
            comment_repository: Comment repository
            reply_repository: Reply repository
        """
        self.thread_repository = thread_repository
        self.comment_repository = comment_repository
        self.reply_repository = reply_repository

    async def execute(self, request: Mapping[str, Any]) -> AddedReply:
        """Execute add reply flow.

        Args:
            request: Reply payload with threadId, commentId, content and owner

        Returns:
            The added reply

        Raises:
            ValidationError: If the payload is incomplete or mistyped
            NotFoundError: If the thread, or the comment on that thread,
                does not exist
        """
        new_reply = NewReply.from_payload(request)
        thread_id = ThreadId(new_reply.thread_id)

        with logfire.span(
            "add_reply", comment_id=new_reply.comment_id, owner=new_reply.owner
        ):
            await self.thread_repository.verify_thread_exists(thread_id)
            await self.comment_repository.verify_comment_exists(
                CommentId(new_reply.comment_id), thread_id
            )
            added_reply = await self.reply_repository.add_reply(new_reply)
            logfire.info(
                "Reply added",
                reply_id=added_reply.id,
                comment_id=new_reply.comment_id,
            )
            return added_reply
