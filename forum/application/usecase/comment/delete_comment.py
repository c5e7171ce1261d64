"""Delete comment use case."""

from collections.abc import Mapping
from typing import Any, ClassVar

import logfire
from pydantic import StrictStr

from forum.application.usecase.base import BaseUseCase
from forum.domain.model.common import Entity
from forum.domain.repository import CommentRepository, ThreadRepository
from forum.domain.value import CommentId, ThreadId, UserId


class DeleteCommentRequest(Entity):
    """Delete comment request."""

    entity_code: ClassVar[str] = "DELETE_COMMENT"

    thread_id: StrictStr
    comment_id: StrictStr
    owner: StrictStr  # User ID from authenticated user


class DeleteCommentUseCase(BaseUseCase[Mapping[str, Any], None]):
    """Use case for soft-deleting one's own comment."""

    def __init__(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize delete comment use case.

        Args:
            thread_repository: Thread repository
            comment_repository: Comment repository
        """
        self.thread_repository = thread_repository
        self.comment_repository = comment_repository

    async def execute(self, request: Mapping[str, Any]) -> None:
        """Execute delete comment flow.

        Existence is checked before ownership, so a caller never learns who
        owns a comment that does not exist.

        Args:
            request: Payload with threadId, commentId and owner

        Raises:
            ValidationError: If the payload is incomplete or mistyped
            NotFoundError: If the thread or comment does not exist
            AuthorizationError: If the caller does not own the comment
        """
        req = DeleteCommentRequest.from_payload(request)
        thread_id = ThreadId(req.thread_id)
        comment_id = CommentId(req.comment_id)

        with logfire.span("delete_comment", comment_id=comment_id, owner=req.owner):
            await self.thread_repository.verify_thread_exists(thread_id)
            await self.comment_repository.verify_comment_exists(comment_id, thread_id)
            await self.comment_repository.verify_comment_owner(
                comment_id, UserId(req.owner)
            )
            await self.comment_repository.delete_comment_by_id(comment_id)
            logfire.info("Comment deleted", comment_id=comment_id)
