"""Add comment use case."""

from collections.abc import Mapping
from typing import Any

import logfire

from forum.application.usecase.base import BaseUseCase
from forum.domain.model import AddedComment, NewComment
from forum.domain.repository import CommentRepository, ThreadRepository
from forum.domain.value import ThreadId


class AddCommentUseCase(BaseUseCase[Mapping[str, Any], AddedComment]):
    """Use case for commenting on a thread."""

    def __init__(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize add comment use case.

        Args:
            thread_repository: Thread repository
            comment_repository: Comment repository
        """
        self.thread_repository = thread_repository
        self.comment_repository = comment_repository

    async def execute(self, request: Mapping[str, Any]) -> AddedComment:
        """Execute add comment flow.

        Args:
            request: Comment payload with threadId, content and owner

        Returns:
            The added comment

        Raises:
            ValidationError: If the payload is incomplete or mistyped
            NotFoundError: If the thread does not exist
        """
        new_comment = NewComment.from_payload(request)

        with logfire.span(
            "add_comment", thread_id=new_comment.thread_id, owner=new_comment.owner
        ):
            await self.thread_repository.verify_thread_exists(
                ThreadId(new_comment.thread_id)
            )
            added_comment = await self.comment_repository.add_comment(new_comment)
            logfire.info(
                "Comment added",
                comment_id=added_comment.id,
                thread_id=new_comment.thread_id,
            )
            return added_comment
