"""Get thread use case.

Assembles the nested read model of a thread from three flat reads:
the thread row, its comment rows and the reply rows of those comments.
"""

from collections import defaultdict
from collections.abc import Sequence

import logfire

from forum.application.usecase.base import BaseUseCase
from forum.domain.error import InconsistentDataError, ValidationError
from forum.domain.model import (
    CommentDetail,
    CommentRow,
    ReplyDetail,
    ReplyRow,
    ThreadDetail,
    ThreadRow,
)
from forum.domain.repository import (
    CommentRepository,
    ReplyRepository,
    ThreadRepository,
)
from forum.domain.value import CommentId, ThreadId


class GetThreadUseCase(BaseUseCase[ThreadId, ThreadDetail]):
    """Use case for reading a thread with its comments and replies."""

    def __init__(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
    ) -> None:
        """Initialize get thread use case.

        Args:
            thread_repository: Thread repository
            comment_repository: Comment repository
            reply_repository: Reply repository
        """
        self.thread_repository = thread_repository
        self.comment_repository = comment_repository
        self.reply_repository = reply_repository

    async def execute(self, request: ThreadId) -> ThreadDetail:
        """Execute get thread flow.

        Steps:
        1. Fetch the thread (fails if absent)
        2. Fetch its comments, oldest first
        3. Fetch the replies of all comments in one batch
        4. Group replies by comment, keeping their order
        5. Build comment details with masking, like counts and replies

        No data is modified.

        Args:
            request: Thread ID

        Returns:
            Thread detail with nested comments and replies

        Raises:
            NotFoundError: If the thread does not exist
            InconsistentDataError: If stored rows cannot form a thread detail,
                e.g. an owner without a user record
        """
        with logfire.span("get_thread", thread_id=request):
            thread = await self.thread_repository.get_thread_by_id(request)
            comments = await self.comment_repository.get_comments_by_thread_id(
                request
            )

            comment_ids = [comment.id for comment in comments]
            replies: Sequence[ReplyRow] = []
            if comment_ids:
                replies = await self.reply_repository.get_replies_by_comment_ids(
                    comment_ids
                )

            try:
                thread_detail = build_thread_detail(thread, comments, replies)
            except ValidationError as e:
                # Inputs are stored rows, never caller payload
                raise InconsistentDataError("Thread", request, str(e)) from e
            logfire.info(
                "Thread assembled",
                thread_id=request,
                comment_count=len(comments),
                reply_count=len(replies),
            )
            return thread_detail


def build_thread_detail(
    thread: ThreadRow,
    comments: Sequence[CommentRow],
    replies: Sequence[ReplyRow],
) -> ThreadDetail:
    """Assemble a thread detail from flat rows.

    Replies whose comment is not among ``comments`` are ignored.

    Args:
        thread: Thread row
        comments: Comment rows in display order
        replies: Reply rows in display order

    Returns:
        The nested thread detail
    """
    replies_by_comment: dict[CommentId, list[ReplyDetail]] = defaultdict(list)
    for reply in replies:
        replies_by_comment[reply.comment_id].append(
            ReplyDetail.from_payload(
                {
                    "id": reply.id,
                    "content": reply.content,
                    "date": reply.date,
                    "username": reply.username,
                    "is_deleted": reply.is_deleted,
                }
            )
        )

    comment_details = [
        CommentDetail.from_payload(
            {
                "id": comment.id,
                "username": comment.username,
                "date": comment.date,
                "content": comment.content,
                "like_count": comment.like_count,
                "replies": replies_by_comment.get(comment.id, []),
                "is_deleted": comment.is_deleted,
            }
        )
        for comment in comments
    ]

    return ThreadDetail.from_payload(
        {
            "id": thread.id,
            "title": thread.title,
            "body": thread.body,
            "date": thread.date,
            "username": thread.username,
            "comments": comment_details,
        }
    )
