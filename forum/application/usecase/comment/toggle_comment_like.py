"""Toggle comment like use case."""

from collections.abc import Mapping
from typing import Any, ClassVar

import logfire
from pydantic import BaseModel, StrictStr

from forum.application.usecase.base import BaseUseCase
from forum.domain.model import AddCommentLike
from forum.domain.model.common import Entity
from forum.domain.repository import CommentRepository
from forum.domain.value import CommentId, ThreadId, UserId


class ToggleCommentLikeRequest(Entity):
    """Toggle comment like request."""

    entity_code: ClassVar[str] = "TOGGLE_COMMENT_LIKE"

    thread_id: StrictStr
    comment_id: StrictStr
    user_id: StrictStr  # User ID from authenticated user


class ToggleCommentLikeResponse(BaseModel):
    """Like state of the comment for the caller after the toggle."""

    comment_id: str
    liked: bool


class ToggleCommentLikeUseCase(
    BaseUseCase[Mapping[str, Any], ToggleCommentLikeResponse]
):
    """Use case for liking or unliking a comment.

    Any authenticated user may like any comment, their own included.
    """

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize toggle comment like use case.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def execute(self, request: Mapping[str, Any]) -> ToggleCommentLikeResponse:
        """Execute toggle comment like flow.

        The current like state is read once, right before the single write.
        Two concurrent toggles by the same user may both observe the same
        state; the repository's add and remove are conflict-guarded, so the
        losing write is a no-op and the like counter stays consistent.

        Args:
            request: Payload with threadId, commentId and userId

        Returns:
            Whether the caller likes the comment after the toggle

        Raises:
            ValidationError: If the payload is incomplete or mistyped
            NotFoundError: If the comment does not exist on the thread
        """
        req = ToggleCommentLikeRequest.from_payload(request)
        like = AddCommentLike.from_payload(
            {"comment_id": req.comment_id, "user_id": req.user_id}
        )
        comment_id = CommentId(like.comment_id)
        user_id = UserId(like.user_id)

        with logfire.span(
            "toggle_comment_like", comment_id=comment_id, user_id=user_id
        ):
            await self.comment_repository.verify_comment_exists(
                comment_id, ThreadId(req.thread_id)
            )

            has_liked = (
                await self.comment_repository.get_comment_like_by_comment_id_and_user_id(
                    comment_id, user_id
                )
            )

            if has_liked:
                changed = await self.comment_repository.remove_comment_like(
                    comment_id, user_id
                )
                liked = False
            else:
                changed = await self.comment_repository.add_comment_like(
                    comment_id, user_id
                )
                liked = True

            if changed:
                logfire.info(
                    "Comment like toggled",
                    comment_id=comment_id,
                    user_id=user_id,
                    liked=liked,
                )
            else:
                logfire.warn(
                    "Comment like toggle was a no-op, concurrent toggle won",
                    comment_id=comment_id,
                    user_id=user_id,
                    liked=liked,
                )

            return ToggleCommentLikeResponse(comment_id=comment_id, liked=liked)
