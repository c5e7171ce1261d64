"""Reply routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Header, status

from forum.application.usecase.reply import AddReplyUseCase, DeleteReplyUseCase
from forum.domain.service import JWTService
from forum.interface.api.auth import authenticate

router = APIRouter(
    prefix="/threads/{thread_id}/comments/{comment_id}/replies",
    tags=["replies"],
    route_class=DishkaRoute,
)


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_reply(
    thread_id: str,
    comment_id: str,
    add_reply_use_case: FromDishka[AddReplyUseCase],
    jwt_service: FromDishka[JWTService],
    payload: dict[str, Any] = Body(),
    authorization: str | None = Header(default=None),
) -> dict[str, Any]:
    """Reply to a comment.

    Args:
        thread_id: Thread ID
        comment_id: Comment ID
        add_reply_use_case: Add reply use case from DI
        jwt_service: JWT service for token verification (injected)
        payload: Body with content
        authorization: Bearer token header

    Returns:
        The added reply in the success envelope
    """
    user = authenticate(jwt_service, authorization)
    added = await add_reply_use_case.execute(
        {
            **payload,
            "threadId": thread_id,
            "commentId": comment_id,
            "owner": user.user_id,
        }
    )
    return {"status": "success", "data": {"addedReply": added.to_payload()}}


@router.delete("/{reply_id}")
async def delete_reply(
    thread_id: str,
    comment_id: str,
    reply_id: str,
    delete_reply_use_case: FromDishka[DeleteReplyUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> dict[str, Any]:
    """Soft-delete one of the caller's replies."""
    user = authenticate(jwt_service, authorization)
    await delete_reply_use_case.execute(
        {
            "threadId": thread_id,
            "commentId": comment_id,
            "replyId": reply_id,
            "owner": user.user_id,
        }
    )
    return {"status": "success"}
