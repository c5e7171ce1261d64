"""Comment routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Header, status

from forum.application.usecase.comment import (
    AddCommentUseCase,
    DeleteCommentUseCase,
    ToggleCommentLikeUseCase,
)
from forum.domain.service import JWTService
from forum.interface.api.auth import authenticate

router = APIRouter(
    prefix="/threads/{thread_id}/comments",
    tags=["comments"],
    route_class=DishkaRoute,
)


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_comment(
    thread_id: str,
    add_comment_use_case: FromDishka[AddCommentUseCase],
    jwt_service: FromDishka[JWTService],
    payload: dict[str, Any] = Body(),
    authorization: str | None = Header(default=None),
) -> dict[str, Any]:
    """Comment on a thread.

    Args:
        thread_id: Thread ID
        add_comment_use_case: Add comment use case from DI
        jwt_service: JWT service for token verification (injected)
        payload: Body with content
        authorization: Bearer token header

    Returns:
        The added comment in the success envelope
    """
    user = authenticate(jwt_service, authorization)
    added = await add_comment_use_case.execute(
        {**payload, "threadId": thread_id, "owner": user.user_id}
    )
    return {"status": "success", "data": {"addedComment": added.to_payload()}}


@router.delete("/{comment_id}")
async def delete_comment(
    thread_id: str,
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> dict[str, Any]:
    """Soft-delete one of the caller's comments."""
    user = authenticate(jwt_service, authorization)
    await delete_comment_use_case.execute(
        {"threadId": thread_id, "commentId": comment_id, "owner": user.user_id}
    )
    return {"status": "success"}


@router.put("/{comment_id}/likes")
async def toggle_comment_like(
    thread_id: str,
    comment_id: str,
    toggle_comment_like_use_case: FromDishka[ToggleCommentLikeUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> dict[str, Any]:
    """Like the comment, or take the like back if the caller already liked it."""
    user = authenticate(jwt_service, authorization)
    await toggle_comment_like_use_case.execute(
        {"threadId": thread_id, "commentId": comment_id, "userId": user.user_id}
    )
    return {"status": "success"}
