"""Thread routes."""

from typing import Any

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Header, status

from forum.application.usecase.thread import AddThreadUseCase, GetThreadUseCase
from forum.domain.service import JWTService
from forum.domain.value import ThreadId
from forum.interface.api.auth import authenticate

router = APIRouter(prefix="/threads", tags=["threads"], route_class=DishkaRoute)


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_thread(
    add_thread_use_case: FromDishka[AddThreadUseCase],
    jwt_service: FromDishka[JWTService],
    payload: dict[str, Any] = Body(),
    authorization: str | None = Header(default=None),
) -> dict[str, Any]:
    """Create a thread owned by the caller.

    Args:
        add_thread_use_case: Add thread use case from DI
        jwt_service: JWT service for token verification (injected)
        payload: Body with title and body
        authorization: Bearer token header

    Returns:
        The added thread in the success envelope
    """
    user = authenticate(jwt_service, authorization)
    added = await add_thread_use_case.execute({**payload, "owner": user.user_id})
    logfire.info("Thread created", thread_id=added.id, owner=user.user_id)
    return {"status": "success", "data": {"addedThread": added.to_payload()}}


@router.get("/{thread_id}")
async def get_thread(
    thread_id: str,
    get_thread_use_case: FromDishka[GetThreadUseCase],
) -> dict[str, Any]:
    """Read a thread with its comments and replies.

    Deleted comments and replies keep their place with masked content.
    """
    thread = await get_thread_use_case.execute(ThreadId(thread_id))
    return {"status": "success", "data": {"thread": thread.to_payload()}}
