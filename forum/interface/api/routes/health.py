"""Liveness probe."""

from importlib.metadata import PackageNotFoundError, version

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from forum.config import Environment, Settings

router = APIRouter(tags=["health"], route_class=DishkaRoute)


def package_version() -> str:
    try:
        return version("forum-api")
    except PackageNotFoundError:
        return "unknown"


class Liveness(BaseModel):
    status: str = "ok"
    version: str
    environment: Environment


@router.get("/health", response_model=Liveness)
async def health(settings: FromDishka[Settings]) -> Liveness:
    """Report that the process is serving; storage is not probed."""
    return Liveness(version=package_version(), environment=settings.environment)
