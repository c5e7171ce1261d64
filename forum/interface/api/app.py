"""FastAPI application factory."""

from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI

from forum.interface.api.error import register_error_handlers
from forum.interface.api.routes import comments, health, replies, threads
from forum.util.di import create_container
from forum.util.observability import instrument_fastapi

ROUTERS = (health.router, threads.router, comments.router, replies.router)


def create_app(with_container: bool = True) -> FastAPI:
    """Build the forum API.

    Logfire must already be configured; ``scripts/start_app.py`` does that in
    production.

    Args:
        with_container: Attach the production DI container. Tests pass False
            and attach their own with ``setup_dishka``.
    """
    app = FastAPI(
        title="Forum API",
        description="Threads, comments, replies and comment likes",
        version="0.1.0",
    )
    instrument_fastapi(app)
    register_error_handlers(app)

    if with_container:
        setup_dishka(create_container(), app)

    for router in ROUTERS:
        app.include_router(router)
    return app
