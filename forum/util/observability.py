"""Logfire setup and instrumentation hooks.

Application code calls ``logfire`` directly, e.g.::

    logfire.info("Comment added", comment_id=added.id, thread_id=thread_id)
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from forum.config import ObservabilitySettings, Settings

SERVICE_NAME = "forum-api"


def should_send(observability: ObservabilitySettings) -> bool:
    """Export to the Logfire cloud when forced, otherwise only with a token."""
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    observability = settings.observability
    send_to_logfire = should_send(observability)
    logfire.configure(
        service_name=SERVICE_NAME,
        environment=settings.environment,
        token=observability.logfire_token,
        send_to_logfire=send_to_logfire,
        console=logfire.ConsoleOptions(verbose=settings.debug),
    )
    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    # Headers stay out of spans: Authorization carries bearer tokens
    logfire.instrument_fastapi(app, capture_headers=False, excluded_urls="/health")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
