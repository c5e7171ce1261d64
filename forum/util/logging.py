"""Standard library logging, routed to stdout.

Third-party libraries log through ``logging``; forum code logs through
``logfire``. This only sets levels and the output format.
"""

import logging
import sys

from forum.config import Settings

QUIET_LOGGERS = ("sqlalchemy.engine", "asyncpg", "uvicorn.access")


def log_level(settings: Settings) -> int:
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "production":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    level = log_level(settings)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stdout,
        force=True,
    )
    # SQL echo is a DatabaseSettings switch on the engine
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
