#!/usr/bin/env python3
"""Serve the forum API under uvicorn.

Logging and Logfire are configured here, before the app factory runs, so
startup failures are reported too.
"""

import sys

import logfire
import uvicorn

from forum.config import Settings
from forum.util.logging import setup_logging
from forum.util.observability import configure_logfire

APP_FACTORY = "forum.interface.api.app:create_app"


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    server = settings.server
    logfire.info("Serving forum API on {host}:{port}", host=server.host, port=server.port)
    try:
        uvicorn.run(
            APP_FACTORY,
            factory=True,
            host=server.host,
            port=server.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception:
        logfire.exception("Forum API failed to start")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
