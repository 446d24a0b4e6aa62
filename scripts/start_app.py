#!/usr/bin/env python3
"""Serve the feed API under uvicorn, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from newsfeed.config import Settings
from newsfeed.util.logging import setup_logging
from newsfeed.util.observability import configure_logfire


def main() -> int:
    """Start the API on the configured host and port."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    with logfire.span(
        "start_app",
        environment=settings.environment,
        host=settings.api.host,
        port=settings.api.port,
    ):
        try:
            # create_app is a factory so each worker builds its own container
            uvicorn.run(
                "newsfeed.interface.api.app:create_app",
                factory=True,
                host=settings.api.host,
                port=settings.api.port,
                log_level="debug" if settings.debug else "info",
            )
        except Exception as e:
            logfire.error(
                "Feed API failed to start",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
