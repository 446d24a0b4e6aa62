#!/usr/bin/env python3
"""Upgrade the feed schema, reporting failures to Logfire.

Usage:
    run_migrations.py [REVISION]

REVISION defaults to ``head``.
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from newsfeed.config import Settings
from newsfeed.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Upgrade the database to the requested revision."""
    settings = Settings()
    configure_logfire(settings)

    revision = argv[1] if len(argv) > 1 else "head"
    alembic_cfg = Config("alembic.ini")

    try:
        with logfire.span(
            "run_migrations", revision=revision, environment=settings.environment
        ):
            command.upgrade(alembic_cfg, revision)
    except Exception as e:
        logfire.error(
            "Schema upgrade failed",
            revision=revision,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # A half-migrated schema must keep the API from starting
        raise

    logfire.info("Schema upgraded", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
