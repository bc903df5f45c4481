#!/usr/bin/env python3
"""Upgrade the Media Ranker schema, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py <revision> # upgrade to a given revision
"""

import sys
import logfire
from alembic import command
from alembic.config import Config

from ranker.config import Settings
from ranker.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Apply migrations up to the requested revision (default: head)."""
    settings = Settings()
    configure_logfire(settings)

    revision = argv[1] if len(argv) > 1 else "head"

    try:
        with logfire.span("Upgrading database schema to {revision}", revision=revision):
            command.upgrade(Config("alembic.ini"), revision)

        logfire.info("Database schema is up to date", revision=revision)
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            revision=revision,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Fail loudly so the app never starts against a half-migrated schema
        raise


if __name__ == "__main__":
    sys.exit(main(sys.argv))
