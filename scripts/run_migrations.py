#!/usr/bin/env python3
"""Upgrade the database schema, reporting failures to Logfire.

Usage::

    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3f1c2a9d7b40
"""

import argparse
import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from forum.config import Settings
from forum.util.logging import setup_logging
from forum.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Upgrade the forum schema")
    parser.add_argument("revision", nargs="?", default="head")
    args = parser.parse_args(argv)

    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings, service_name="forum-migrations")

    with logfire.span("migrations.upgrade", revision=args.revision):
        try:
            command.upgrade(Config(str(ALEMBIC_INI)), args.revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                revision=args.revision,
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # A half-migrated schema must stop whatever runs after us
            raise

    logfire.info("Database migrations completed", revision=args.revision)
    return 0


if __name__ == "__main__":
    sys.exit(main())
