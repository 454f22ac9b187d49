"""Stdlib logging setup for the command line scripts."""

import logging
import sys

from forum.config import Settings

# Libraries that are chatty at INFO
_QUIET_LOGGERS = ("httpx", "httpcore", "asyncpg")


def setup_logging(settings: Settings) -> None:
    """Send log records to stdout at a level derived from ``settings.debug``.

    SQL echo is left to the engine (``echo=settings.debug``); Alembic keeps
    reporting applied revisions at INFO.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("alembic").setLevel(logging.INFO)
    logging.getLogger("forum").setLevel(level)

    logging.getLogger(__name__).debug(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
