#!/usr/bin/env python3
"""Mail the daily or weekly digest to subscribers.

Meant to be run by cron, e.g.::

    0 7 * * *  python scripts/send_digest.py daily
    0 7 * * 1  python scripts/send_digest.py weekly
"""

import argparse
import asyncio
import sys

import logfire

from forum.application.usecase.digest import SendDigestUseCase
from forum.config import Settings
from forum.domain.value import DigestFrequency
from forum.util.di.container import create_container
from forum.util.logging import setup_logging
from forum.util.observability import configure_logfire, instrument_httpx


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "frequency",
        choices=[frequency.value for frequency in DigestFrequency],
        help="Which digest to send",
    )
    return parser.parse_args(argv)


async def send(frequency: DigestFrequency) -> None:
    container = create_container()
    try:
        async with container() as request_container:
            use_case = await request_container.get(SendDigestUseCase)
            response = await use_case.execute(frequency)
    finally:
        await container.close()

    logfire.info(
        "Digest sent",
        frequency=response.frequency.value,
        recipients=response.recipients,
        checkpoint_id=response.checkpoint_id,
    )


def main(argv: list[str] | None = None) -> int:
    """Send one digest run and log any errors to Logfire."""
    args = parse_args(argv)
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings, service_name="forum-digest")
    instrument_httpx()

    try:
        asyncio.run(send(DigestFrequency(args.frequency)))
        return 0

    except Exception as e:
        logfire.error(
            "Digest run failed",
            frequency=args.frequency,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
