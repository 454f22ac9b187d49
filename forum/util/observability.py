"""Logfire setup for the forum processes.

Each entry point (migrations, the digest run) configures Logfire once under
its own service name, then instruments the libraries it talks through::

    configure_logfire(settings, service_name="forum-digest")
    instrument_httpx()

Domain code only emits spans and events::

    with logfire.span("tag_service.normalize", raw=raw):
        logfire.info("Tags normalized", titles=titles)
"""

import logfire
from sqlalchemy.ext.asyncio import AsyncEngine

from forum.config import Settings

SERVICE_VERSION = "0.1.0"


def _should_send(settings: Settings) -> bool:
    # Explicit setting wins, otherwise send only when a token is configured
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings, service_name: str = "forum") -> None:
    """Configure Logfire for one process.

    Set ``OBSERVABILITY__LOGFIRE_TOKEN`` to ship telemetry to Logfire cloud;
    without it everything stays on the console.

    Args:
        settings: Application settings
        service_name: Name the process reports under
    """
    send_to_logfire = _should_send(settings)

    logfire.configure(
        service_name=service_name,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        service_name=service_name,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement the engine runs, tagged with the active span."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)


def instrument_httpx() -> None:
    """Trace outbound tweets and mail relay calls."""
    logfire.instrument_httpx()
