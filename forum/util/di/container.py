"""Production dependency injection container."""

from dishka import AsyncContainer, make_async_container

from forum.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the container used by the scripts.

    Every component gets its production implementation. Settings come from
    the environment through ``ProdConfigProvider``. Callers open a request
    scope per unit of work (one session, one commit) and close the
    container when done.
    """
    return make_async_container(
        *(get_provider(base, use_mock=False)() for base in PROVIDERS)
    )
