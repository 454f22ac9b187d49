"""Dependency injection module.

``PROVIDERS`` lists every provider the forum is assembled from. Concrete
providers are used as they are; mockable components (see ``Component``)
resolve to their production or mock subclass through ``get_provider``.
"""

from typing import Type

from forum.util.di.application import ProdApplicationProvider
from forum.util.di.base import Component, ProviderBase
from forum.util.di.core import ProdConfigProvider
from forum.util.di.domain import ProdDomainProvider
from forum.util.di.infrastructure import (
    MailerProvider,
    PersistenceProvider,
    ProdMailerProvider,
    ProdPersistenceProvider,
    ProdTwitterProvider,
    TwitterProvider,
)
from forum.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    TwitterProvider,
    MailerProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider class from ``PROVIDERS`` to the class to instantiate.

    Args:
        base: Entry of ``PROVIDERS``
        use_mock: Pick the mock implementation of a mockable component

    Returns:
        ``base`` itself when it has no subclasses, otherwise the subclass
        whose ``__is_mock__`` equals ``use_mock``

    Raises:
        DependencyInjectionError: If the component lacks that implementation
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for implementation in implementations:
        if implementation.__is_mock__ == use_mock:
            return implementation

    kind = "mock" if use_mock else "production"
    component = base.__mock_component__ or base.__name__
    raise DependencyInjectionError(f"No {kind} implementation for {component}")


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "MailerProvider",
    "PersistenceProvider",
    "TwitterProvider",
    "ProdMailerProvider",
    "ProdPersistenceProvider",
    "ProdTwitterProvider",
]
