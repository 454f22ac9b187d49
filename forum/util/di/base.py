"""Base class for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure components that can be swapped for a mock in tests
Component = Literal["persistence", "twitter", "mailer"]


class ProviderBase(Provider):
    """Base for all DI providers.

    A mockable component is declared as a direct subclass setting
    ``__mock_component__``; its implementations subclass that again and set
    ``__is_mock__``. Providers without subclasses are concrete.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
