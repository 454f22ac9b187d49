"""Mock providers for testing."""

from .mailer import MockMailerProvider
from .twitter import MockTwitterProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockMailerProvider",
    "MockTwitterProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
