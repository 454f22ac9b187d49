"""Unit tests for provider selection."""

import pytest

from forum.util.di import (
    PersistenceProvider,
    ProdConfigProvider,
    ProdPersistenceProvider,
    ProviderBase,
    TwitterProvider,
    get_provider,
)
from forum.util.error import DependencyInjectionError
from tests.di import MockPersistenceProvider, MockTwitterProvider, build_test_container


def test_concrete_provider_is_used_as_is():
    assert get_provider(ProdConfigProvider) is ProdConfigProvider


def test_mockable_component_selects_by_flag():
    assert get_provider(PersistenceProvider) is ProdPersistenceProvider
    assert get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider
    assert get_provider(TwitterProvider, use_mock=True) is MockTwitterProvider


def test_missing_implementation_raises():
    class ProdOnlyComponent(ProviderBase):
        __mock_component__ = "mailer"

    class ProdOnlyImplementation(ProdOnlyComponent):
        __is_mock__ = False

    assert get_provider(ProdOnlyComponent) is ProdOnlyImplementation
    with pytest.raises(DependencyInjectionError, match="No mock implementation"):
        get_provider(ProdOnlyComponent, use_mock=True)


def test_unknown_component_is_rejected():
    with pytest.raises(ValueError, match="Unknown components"):
        build_test_container(unmock={"search"})
