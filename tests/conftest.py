"""Test configuration and fixtures."""

import pytest

from forum.config import TwitterSettings


@pytest.fixture
def twitter_settings() -> TwitterSettings:
    """Twitter settings with the default short link base and limit."""
    return TwitterSettings(bearer_token="test-token")
