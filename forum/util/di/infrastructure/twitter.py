"""Twitter infrastructure providers."""

from dishka import Scope, provide

from forum.adapter.twitter.client import RealTwitterPoster
from forum.config import TwitterSettings
from forum.domain.service import SocialPoster
from forum.util.di.base import ProviderBase
from forum.util.error import ConfigurationError


class TwitterProvider(ProviderBase):
    """Twitter component base."""

    __mock_component__ = "twitter"


class ProdTwitterProvider(TwitterProvider):
    """Production Twitter provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_social_poster(self, twitter_settings: TwitterSettings) -> SocialPoster:
        """Provide the Twitter poster.

        Returns:
            Twitter client posting through the v2 API

        Raises:
            ConfigurationError: If the bearer token is not configured
        """
        if not twitter_settings.bearer_token:
            raise ConfigurationError(
                "twitter.bearer_token", "must be set to announce posts"
            )

        return RealTwitterPoster(
            bearer_token=twitter_settings.bearer_token,
            api_url=twitter_settings.api_url,
            timeout=twitter_settings.timeout,
        )
