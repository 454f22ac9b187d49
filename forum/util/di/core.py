"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from forum.config import DigestSettings, MailSettings, Settings, TwitterSettings
from forum.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_twitter_settings(self, settings: Settings) -> TwitterSettings:
        """Provide Twitter settings."""
        return settings.twitter

    @provide(scope=Scope.APP)
    def provide_mail_settings(self, settings: Settings) -> MailSettings:
        """Provide mail relay settings."""
        return settings.mail

    @provide(scope=Scope.APP)
    def provide_digest_settings(self, settings: Settings) -> DigestSettings:
        """Provide digest settings."""
        return settings.digest
