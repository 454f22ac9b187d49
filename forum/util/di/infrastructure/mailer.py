"""Mailer infrastructure providers."""

from dishka import Scope, provide

from forum.adapter.mail.client import HttpRelayMailer
from forum.config import MailSettings
from forum.domain.service import Mailer
from forum.util.di.base import ProviderBase


class MailerProvider(ProviderBase):
    """Mailer component base."""

    __mock_component__ = "mailer"


class ProdMailerProvider(MailerProvider):
    """Production mailer provider using the HTTP mail relay."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_mailer(self, mail_settings: MailSettings) -> Mailer:
        """Provide the digest mailer."""
        return HttpRelayMailer(
            relay_url=mail_settings.relay_url,
            sender=mail_settings.sender,
            timeout=mail_settings.timeout,
        )
