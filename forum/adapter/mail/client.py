"""Digest mailer handing rendered digests to an HTTP mail relay."""

from typing import Optional

import httpx
import logfire

from forum.adapter.error import MailRelayError
from forum.domain.model.digest import Digest
from forum.domain.service.digest_service import Mailer


class DigestMailer(Mailer):
    """Base class for digest mailers.

    Provides type distinction for dependency injection.
    """

    pass


class HttpRelayMailer(DigestMailer):
    """Posts digests as JSON to a mail relay."""

    def __init__(
        self,
        relay_url: str,
        sender: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize relay mailer.

        Args:
            relay_url: Relay endpoint accepting messages
            sender: From address
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.relay_url = relay_url
        self.sender = sender
        self.timeout = timeout
        self.transport = transport

    async def deliver(self, digest: Digest) -> None:
        """Hand a digest to the relay.

        Raises:
            MailRelayError: If the relay rejects the message or is unreachable
        """
        payload = {
            "from": self.sender,
            "to": digest.recipient.email,
            "subject": digest.subject,
            "html": digest.html,
        }

        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(
                    self.relay_url, json=payload, timeout=self.timeout
                )

                if not response.is_success:
                    logfire.error(
                        "Mail relay rejected digest",
                        recipient_id=digest.recipient.id,
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise MailRelayError(
                        f"Mail relay rejected digest: {response.status_code}"
                    )

        except httpx.HTTPError as e:
            logfire.error("Mail relay HTTP error", error=str(e))
            raise MailRelayError(f"HTTP error delivering digest: {e}") from e


class MockDigestMailer(DigestMailer):
    """Mock mailer for testing. Records delivered digests."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.delivered: list[Digest] = []

    async def deliver(self, digest: Digest) -> None:
        """Record the digest, or fail if configured to."""
        if self.fail:
            raise MailRelayError("Mock relay failure")
        self.delivered.append(digest)
