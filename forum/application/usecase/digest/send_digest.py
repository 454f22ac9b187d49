"""Send digest use case.

Run once per period by an external scheduler (see ``scripts/send_digest.py``).
"""

import logfire
from pydantic import BaseModel

from forum.domain.service import DigestService, UserService
from forum.domain.value import DigestFrequency


class SendDigestResponse(BaseModel):
    """Send digest response."""

    frequency: DigestFrequency
    recipients: int
    checkpoint_id: int


class SendDigestUseCase:
    """Use case for mailing the daily or weekly digest to subscribers."""

    def __init__(
        self, digest_service: DigestService, user_service: UserService
    ) -> None:
        """Initialize send digest use case.

        Args:
            digest_service: Digest domain service
            user_service: User domain service
        """
        self.digest_service = digest_service
        self.user_service = user_service

    async def execute(self, frequency: DigestFrequency) -> SendDigestResponse:
        """Send the digest of ``frequency`` to every subscriber.

        Steps:
        1. Load the latest checkpoint (creating one on the first run)
        2. Send one digest per subscriber
        3. Record a new checkpoint

        A mailer failure aborts the run before the new checkpoint is
        recorded, so the next run covers the same posts again.

        Args:
            frequency: Daily or weekly

        Returns:
            Number of recipients and the new checkpoint ID
        """
        with logfire.span("send_digest.execute", frequency=frequency.value):
            checkpoint = await self.digest_service.latest_checkpoint(frequency)
            subscribers = await self.user_service.get_digest_subscribers(frequency)

            for subscriber in subscribers:
                await self.digest_service.send_digest(checkpoint, subscriber)

            new_checkpoint = await self.digest_service.record_checkpoint(frequency)

            logfire.info(
                "Digest run complete",
                frequency=frequency.value,
                recipients=len(subscribers),
            )
            return SendDigestResponse(
                frequency=frequency,
                recipients=len(subscribers),
                checkpoint_id=new_checkpoint.id,
            )
