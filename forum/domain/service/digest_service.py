"""Digest domain service.

A digest lists the posts created since the last digest of the same
frequency. Scheduling is external: a scheduler runs the send-digest use case
once per period, and this service does the per-recipient work.
"""

import html
from abc import ABC, abstractmethod
from datetime import datetime

import logfire

from forum.config import DigestSettings, TwitterSettings
from forum.domain.model import Digest, DigestHistory, Post, User
from forum.domain.repository import DigestHistoryRepository, PostRepository
from forum.domain.value import DigestFrequency

from .base import Service


class Mailer(ABC):
    """Outbound mail collaborator."""

    @abstractmethod
    async def deliver(self, digest: Digest) -> None:
        """Deliver a digest to its recipient.

        Raises:
            ProviderError: If the digest could not be handed over
        """
        pass


class DigestService(Service):
    """Domain service for digest operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        digest_history_repository: DigestHistoryRepository,
        mailer: Mailer,
        digest_settings: DigestSettings,
        twitter_settings: TwitterSettings,
    ) -> None:
        """Initialize digest service.

        Args:
            post_repository: Post repository
            digest_history_repository: Digest checkpoint repository
            mailer: Mail collaborator
            digest_settings: Digest size settings
            twitter_settings: Used for the short links of internal posts
        """
        self.post_repository = post_repository
        self.digest_history_repository = digest_history_repository
        self.mailer = mailer
        self.digest_settings = digest_settings
        self.twitter_settings = twitter_settings

    async def latest_checkpoint(self, frequency: DigestFrequency) -> DigestHistory:
        """Latest checkpoint for ``frequency``, created if there is none yet."""
        history = await self.digest_history_repository.find_latest(frequency)
        if history is None:
            logfire.info("No digest checkpoint yet", frequency=frequency.value)
            history = await self.record_checkpoint(frequency)
        return history

    async def record_checkpoint(self, frequency: DigestFrequency) -> DigestHistory:
        """Record that a digest run for ``frequency`` finished now."""
        history = await self.digest_history_repository.save(
            DigestHistory(frequency=frequency, created_at=datetime.now())
        )
        logfire.info(
            "Digest checkpoint recorded",
            frequency=frequency.value,
            checkpoint_id=history.id,
        )
        return history

    async def build_digest(self, checkpoint: DigestHistory, recipient: User) -> Digest:
        """Build the digest of posts created after ``checkpoint``.

        Args:
            checkpoint: Last digest run of this frequency
            recipient: User the digest is addressed to

        Returns:
            Digest ready for delivery
        """
        posts = await self.post_repository.find_created_since(
            checkpoint.created_at, limit=self.digest_settings.max_posts
        )
        return Digest(
            recipient=recipient,
            frequency=checkpoint.frequency,
            since=checkpoint.created_at,
            subject=f"Your {checkpoint.frequency.value} digest",
            posts=posts,
            html=self._render(posts),
        )

    async def send_digest(self, checkpoint: DigestHistory, recipient: User) -> Digest:
        """Build one digest and hand it to the mailer.

        Mailer failures propagate.

        Args:
            checkpoint: Last digest run of this frequency
            recipient: User the digest is addressed to

        Returns:
            The delivered digest
        """
        with logfire.span(
            "digest_service.send_digest",
            frequency=checkpoint.frequency.value,
            recipient_id=recipient.id,
        ):
            digest = await self.build_digest(checkpoint, recipient)
            await self.mailer.deliver(digest)
            logfire.info(
                "Digest delivered",
                recipient_id=recipient.id,
                posts=len(digest.posts),
            )
            return digest

    def _render(self, posts: list[Post]) -> str:
        if not posts:
            return "<p>Nothing new since the last digest.</p>"

        items = []
        for post in posts:
            href = html.escape(post.link(self.twitter_settings.short_link_base))
            title = html.escape(post.title)
            tags = ", ".join(html.escape(t) for t in post.tag_titles)
            suffix = f" <small>{tags}</small>" if tags else ""
            items.append(f'<li><a href="{href}">{title}</a>{suffix}</li>')
        return "<ul>\n" + "\n".join(items) + "\n</ul>"
