"""Digest history and digest content.

A ``DigestHistory`` row is written each time a digest run completes. The
latest row for a frequency is the checkpoint the next run starts from.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.model.post import Post
from forum.domain.model.user import User
from forum.domain.value import DigestFrequency, DigestHistoryId


class DigestHistory(DomainModel):
    """Checkpoint of a digest run."""

    id: Optional[DigestHistoryId] = None
    frequency: DigestFrequency
    created_at: datetime = Field(default_factory=datetime.now)


class Digest(DomainModel):
    """One digest message, ready to hand to the mailer."""

    recipient: User
    frequency: DigestFrequency
    since: datetime
    subject: str
    posts: list[Post]
    html: str
