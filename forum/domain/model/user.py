"""User entity.

Users are mostly opaque to the forum core. They author posts and comments,
cast votes, and may subscribe to digests.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import DigestFrequency, Handle, UserId


class User(DomainModel):
    """User entity."""

    id: Optional[UserId] = None
    handle: Handle
    email: Optional[str] = None  # Digest recipient address
    daily_digest: bool = False
    weekly_digest: bool = False
    created_at: datetime = Field(default_factory=datetime.now)

    def subscribed_to(self, frequency: DigestFrequency) -> bool:
        """Whether the user wants digests of the given frequency."""
        if not self.email:
            return False
        if frequency == DigestFrequency.DAILY:
            return self.daily_digest
        return self.weekly_digest
