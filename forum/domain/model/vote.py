"""Vote entity.

Each user can vote on a post at most once. The store enforces this with a
unique constraint on (post_id, user_id).
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import PostId, UserId, VoteId


class Vote(DomainModel):
    """A user's vote on a post."""

    id: Optional[VoteId] = None
    post_id: PostId
    user_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)
