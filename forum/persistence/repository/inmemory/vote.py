"""In-memory vote repository for testing."""

from itertools import count
from typing import Optional

from sqlalchemy.exc import IntegrityError

from forum.domain.model.vote import Vote
from forum.domain.repository.vote import VoteRepository
from forum.domain.value import PostId, UserId, VoteId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: list[Vote] = []
        self._ids = count(1)

    async def find_by_post_and_user(
        self, post_id: PostId, user_id: UserId
    ) -> Optional[Vote]:
        """Find a vote by post and user."""
        for vote in self._votes:
            if vote.post_id == post_id and vote.user_id == user_id:
                return vote
        return None

    async def find_by_post(self, post_id: PostId) -> list[Vote]:
        """Find all votes on a post."""
        return [v for v in self._votes if v.post_id == post_id]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If vote already exists (duplicate)
        """
        existing = await self.find_by_post_and_user(vote.post_id, vote.user_id)
        if existing:
            raise IntegrityError("Duplicate vote", None, Exception())

        saved = vote.model_copy(update={"id": VoteId(next(self._ids))})
        self._votes.append(saved)
        return saved

    async def count_by_post(self, post_id: PostId) -> int:
        """Count votes on a post."""
        return sum(1 for v in self._votes if v.post_id == post_id)
