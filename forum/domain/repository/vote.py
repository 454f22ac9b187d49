"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from forum.domain.model.vote import Vote
from forum.domain.value import PostId, UserId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_post_and_user(
        self, post_id: PostId, user_id: UserId
    ) -> Optional[Vote]:
        """Find a user's vote on a post.

        Args:
            post_id: The post's ID
            user_id: The user's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Vote]:
        """Find all votes on a post.

        Args:
            post_id: The post's ID

        Returns:
            List of votes on the post
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create).

        Args:
            vote: The vote to save

        Returns:
            The saved vote with its assigned ID

        Raises:
            IntegrityError: If the user already voted on the post
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId) -> int:
        """Count votes on a post.

        Args:
            post_id: The post's ID

        Returns:
            Number of votes
        """
        pass
