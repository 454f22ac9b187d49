"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from forum.domain.model.user import User
from forum.domain.value import DigestFrequency, UserId


class UserRepository(ABC):
    """Repository for User entity."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_digest_subscribers(self, frequency: DigestFrequency) -> List[User]:
        """Find users subscribed to digests of a frequency.

        Args:
            frequency: Digest frequency

        Returns:
            Subscribed users with an email address, ordered by ID
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user with its assigned ID
        """
        pass
