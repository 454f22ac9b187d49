"""In-memory user repository for testing."""

from itertools import count
from typing import Optional

from forum.domain.model.user import User
from forum.domain.repository.user import UserRepository
from forum.domain.value import DigestFrequency, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}
        self._ids = count(1)

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_digest_subscribers(self, frequency: DigestFrequency) -> list[User]:
        """Find users subscribed to digests of ``frequency``."""
        return [
            user
            for _, user in sorted(self._users.items())
            if user.subscribed_to(frequency)
        ]

    async def save(self, user: User) -> User:
        """Save a user."""
        if user.id is None:
            user = user.model_copy(update={"id": UserId(next(self._ids))})
        self._users[user.id] = user
        return user
