"""User domain service."""

import logfire

from forum.domain.error import NotFoundError
from forum.domain.model import User
from forum.domain.repository import UserRepository
from forum.domain.value import DigestFrequency, UserId

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=user_id):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=user_id)
                raise NotFoundError("User", user_id)
            logfire.info("User found", user_id=user_id, handle=user.handle.root)
            return user

    async def get_digest_subscribers(self, frequency: DigestFrequency) -> list[User]:
        """Users who should receive the ``frequency`` digest."""
        with logfire.span(
            "user_service.get_digest_subscribers", frequency=frequency.value
        ):
            users = await self.user_repository.find_digest_subscribers(frequency)
            logfire.info(
                "Digest subscribers found", frequency=frequency.value, count=len(users)
            )
            return users
