"""PostgreSQL implementation of User repository."""

from typing import List, Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import User
from forum.domain.repository import UserRepository
from forum.domain.value import DigestFrequency, UserId
from forum.persistence.mappers import row_to_user, user_to_dict
from forum.persistence.tables import users_table

_SUBSCRIPTION_COLUMNS = {
    DigestFrequency.DAILY: users_table.c.daily_digest,
    DigestFrequency.WEEKLY: users_table.c.weekly_digest,
}


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_digest_subscribers(self, frequency: DigestFrequency) -> List[User]:
        """Find users with an email address subscribed to ``frequency``."""
        stmt = (
            select(users_table)
            .where(_SUBSCRIPTION_COLUMNS[frequency].is_(True))
            .where(users_table.c.email.is_not(None))
            .order_by(users_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        user_dict = user_to_dict(user)

        if user.id is None:
            stmt = insert(users_table).values(**user_dict)
        else:
            stmt = (
                update(users_table)
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )

        result = await self.session.execute(stmt.returning(users_table))
        row = result.mappings().first()
        await self.session.flush()
        return row_to_user(dict(row)) if row else user
