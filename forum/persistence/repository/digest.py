"""PostgreSQL implementation of DigestHistory repository."""

from typing import Optional

from sqlalchemy import desc, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import DigestHistory
from forum.domain.repository import DigestHistoryRepository
from forum.domain.value import DigestFrequency
from forum.persistence.mappers import digest_history_to_dict, row_to_digest_history
from forum.persistence.tables import digest_histories_table


class PostgresDigestHistoryRepository(DigestHistoryRepository):
    """PostgreSQL implementation of DigestHistoryRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_latest(self, frequency: DigestFrequency) -> Optional[DigestHistory]:
        """Most recent checkpoint for ``frequency``."""
        stmt = (
            select(digest_histories_table)
            .where(digest_histories_table.c.frequency == frequency.value)
            .order_by(
                desc(digest_histories_table.c.created_at),
                desc(digest_histories_table.c.id),
            )
            .limit(1)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_digest_history(row._asdict()) if row else None

    async def save(self, history: DigestHistory) -> DigestHistory:
        """Insert a checkpoint."""
        stmt = (
            insert(digest_histories_table)
            .values(**digest_history_to_dict(history))
            .returning(digest_histories_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_digest_history(row._asdict())
