"""PostgreSQL implementation of Tag repository."""

from typing import Optional, Sequence

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model.tag import Tag
from forum.domain.repository.tag import TagRepository
from forum.domain.value import TagTitle
from forum.persistence.mappers import row_to_tag, tag_to_dict
from forum.persistence.tables import tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def create(self, tag: Tag) -> Tag:
        """Insert a new tag.

        The insert runs in a savepoint so a unique violation on the title
        only rolls back this statement and the caller can reselect.
        """
        stmt = insert(tags_table).values(**tag_to_dict(tag)).returning(tags_table)
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_tag(row._asdict())

    async def find_by_title(self, title: TagTitle) -> Optional[Tag]:
        """Find tag by title."""
        stmt = select(tags_table).where(tags_table.c.title == title.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_tag(row._asdict()) if row else None

    async def find_by_titles(self, titles: Sequence[TagTitle]) -> list[Tag]:
        """Find multiple tags by titles in a single query."""
        if not titles:
            return []

        stmt = select(tags_table).where(
            tags_table.c.title.in_([title.root for title in titles])
        )
        result = await self.session.execute(stmt)
        rows = result.fetchall()
        return [row_to_tag(row._asdict()) for row in rows]

    async def find_all(self, limit: int = 100) -> list[Tag]:
        """Find all tags ordered by title."""
        stmt = select(tags_table).order_by(tags_table.c.title).limit(limit)
        result = await self.session.execute(stmt)
        rows = result.fetchall()
        return [row_to_tag(row._asdict()) for row in rows]
