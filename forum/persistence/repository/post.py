"""PostgreSQL implementation of Post repository."""

from collections import defaultdict
from datetime import datetime
from typing import List, Optional, Sequence

import logfire
from sqlalchemy import delete, desc, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.error import NotFoundError
from forum.domain.model import Post, Tag
from forum.domain.repository.post import PostRepository
from forum.domain.value import PostId, PostKind
from forum.persistence.mappers import post_to_dict, row_to_post, row_to_tag
from forum.persistence.query import contains_ci
from forum.persistence.tables import post_tags_table, posts_table, tags_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_tags_for_posts(
        self, post_ids: Sequence[PostId]
    ) -> dict[PostId, list[Tag]]:
        """Fetch tags for multiple posts in a single query.

        Args:
            post_ids: List of post IDs

        Returns:
            Dict mapping post_id -> list of tags, ordered by tag title
        """
        if not post_ids:
            return {}

        stmt = (
            select(post_tags_table.c.post_id, tags_table)
            .select_from(post_tags_table)
            .join(tags_table, post_tags_table.c.tag_id == tags_table.c.id)
            .where(post_tags_table.c.post_id.in_(post_ids))
            .order_by(tags_table.c.title)
        )
        result = await self.session.execute(stmt)
        rows = result.fetchall()

        # Build lookup: post_id -> [tags]
        post_tag_map: dict[PostId, list[Tag]] = defaultdict(list)
        for row in rows:
            post_tag_map[row.post_id].append(row_to_tag(row._asdict()))

        return post_tag_map

    async def _rows_to_posts(self, post_rows) -> List[Post]:
        """Build Post domain models with their tags from post rows."""
        if not post_rows:
            return []

        post_tag_map = await self._fetch_tags_for_posts([row.id for row in post_rows])
        return [
            row_to_post(row._asdict(), tags=post_tag_map.get(row.id, []))
            for row in post_rows
        ]

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=post_id):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                logfire.warn("Post not found", post_id=post_id)
                return None

            posts = await self._rows_to_posts([row])
            return posts[0]

    async def find_by_ids(self, post_ids: Sequence[PostId]) -> List[Post]:
        """Find posts by IDs, ordered by ID."""
        if not post_ids:
            return []

        stmt = (
            select(posts_table)
            .where(posts_table.c.id.in_(post_ids))
            .order_by(posts_table.c.id)
        )
        result = await self.session.execute(stmt)
        return await self._rows_to_posts(result.fetchall())

    async def find_all(
        self,
        kind: Optional[PostKind] = None,
        limit: int = 30,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts with filtering and pagination."""
        with logfire.span(
            "post_repository.find_all",
            kind=kind.value if kind else None,
            limit=limit,
            offset=offset,
        ):
            stmt = select(posts_table)

            if kind:
                stmt = stmt.where(posts_table.c.kind == kind.value)

            stmt = (
                stmt.order_by(desc(posts_table.c.created_at), desc(posts_table.c.id))
                .limit(limit)
                .offset(offset)
            )

            result = await self.session.execute(stmt)
            posts = await self._rows_to_posts(result.fetchall())

            logfire.info("Found posts", count=len(posts))
            return posts

    async def find_created_since(self, since: datetime, limit: int = 50) -> List[Post]:
        """Find posts created after ``since``."""
        stmt = (
            select(posts_table)
            .where(posts_table.c.created_at > since)
            .order_by(desc(posts_table.c.created_at), desc(posts_table.c.id))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return await self._rows_to_posts(result.fetchall())

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        with logfire.span("post_repository.save", post_id=post.id, title=post.title):
            post_dict = post_to_dict(post)  # Note: tags are excluded by mapper

            if post.id is None:
                logfire.info("Inserting new post", title=post.title, kind=post.kind.value)
                stmt = insert(posts_table).values(**post_dict).returning(posts_table)
            else:
                logfire.info("Updating existing post", post_id=post.id)
                stmt = (
                    update(posts_table)
                    .where(posts_table.c.id == post.id)
                    .values(**post_dict)
                    .returning(posts_table)
                )

            result = await self.session.execute(stmt)
            row = result.fetchone()
            if row is None:
                raise NotFoundError("Post", post.id)

            await self.session.flush()
            posts = await self._rows_to_posts([row])
            logfire.info("Post saved successfully", post_id=row.id)
            return posts[0]

    async def replace_tags(self, post_id: PostId, tags: Sequence[Tag]) -> Post:
        """Replace the post's tag associations inside a savepoint."""
        with logfire.span(
            "post_repository.replace_tags",
            post_id=post_id,
            tags=[tag.title.root for tag in tags],
        ):
            async with self.session.begin_nested():
                # Lock the post row so concurrent replacements serialize
                stmt = (
                    select(posts_table.c.id)
                    .where(posts_table.c.id == post_id)
                    .with_for_update()
                )
                result = await self.session.execute(stmt)
                if result.fetchone() is None:
                    raise NotFoundError("Post", post_id)

                await self.session.execute(
                    delete(post_tags_table).where(post_tags_table.c.post_id == post_id)
                )

                tag_ids = list(dict.fromkeys(tag.id for tag in tags))
                if tag_ids:
                    await self.session.execute(
                        insert(post_tags_table),
                        [{"post_id": post_id, "tag_id": tag_id} for tag_id in tag_ids],
                    )

            post = await self.find_by_id(post_id)
            if post is None:
                raise NotFoundError("Post", post_id)
            return post

    async def _find_ids(self, stmt) -> List[PostId]:
        result = await self.session.execute(stmt)
        return [PostId(row[0]) for row in result.fetchall()]

    async def find_ids_by_title(self, query: str) -> List[PostId]:
        """IDs of posts whose title contains ``query``."""
        return await self._find_ids(
            select(posts_table.c.id).where(contains_ci(posts_table.c.title, query))
        )

    async def find_ids_by_tag_title(self, query: str) -> List[PostId]:
        """IDs of posts having a tag whose title contains ``query``."""
        stmt = (
            select(post_tags_table.c.post_id)
            .select_from(post_tags_table)
            .join(tags_table, post_tags_table.c.tag_id == tags_table.c.id)
            .where(contains_ci(tags_table.c.title, query))
            .distinct()
        )
        return await self._find_ids(stmt)

    async def find_ids_by_body(self, query: str) -> List[PostId]:
        """IDs of posts whose markdown body contains ``query``."""
        return await self._find_ids(
            select(posts_table.c.id).where(
                contains_ci(posts_table.c.body_markdown, query)
            )
        )
