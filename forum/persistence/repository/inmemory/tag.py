"""In-memory implementation of Tag repository for testing."""

from itertools import count
from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from forum.domain.model.tag import Tag
from forum.domain.repository.tag import TagRepository
from forum.domain.value import TagId, TagTitle


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._tags: dict[TagId, Tag] = {}
        self._title_index: dict[str, TagId] = {}
        self._ids = count(1)

    async def create(self, tag: Tag) -> Tag:
        """Insert a new tag.

        Raises:
            IntegrityError: If a tag with the same title exists
        """
        if tag.title.root in self._title_index:
            raise IntegrityError("Duplicate tag title", None, Exception())

        saved = tag.model_copy(update={"id": TagId(next(self._ids))})
        self._tags[saved.id] = saved
        self._title_index[saved.title.root] = saved.id
        return saved

    async def find_by_title(self, title: TagTitle) -> Optional[Tag]:
        """Find tag by title."""
        tag_id = self._title_index.get(title.root)
        if tag_id:
            return self._tags.get(tag_id)
        return None

    async def find_by_titles(self, titles: Sequence[TagTitle]) -> list[Tag]:
        """Find multiple tags by titles."""
        tags = []
        for title in titles:
            tag = await self.find_by_title(title)
            if tag:
                tags.append(tag)
        return tags

    async def find_all(self, limit: int = 100) -> list[Tag]:
        """Find all tags ordered by title."""
        tags = sorted(self._tags.values(), key=lambda t: t.title.root)
        return tags[:limit]
