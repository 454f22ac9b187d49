"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from forum.domain.model.tag import Tag
from forum.domain.value import TagTitle


class TagRepository(ABC):
    """Repository interface for Tag entity."""

    @abstractmethod
    async def create(self, tag: Tag) -> Tag:
        """Insert a new tag.

        The insert must not disturb the surrounding transaction when it
        fails, so callers can recover by re-reading the existing tag.

        Args:
            tag: Tag to insert (without ID)

        Returns:
            Saved tag with its assigned ID

        Raises:
            IntegrityError: If a tag with the same title already exists
        """
        pass

    @abstractmethod
    async def find_by_title(self, title: TagTitle) -> Optional[Tag]:
        """Find tag by exact (normalized) title.

        Args:
            title: Tag title

        Returns:
            Tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_titles(self, titles: Sequence[TagTitle]) -> list[Tag]:
        """Find multiple tags by title in a single query.

        Args:
            titles: Tag titles

        Returns:
            Found tags (may be fewer than requested)
        """
        pass

    @abstractmethod
    async def find_all(self, limit: int = 100) -> list[Tag]:
        """Find all tags ordered by title.

        Args:
            limit: Maximum number of tags to return

        Returns:
            List of tags
        """
        pass
