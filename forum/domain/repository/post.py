"""Post repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Sequence

from forum.domain.model.post import Post
from forum.domain.model.tag import Tag
from forum.domain.value import PostId, PostKind


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post (with its tags) if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, post_ids: Sequence[PostId]) -> List[Post]:
        """Find several posts by ID in a single query.

        Args:
            post_ids: Post identifiers

        Returns:
            Found posts ordered by ID ascending (missing IDs are skipped)
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        kind: Optional[PostKind] = None,
        limit: int = 30,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts, most recent first.

        Args:
            kind: Only posts of this kind (None for all kinds)
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts
        """
        pass

    @abstractmethod
    async def find_created_since(self, since: datetime, limit: int = 50) -> List[Post]:
        """Find posts created after a point in time, most recent first.

        Args:
            since: Exclusive lower bound on ``created_at``
            limit: Maximum number of posts to return

        Returns:
            List of posts
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Posts without an ID are inserted and returned with the ID assigned
        by the store. Tag associations are not written here, see
        ``replace_tags``.

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def replace_tags(self, post_id: PostId, tags: Sequence[Tag]) -> Post:
        """Replace the post's tag associations with exactly ``tags``.

        The replacement is atomic: readers see either the old set or the
        new one. Tags dropped from the post are not deleted.

        Args:
            post_id: The post ID
            tags: Persisted tags (with IDs)

        Returns:
            The post with its new tag set

        Raises:
            NotFoundError: If the post does not exist
        """
        pass

    @abstractmethod
    async def find_ids_by_title(self, query: str) -> List[PostId]:
        """IDs of posts whose title contains ``query`` (case-insensitive)."""
        pass

    @abstractmethod
    async def find_ids_by_tag_title(self, query: str) -> List[PostId]:
        """IDs of posts having a tag whose title contains ``query`` (case-insensitive)."""
        pass

    @abstractmethod
    async def find_ids_by_body(self, query: str) -> List[PostId]:
        """IDs of posts whose markdown body contains ``query`` (case-insensitive)."""
        pass
