"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List

from forum.domain.model.comment import Comment
from forum.domain.value import PostId


class CommentRepository(ABC):
    """Repository for Comment entity."""

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments on a post, oldest first.

        Args:
            post_id: The parent post's ID

        Returns:
            List of comments
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment with its assigned ID
        """
        pass

    @abstractmethod
    async def find_post_ids_by_body(self, query: str) -> List[PostId]:
        """IDs of posts having a comment whose body contains ``query`` (case-insensitive)."""
        pass
