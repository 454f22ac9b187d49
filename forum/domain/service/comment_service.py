"""Comment domain service."""

import logfire

from forum.domain.model.comment import Comment
from forum.domain.repository import CommentRepository
from forum.domain.value import PostId, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self, post_id: PostId, author_id: UserId, body: str
    ) -> Comment:
        """Create a comment on a post.

        Args:
            post_id: Parent post ID
            author_id: Author user ID
            body: Comment text

        Returns:
            Created comment
        """
        with logfire.span(
            "comment_service.create_comment", post_id=post_id, author_id=author_id
        ):
            comment = await self.comment_repository.save(
                Comment(post_id=post_id, author_id=author_id, body=body)
            )
            logfire.info("Comment created", comment_id=comment.id, post_id=post_id)
            return comment
