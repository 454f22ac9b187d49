"""Create comment use case."""

from datetime import datetime

from pydantic import BaseModel

from forum.domain.error import ValidationError
from forum.domain.service import CommentService, PostService, UserService
from forum.domain.value import PostId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: int
    author_id: int  # User ID of the commenter
    body: str


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment_id: int
    post_id: int
    author_id: int
    body: str
    created_at: datetime


class CreateCommentUseCase:
    """Use case for commenting on a post."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Verify post and author exist
        2. Create comment via comment service

        Args:
            request: Create comment request

        Returns:
            Create comment response with comment details

        Raises:
            NotFoundError: If the post or the author does not exist
            ValidationError: If the comment body is invalid
        """
        post_id = PostId(request.post_id)
        author_id = UserId(request.author_id)

        await self.post_service.get_post(post_id)
        await self.user_service.get_by_id(author_id)

        try:
            comment = await self.comment_service.create_comment(
                post_id=post_id, author_id=author_id, body=request.body
            )
        except ValueError as e:
            raise ValidationError(str(e)) from e

        return CreateCommentResponse(
            comment_id=comment.id,
            post_id=comment.post_id,
            author_id=comment.author_id,
            body=comment.body,
            created_at=comment.created_at,
        )
