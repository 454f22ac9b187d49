"""Update post use case."""

import logfire
from pydantic import BaseModel

from forum.domain.error import ValidationError
from forum.domain.service import PostService, TagService, parse_tag_titles
from forum.domain.value import PostId

from .common import PostResponse


class UpdatePostRequest(BaseModel):
    """Update post request.

    Fields left as None are not changed. A ``tags_string`` replaces the
    post's tags entirely; an empty one removes them all.
    """

    post_id: int
    title: str | None = None
    body_markdown: str | None = None
    url: str | None = None
    tags_string: str | None = None


class UpdatePostResponse(PostResponse):
    """Update post response."""

    pass


class UpdatePostUseCase:
    """Use case for editing a post and its tags."""

    def __init__(self, post_service: PostService, tag_service: TagService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
            tag_service: Tag domain service
        """
        self.post_service = post_service
        self.tag_service = tag_service

    async def execute(self, request: UpdatePostRequest) -> UpdatePostResponse:
        """Execute update post flow.

        Args:
            request: Update post request

        Returns:
            The updated post

        Raises:
            NotFoundError: If the post does not exist
            ValidationError: If the edited post is invalid
        """
        post_id = PostId(request.post_id)

        with logfire.span("update_post.execute", post_id=post_id):
            try:
                parse_tag_titles(request.tags_string)
                post = await self.post_service.update_content(
                    post_id,
                    title=request.title,
                    body_markdown=request.body_markdown,
                    url=request.url,
                )
            except ValueError as e:
                raise ValidationError(str(e)) from e

            if request.tags_string is not None:
                tags = await self.tag_service.normalize(request.tags_string)
                post = await self.post_service.set_tags(post_id, tags)

            logfire.info("Post updated", post_id=post_id, tags=post.tag_titles)
            return UpdatePostResponse(**PostResponse.from_post(post).model_dump())
