"""Create post use case."""

import logfire
from pydantic import BaseModel

from forum.domain.error import ValidationError
from forum.domain.model.post import Post
from forum.domain.service import (
    PostService,
    TagService,
    TweetService,
    UserService,
    parse_tag_titles,
)
from forum.domain.value import PostKind, UserId

from .common import PostResponse


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str
    author_id: int  # User ID of the author
    kind: PostKind = PostKind.INTERNAL
    url: str | None = None  # External posts only
    body_markdown: str = ""
    tags_string: str | None = None  # e.g. "ruby, rails css"


class CreatePostResponse(PostResponse):
    """Create post response."""

    tweet: str


class CreatePostUseCase:
    """Use case for creating a new post."""

    def __init__(
        self,
        post_service: PostService,
        tag_service: TagService,
        user_service: UserService,
        tweet_service: TweetService,
    ) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            tag_service: Tag domain service
            user_service: User domain service
            tweet_service: Tweet domain service
        """
        self.post_service = post_service
        self.tag_service = tag_service
        self.user_service = user_service
        self.tweet_service = tweet_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Steps:
        1. Load the author (via UserService)
        2. Create Post entity (validation happens in domain model)
        3. Save post (via PostService)
        4. Normalize ``tags_string`` and attach the tags
        5. Announce the post on Twitter (via TweetService)

        Args:
            request: Create post request

        Returns:
            Create post response with post details and the tweet text

        Raises:
            NotFoundError: If the author does not exist
            ValidationError: If post validation fails
            TwitterPostError: If the announcement fails (the post stays saved)
        """
        author_id = UserId(request.author_id)
        await self.user_service.get_by_id(author_id)  # Raises NotFoundError

        with logfire.span(
            "create_post.execute",
            title=request.title,
            kind=request.kind.value,
            author_id=author_id,
        ):
            try:
                post = Post(
                    title=request.title,
                    kind=request.kind,
                    author_id=author_id,
                    url=request.url,
                    body_markdown=request.body_markdown,
                )
                # Reject invalid tags before anything is written
                parse_tag_titles(request.tags_string)
            except ValueError as e:
                raise ValidationError(str(e)) from e

            saved_post = await self.post_service.save_post(post)

            if request.tags_string is not None:
                tags = await self.tag_service.normalize(request.tags_string)
                saved_post = await self.post_service.set_tags(saved_post.id, tags)

            tweet = await self.tweet_service.notify(saved_post)

            logfire.info(
                "Post created successfully",
                post_id=saved_post.id,
                tags=saved_post.tag_titles,
            )

            return CreatePostResponse(
                **PostResponse.from_post(saved_post).model_dump(), tweet=tweet
            )
