"""Post domain service."""

from datetime import datetime

import logfire

from forum.domain.error import NotFoundError
from forum.domain.model.post import Post
from forum.domain.model.tag import Tag
from forum.domain.repository import PostRepository
from forum.domain.value import PostId, PostKind
from forum.util.markdown import render_markdown

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    @staticmethod
    def with_rendered_body(post: Post) -> Post:
        """Return the post with ``body_html`` derived from its markdown."""
        return post.model_copy(update={"body_html": render_markdown(post.body_markdown)})

    async def save_post(self, post: Post) -> Post:
        """Save a post, rendering its body first.

        Args:
            post: Post to save

        Returns:
            Saved post (with ID assigned on first save)
        """
        with logfire.span("post_service.save_post", post_id=post.id, title=post.title):
            saved = await self.post_repository.save(self.with_rendered_body(post))
            logfire.info("Post saved", post_id=saved.id, kind=saved.kind.value)
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=post_id):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=post_id, title=post.title)
            else:
                logfire.warn("Post not found", post_id=post_id)

            return post

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID or fail.

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self.get_post_by_id(post_id)
        if post is None:
            raise NotFoundError("Post", post_id)
        return post

    async def set_tags(self, post_id: PostId, tags: list[Tag]) -> Post:
        """Replace the post's tags with exactly ``tags``.

        This is an overwrite, not a merge. Tags that are no longer attached
        stay in the store.

        Args:
            post_id: Post ID
            tags: Persisted tags; repeated tags are collapsed

        Returns:
            The post with its new tag set

        Raises:
            NotFoundError: If the post does not exist
        """
        unique: dict[str, Tag] = {}
        for tag in tags:
            unique.setdefault(tag.title.root, tag)

        with logfire.span(
            "post_service.set_tags",
            post_id=post_id,
            tags=[tag.title.root for tag in unique.values()],
        ):
            post = await self.post_repository.replace_tags(post_id, list(unique.values()))
            logfire.info("Post tags replaced", post_id=post_id, count=len(post.tags))
            return post

    async def update_content(
        self,
        post_id: PostId,
        title: str | None = None,
        body_markdown: str | None = None,
        url: str | None = None,
    ) -> Post:
        """Update the editable fields of a post.

        Fields left as None keep their current value.

        Raises:
            NotFoundError: If the post does not exist
            ValueError: If the updated post is invalid (e.g. blank title)
        """
        with logfire.span("post_service.update_content", post_id=post_id):
            post = await self.get_post(post_id)

            changes: dict[str, object] = {"updated_at": datetime.now()}
            if title is not None:
                changes["title"] = title
            if body_markdown is not None:
                changes["body_markdown"] = body_markdown
            if url is not None:
                changes["url"] = url

            # model_copy skips validation, so re-validate through the constructor
            updated = Post(**{**post.model_dump(), **changes, "tags": post.tags})
            return await self.save_post(updated)

    async def list_posts(
        self, kind: PostKind | None = None, limit: int = 30, offset: int = 0
    ) -> list[Post]:
        """List posts, most recent first, optionally of one kind.

        Args:
            kind: Post kind filter (None for all kinds)
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts
        """
        with logfire.span(
            "post_service.list_posts",
            kind=kind.value if kind else None,
            limit=limit,
            offset=offset,
        ):
            posts = await self.post_repository.find_all(
                kind=kind, limit=limit, offset=offset
            )
            logfire.info("Posts listed", count=len(posts))
            return posts
