"""Search domain service."""

import logfire

from forum.domain.model.post import Post
from forum.domain.repository import CommentRepository, PostRepository
from forum.domain.value import PostId

from .base import Service


class SearchService(Service):
    """Case-insensitive substring search over posts.

    A post matches when the query occurs in its title, in one of its tag
    titles, in the body of one of its comments, or in its markdown body.
    Each source is queried separately and the matches are unioned.
    """

    def __init__(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize search service.

        Args:
            post_repository: Post repository
            comment_repository: Comment repository
        """
        self.post_repository = post_repository
        self.comment_repository = comment_repository

    async def search(self, query: str) -> list[Post]:
        """Find posts matching ``query``.

        A blank query matches nothing.

        Args:
            query: Text to look for

        Returns:
            Matching posts ordered by ID, each post at most once
        """
        with logfire.span("search_service.search", query=query):
            if not query.strip():
                logfire.info("Blank search query")
                return []

            sources = {
                "title": self.post_repository.find_ids_by_title,
                "tag": self.post_repository.find_ids_by_tag_title,
                "comment": self.comment_repository.find_post_ids_by_body,
                "body": self.post_repository.find_ids_by_body,
            }

            matched: set[PostId] = set()
            for source, find_ids in sources.items():
                ids = await find_ids(query)
                logfire.debug("Search source matched", source=source, count=len(ids))
                matched.update(ids)

            if not matched:
                logfire.info("No posts matched", query=query)
                return []

            posts = await self.post_repository.find_by_ids(sorted(matched))
            logfire.info("Posts matched", query=query, count=len(posts))
            return posts
