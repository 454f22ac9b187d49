"""In-memory post repository for testing."""

from datetime import datetime
from itertools import count
from typing import Optional, Sequence

from forum.domain.error import NotFoundError
from forum.domain.model.post import Post
from forum.domain.model.tag import Tag
from forum.domain.repository.post import PostRepository
from forum.domain.value import PostId, PostKind


def _contains(text: Optional[str], query: str) -> bool:
    return text is not None and query.lower() in text.lower()


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    Tag associations are kept on the stored posts themselves.
    """

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}
        self._ids = count(1)

    def _recent_first(self, posts: list[Post]) -> list[Post]:
        return sorted(posts, key=lambda p: (p.created_at, p.id), reverse=True)

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_by_ids(self, post_ids: Sequence[PostId]) -> list[Post]:
        """Find posts by IDs, ordered by ID."""
        return [self._posts[i] for i in sorted(set(post_ids)) if i in self._posts]

    async def find_all(
        self,
        kind: Optional[PostKind] = None,
        limit: int = 30,
        offset: int = 0,
    ) -> list[Post]:
        """Find posts with filtering and pagination."""
        posts = list(self._posts.values())

        if kind is not None:
            posts = [p for p in posts if p.kind == kind]

        return self._recent_first(posts)[offset : offset + limit]

    async def find_created_since(self, since: datetime, limit: int = 50) -> list[Post]:
        """Find posts created after ``since``."""
        posts = [p for p in self._posts.values() if p.created_at > since]
        return self._recent_first(posts)[:limit]

    async def save(self, post: Post) -> Post:
        """Save a post (create or update). Tags are left untouched."""
        if post.id is None:
            saved = post.model_copy(update={"id": PostId(next(self._ids)), "tags": []})
        else:
            existing = self._posts.get(post.id)
            if existing is None:
                raise NotFoundError("Post", post.id)
            saved = post.model_copy(update={"tags": existing.tags})

        self._posts[saved.id] = saved
        return saved

    async def replace_tags(self, post_id: PostId, tags: Sequence[Tag]) -> Post:
        """Replace the post's tags."""
        post = self._posts.get(post_id)
        if post is None:
            raise NotFoundError("Post", post_id)

        unique = {tag.id: tag for tag in tags}
        updated = post.model_copy(
            update={"tags": sorted(unique.values(), key=lambda t: t.title.root)}
        )
        self._posts[post_id] = updated
        return updated

    async def find_ids_by_title(self, query: str) -> list[PostId]:
        """IDs of posts whose title contains ``query``."""
        return [i for i, p in self._posts.items() if _contains(p.title, query)]

    async def find_ids_by_tag_title(self, query: str) -> list[PostId]:
        """IDs of posts having a tag whose title contains ``query``."""
        return [
            i
            for i, p in self._posts.items()
            if any(_contains(title, query) for title in p.tag_titles)
        ]

    async def find_ids_by_body(self, query: str) -> list[PostId]:
        """IDs of posts whose markdown body contains ``query``."""
        return [i for i, p in self._posts.items() if _contains(p.body_markdown, query)]
