"""Response model shared by the post use cases."""

from datetime import datetime

from pydantic import BaseModel

from forum.domain.model.post import Post
from forum.domain.value import PostKind


class PostResponse(BaseModel):
    """A post as returned by the use cases."""

    post_id: int
    title: str
    kind: PostKind
    author_id: int
    url: str | None
    body_html: str
    tags: list[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_post(cls, post: Post) -> "PostResponse":
        """Build a response from a persisted post."""
        return cls(
            post_id=post.id,
            title=post.title,
            kind=post.kind,
            author_id=post.author_id,
            url=post.url,
            body_html=post.body_html,
            tags=post.tag_titles,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )
