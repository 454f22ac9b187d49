"""In-memory comment repository for testing."""

from itertools import count

from forum.domain.model.comment import Comment
from forum.domain.repository.comment import CommentRepository
from forum.domain.value import CommentId, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._ids = count(1)

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find all comments for a post, oldest first."""
        comments = [c for c in self._comments.values() if c.post_id == post_id]
        comments.sort(key=lambda c: (c.created_at, c.id))
        return comments

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        if comment.id is None:
            comment = comment.model_copy(update={"id": CommentId(next(self._ids))})
        self._comments[comment.id] = comment
        return comment

    async def find_post_ids_by_body(self, query: str) -> list[PostId]:
        """IDs of posts with a comment whose body contains ``query``."""
        needle = query.lower()
        return list(
            dict.fromkeys(
                c.post_id for c in self._comments.values() if needle in c.body.lower()
            )
        )
