"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so we map by hand instead of
using SQLAlchemy's ORM mapping. Models without an ID map to insert dicts
without an ``id`` key so the database assigns one.
"""

from typing import Any, Dict, Sequence

from forum.domain.model import Comment, DigestHistory, Post, Tag, User, Vote
from forum.domain.value import (
    CommentId,
    DigestFrequency,
    DigestHistoryId,
    Handle,
    PostId,
    PostKind,
    TagId,
    TagTitle,
    UserId,
    VoteId,
)


def _without_missing_id(values: Dict[str, Any]) -> Dict[str, Any]:
    if values.get("id") is None:
        values.pop("id", None)
    return values


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        handle=Handle(row["handle"]),
        email=row.get("email"),
        daily_digest=row["daily_digest"],
        weekly_digest=row["weekly_digest"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return _without_missing_id(user.model_dump())


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model."""
    return Tag(
        id=TagId(row["id"]),
        title=TagTitle(row["title"]),
        created_at=row["created_at"],
    )


def tag_to_dict(tag: Tag) -> Dict[str, Any]:
    """Convert Tag domain model to database dict."""
    return _without_missing_id(tag.model_dump())


def row_to_post(row: Dict[str, Any], tags: Sequence[Tag] = ()) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict
        tags: The post's tags (fetched separately from post_tags)

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(row["id"]),
        title=row["title"],
        kind=PostKind(row["kind"]),
        author_id=UserId(row["author_id"]),
        url=row.get("url"),
        body_markdown=row["body_markdown"],
        body_html=row["body_html"],
        tags=list(tags),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Tags are stored in post_tags and are left out.
    """
    return _without_missing_id(post.model_dump(exclude={"tags"}))


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(row["id"]),
        post_id=PostId(row["post_id"]),
        author_id=UserId(row["author_id"]),
        body=row["body"],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return _without_missing_id(comment.model_dump())


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(row["id"]),
        post_id=PostId(row["post_id"]),
        user_id=UserId(row["user_id"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return _without_missing_id(vote.model_dump())


def row_to_digest_history(row: Dict[str, Any]) -> DigestHistory:
    """Convert database row to DigestHistory domain model."""
    return DigestHistory(
        id=DigestHistoryId(row["id"]),
        frequency=DigestFrequency(row["frequency"]),
        created_at=row["created_at"],
    )


def digest_history_to_dict(history: DigestHistory) -> Dict[str, Any]:
    """Convert DigestHistory domain model to database dict."""
    return _without_missing_id(history.model_dump())
