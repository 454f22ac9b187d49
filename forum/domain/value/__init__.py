"""Domain value objects for the forum."""

from forum.domain.value.identifiers import (
    CommentId,
    DigestHistoryId,
    PostId,
    TagId,
    UserId,
    VoteId,
)
from forum.domain.value.types import DigestFrequency, Handle, PostKind, TagTitle

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "TagId",
    "CommentId",
    "VoteId",
    "DigestHistoryId",
    # Types
    "TagTitle",
    "Handle",
    "PostKind",
    "DigestFrequency",
]
