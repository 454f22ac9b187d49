"""Domain model entities for the forum."""

from forum.domain.model.comment import Comment
from forum.domain.model.digest import Digest, DigestHistory
from forum.domain.model.post import Post
from forum.domain.model.tag import Tag
from forum.domain.model.user import User
from forum.domain.model.vote import Vote

__all__ = [
    "User",
    "Post",
    "Comment",
    "Vote",
    "Tag",
    "DigestHistory",
    "Digest",
]
