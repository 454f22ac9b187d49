"""PostgreSQL repository implementations."""

from forum.persistence.repository.comment import PostgresCommentRepository
from forum.persistence.repository.digest import PostgresDigestHistoryRepository
from forum.persistence.repository.post import PostgresPostRepository
from forum.persistence.repository.tag import PostgresTagRepository
from forum.persistence.repository.user import PostgresUserRepository
from forum.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
    "PostgresTagRepository",
    "PostgresCommentRepository",
    "PostgresVoteRepository",
    "PostgresDigestHistoryRepository",
]
