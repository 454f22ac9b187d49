"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .digest import InMemoryDigestHistoryRepository
from .post import InMemoryPostRepository
from .tag import InMemoryTagRepository
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryDigestHistoryRepository",
    "InMemoryPostRepository",
    "InMemoryTagRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
