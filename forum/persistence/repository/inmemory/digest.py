"""In-memory digest history repository for testing."""

from itertools import count
from typing import Optional

from forum.domain.model.digest import DigestHistory
from forum.domain.repository.digest import DigestHistoryRepository
from forum.domain.value import DigestFrequency, DigestHistoryId


class InMemoryDigestHistoryRepository(DigestHistoryRepository):
    """In-memory implementation of DigestHistoryRepository for testing."""

    def __init__(self) -> None:
        self._histories: list[DigestHistory] = []
        self._ids = count(1)

    async def find_latest(self, frequency: DigestFrequency) -> Optional[DigestHistory]:
        """Most recent checkpoint for ``frequency``."""
        matching = [h for h in self._histories if h.frequency == frequency]
        if not matching:
            return None
        return max(matching, key=lambda h: (h.created_at, h.id))

    async def save(self, history: DigestHistory) -> DigestHistory:
        """Insert a checkpoint."""
        saved = history.model_copy(update={"id": DigestHistoryId(next(self._ids))})
        self._histories.append(saved)
        return saved
