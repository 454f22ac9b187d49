"""Digest history repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from forum.domain.model.digest import DigestHistory
from forum.domain.value import DigestFrequency


class DigestHistoryRepository(ABC):
    """Repository for digest checkpoints."""

    @abstractmethod
    async def find_latest(self, frequency: DigestFrequency) -> Optional[DigestHistory]:
        """Find the most recent checkpoint for a frequency.

        Args:
            frequency: Digest frequency

        Returns:
            Latest checkpoint, None if no digest was ever sent
        """
        pass

    @abstractmethod
    async def save(self, history: DigestHistory) -> DigestHistory:
        """Record a checkpoint.

        Args:
            history: Checkpoint to insert

        Returns:
            Saved checkpoint with its assigned ID
        """
        pass
