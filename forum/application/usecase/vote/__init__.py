"""Vote use cases."""

from .add_vote import AddVoteRequest, AddVoteResponse, AddVoteUseCase

__all__ = ["AddVoteRequest", "AddVoteResponse", "AddVoteUseCase"]
