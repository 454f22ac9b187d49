"""Add vote use case."""

from pydantic import BaseModel

from forum.domain.service import UserService, VoteService
from forum.domain.value import PostId, UserId


class AddVoteRequest(BaseModel):
    """Add vote request."""

    post_id: int
    user_id: int  # Voting user


class AddVoteResponse(BaseModel):
    """Add vote response."""

    post_id: int
    has_voted: bool
    vote_count: int


class AddVoteUseCase:
    """Use case for voting on a post."""

    def __init__(self, vote_service: VoteService, user_service: UserService) -> None:
        """Initialize add vote use case.

        Args:
            vote_service: Vote domain service
            user_service: User domain service
        """
        self.vote_service = vote_service
        self.user_service = user_service

    async def execute(self, request: AddVoteRequest) -> AddVoteResponse:
        """Execute add vote flow.

        Voting twice on the same post is accepted and changes nothing.

        Args:
            request: Add vote request

        Returns:
            The voter's state and the post's vote count

        Raises:
            NotFoundError: If the user or the post does not exist
        """
        post_id = PostId(request.post_id)
        user_id = UserId(request.user_id)

        await self.user_service.get_by_id(user_id)
        await self.vote_service.add_vote(post_id, user_id)

        return AddVoteResponse(
            post_id=post_id,
            has_voted=await self.vote_service.has_voted(post_id, user_id),
            vote_count=await self.vote_service.count_votes(post_id),
        )
