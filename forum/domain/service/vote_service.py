"""Vote domain service."""

import logfire
from sqlalchemy.exc import IntegrityError

from forum.domain.model.vote import Vote
from forum.domain.repository import VoteRepository
from forum.domain.value import PostId, UserId

from .base import Service
from .post_service import PostService


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        post_service: PostService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            post_service: Post domain service
        """
        self.vote_repository = vote_repository
        self.post_service = post_service

    async def add_vote(self, post_id: PostId, user_id: UserId) -> None:
        """Record a user's vote on a post.

        Voting twice is a no-op: the unique constraint on (post, user)
        rejects the second insert and we treat that as success.

        Args:
            post_id: Post ID
            user_id: User ID

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("vote_service.add_vote", post_id=post_id, user_id=user_id):
            await self.post_service.get_post(post_id)

            try:
                vote = await self.vote_repository.save(
                    Vote(post_id=post_id, user_id=user_id)
                )
            except IntegrityError:
                logfire.info("Duplicate vote ignored", post_id=post_id, user_id=user_id)
                return

            logfire.info("Vote recorded", vote_id=vote.id, post_id=post_id)

    async def has_voted(self, post_id: PostId, user_id: UserId) -> bool:
        """Whether the user has voted on the post.

        Args:
            post_id: Post ID
            user_id: User ID

        Returns:
            True if a vote exists
        """
        vote = await self.vote_repository.find_by_post_and_user(post_id, user_id)
        return vote is not None

    async def count_votes(self, post_id: PostId) -> int:
        """Number of votes on a post."""
        return await self.vote_repository.count_by_post(post_id)
