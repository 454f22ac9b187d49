"""Unit tests for AddVoteUseCase."""

import pytest

from forum.application.usecase.vote import AddVoteRequest, AddVoteUseCase
from forum.domain.error import NotFoundError
from forum.domain.repository import PostRepository, UserRepository
from tests.factories import make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestAddVoteUseCase:
    """Tests for AddVoteUseCase."""

    @pytest.mark.asyncio
    async def test_vote_twice_counts_once(self, unit_env):
        use_case = await unit_env.get(AddVoteUseCase)
        post_repo = await unit_env.get(PostRepository)
        user_repo = await unit_env.get(UserRepository)
        voter = await make_user(user_repo)
        post = await make_post(post_repo, author_id=voter.id)
        request = AddVoteRequest(post_id=post.id, user_id=voter.id)

        first = await use_case.execute(request)
        second = await use_case.execute(request)

        assert first.has_voted is True
        assert first.vote_count == 1
        assert second.vote_count == 1

    @pytest.mark.asyncio
    async def test_missing_post_raises_not_found(self, unit_env):
        use_case = await unit_env.get(AddVoteUseCase)
        user_repo = await unit_env.get(UserRepository)
        voter = await make_user(user_repo)

        with pytest.raises(NotFoundError, match="Post"):
            await use_case.execute(AddVoteRequest(post_id=1, user_id=voter.id))

    @pytest.mark.asyncio
    async def test_unknown_voter_raises_not_found(self, unit_env):
        use_case = await unit_env.get(AddVoteUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await make_post(post_repo)

        with pytest.raises(NotFoundError, match="User"):
            await use_case.execute(AddVoteRequest(post_id=post.id, user_id=5))
