"""Unit tests for SearchPostsUseCase."""

import pytest

from forum.application.usecase.post import SearchPostsRequest, SearchPostsUseCase
from forum.domain.repository import PostRepository
from tests.factories import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestSearchPostsUseCase:
    """Tests for SearchPostsUseCase."""

    @pytest.mark.asyncio
    async def test_returns_matches_in_id_order(self, unit_env):
        use_case = await unit_env.get(SearchPostsUseCase)
        post_repo = await unit_env.get(PostRepository)
        first = await make_post(post_repo, title="Rails routing")
        await make_post(post_repo, title="Ruby is good")
        third = await make_post(post_repo, title="More rails")

        response = await use_case.execute(SearchPostsRequest(query="RAILS"))

        assert [p.post_id for p in response.posts] == [first.id, third.id]
        assert response.total == 2

    @pytest.mark.asyncio
    async def test_blank_query_returns_no_posts(self, unit_env):
        use_case = await unit_env.get(SearchPostsUseCase)
        post_repo = await unit_env.get(PostRepository)
        await make_post(post_repo, title="Rails routing")

        response = await use_case.execute(SearchPostsRequest(query=" "))

        assert response.posts == []
        assert response.total == 0
