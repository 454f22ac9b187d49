"""Integration tests for PostgresPostRepository, votes and search.

Requires a migrated PostgreSQL database (``python scripts/run_migrations.py``).
"""

from uuid import uuid4

import pytest

from forum.domain.repository import (
    CommentRepository,
    PostRepository,
    UserRepository,
    VoteRepository,
)
from forum.domain.service import PostService, SearchService, TagService, VoteService
from forum.domain.value import PostKind
from tests.factories import make_comment, make_post, make_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


def _marker() -> str:
    return uuid4().hex[:12]


class TestPostRepositoryIntegration:
    """Integration tests for post persistence."""

    @pytest.mark.asyncio
    async def test_save_assigns_id_and_round_trips_kind(self, integration_env):
        post_repo = await integration_env.get(PostRepository)
        user_repo = await integration_env.get(UserRepository)
        author = await make_user(user_repo, handle=f"author-{_marker()}")

        saved = await make_post(
            post_repo,
            author_id=author.id,
            kind=PostKind.EXTERNAL,
            url="https://example.com",
        )

        loaded = await post_repo.find_by_id(saved.id)
        assert loaded.kind == PostKind.EXTERNAL
        assert loaded.url == "https://example.com"

    @pytest.mark.asyncio
    async def test_replace_tags_overwrites(self, integration_env):
        post_repo = await integration_env.get(PostRepository)
        user_repo = await integration_env.get(UserRepository)
        post_service = await integration_env.get(PostService)
        tag_service = await integration_env.get(TagService)
        author = await make_user(user_repo, handle=f"author-{_marker()}")
        post = await make_post(post_repo, author_id=author.id)
        marker = _marker()

        await post_service.set_tags(post.id, await tag_service.normalize(f"a{marker}"))
        await post_service.set_tags(
            post.id, await tag_service.normalize(f"b{marker}, c{marker}")
        )

        loaded = await post_repo.find_by_id(post.id)
        assert set(loaded.tag_titles) == {f"b{marker}", f"c{marker}"}


class TestVoteRepositoryIntegration:
    @pytest.mark.asyncio
    async def test_duplicate_vote_is_ignored(self, integration_env):
        post_repo = await integration_env.get(PostRepository)
        user_repo = await integration_env.get(UserRepository)
        vote_repo = await integration_env.get(VoteRepository)
        vote_service = await integration_env.get(VoteService)
        voter = await make_user(user_repo, handle=f"voter-{_marker()}")
        post = await make_post(post_repo, author_id=voter.id)

        await vote_service.add_vote(post.id, voter.id)
        await vote_service.add_vote(post.id, voter.id)

        assert await vote_repo.count_by_post(post.id) == 1
        assert await vote_service.has_voted(post.id, voter.id)


class TestSearchIntegration:
    @pytest.mark.asyncio
    async def test_each_source_matches(self, integration_env):
        post_repo = await integration_env.get(PostRepository)
        user_repo = await integration_env.get(UserRepository)
        comment_repo = await integration_env.get(CommentRepository)
        post_service = await integration_env.get(PostService)
        tag_service = await integration_env.get(TagService)
        search_service = await integration_env.get(SearchService)
        author = await make_user(user_repo, handle=f"author-{_marker()}")
        marker = _marker()

        by_title = await make_post(post_repo, title=f"Title {marker}", author_id=author.id)
        by_body = await make_post(
            post_repo, body_markdown=f"body {marker.upper()}", author_id=author.id
        )
        by_tag = await make_post(post_repo, author_id=author.id)
        await post_service.set_tags(by_tag.id, await tag_service.normalize(f"t{marker}"))
        by_comment = await make_post(post_repo, author_id=author.id)
        await make_comment(
            comment_repo, by_comment.id, f"comment {marker}", author_id=author.id
        )

        results = await search_service.search(marker)

        assert [p.id for p in results] == sorted(
            [by_title.id, by_body.id, by_tag.id, by_comment.id]
        )

    @pytest.mark.asyncio
    async def test_wildcards_are_literal(self, integration_env):
        post_repo = await integration_env.get(PostRepository)
        user_repo = await integration_env.get(UserRepository)
        search_service = await integration_env.get(SearchService)
        author = await make_user(user_repo, handle=f"author-{_marker()}")
        marker = _marker()
        literal = await make_post(post_repo, title=f"{marker} 100% sure", author_id=author.id)
        await make_post(post_repo, title=f"{marker} 100 x sure", author_id=author.id)

        results = await search_service.search(f"{marker} 100%")

        assert [p.id for p in results] == [literal.id]
