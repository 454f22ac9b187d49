"""Unit tests for PostService."""

import pytest

from forum.domain.error import NotFoundError
from forum.domain.model import Post
from forum.domain.repository import PostRepository, TagRepository
from forum.domain.service import PostService, TagService
from forum.domain.value import PostId, PostKind, UserId
from tests.factories import make_post
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestSetTags:
    """Tests for replacing a post's tags."""

    @pytest.mark.asyncio
    async def test_second_assignment_replaces_first(self, unit_env):
        post_service = await unit_env.get(PostService)
        tag_service = await unit_env.get(TagService)
        post_repo = await unit_env.get(PostRepository)
        post = await make_post(post_repo)

        await post_service.set_tags(post.id, await tag_service.normalize("ruby"))
        updated = await post_service.set_tags(
            post.id, await tag_service.normalize("rails, css")
        )

        assert set(updated.tag_titles) == {"rails", "css"}
        reloaded = await post_repo.find_by_id(post.id)
        assert set(reloaded.tag_titles) == {"rails", "css"}

    @pytest.mark.asyncio
    async def test_removed_tags_are_kept_in_store(self, unit_env):
        post_service = await unit_env.get(PostService)
        tag_service = await unit_env.get(TagService)
        post_repo = await unit_env.get(PostRepository)
        tag_repo = await unit_env.get(TagRepository)
        post = await make_post(post_repo)

        await post_service.set_tags(post.id, await tag_service.normalize("ruby"))
        await post_service.set_tags(post.id, [])

        assert (await post_repo.find_by_id(post.id)).tags == []
        assert [t.title.root for t in await tag_repo.find_all()] == ["ruby"]

    @pytest.mark.asyncio
    async def test_duplicate_tags_are_collapsed(self, unit_env):
        post_service = await unit_env.get(PostService)
        tag_service = await unit_env.get(TagService)
        post_repo = await unit_env.get(PostRepository)
        post = await make_post(post_repo)
        ruby = (await tag_service.normalize("ruby"))[0]

        updated = await post_service.set_tags(post.id, [ruby, ruby])

        assert updated.tag_titles == ["ruby"]

    @pytest.mark.asyncio
    async def test_missing_post_raises_not_found(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.set_tags(PostId(999), [])


class TestSavePost:
    """Tests for saving and editing posts."""

    @pytest.mark.asyncio
    async def test_save_assigns_id_and_renders_body(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        draft = await make_post(post_repo)

        saved = await post_service.save_post(
            Post(title="Hello", author_id=UserId(1), body_markdown="**bold**")
        )

        assert saved.id is not None and saved.id != draft.id
        assert "<strong>bold</strong>" in saved.body_html

    @pytest.mark.asyncio
    async def test_update_content_keeps_tags(self, unit_env):
        post_service = await unit_env.get(PostService)
        tag_service = await unit_env.get(TagService)
        post_repo = await unit_env.get(PostRepository)
        post = await make_post(post_repo, title="Old title")
        await post_service.set_tags(post.id, await tag_service.normalize("ruby"))

        updated = await post_service.update_content(
            post.id, title="New title", body_markdown="# Heading"
        )

        assert updated.title == "New title"
        assert "<h1>Heading</h1>" in updated.body_html
        assert updated.tag_titles == ["ruby"]

    @pytest.mark.asyncio
    async def test_update_content_rejects_blank_title(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await make_post(post_repo)

        with pytest.raises(ValueError):
            await post_service.update_content(post.id, title="   ")

    @pytest.mark.asyncio
    async def test_get_post_missing_raises_not_found(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError, match="Post not found: 42"):
            await post_service.get_post(PostId(42))


class TestListPosts:
    """Tests for listing posts by kind."""

    @pytest.mark.asyncio
    async def test_filters_by_kind(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        internal = await make_post(post_repo, title="Discussion")
        external = await make_post(
            post_repo,
            title="Link",
            kind=PostKind.EXTERNAL,
            url="https://example.com",
        )

        assert [p.id for p in await post_service.list_posts(PostKind.INTERNAL)] == [
            internal.id
        ]
        assert [p.id for p in await post_service.list_posts(PostKind.EXTERNAL)] == [
            external.id
        ]
        assert len(await post_service.list_posts()) == 2
