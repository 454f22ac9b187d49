"""Unit tests for CreateCommentUseCase."""

import pytest

from forum.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from forum.domain.error import NotFoundError, ValidationError
from forum.domain.repository import CommentRepository, PostRepository, UserRepository
from tests.factories import make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_comment_success(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        user_repo = await unit_env.get(UserRepository)
        comment_repo = await unit_env.get(CommentRepository)
        author = await make_user(user_repo)
        post = await make_post(post_repo, author_id=author.id)

        response = await use_case.execute(
            CreateCommentRequest(post_id=post.id, author_id=author.id, body="Nice!")
        )

        assert response.post_id == post.id
        assert response.body == "Nice!"
        comments = await comment_repo.find_by_post(post.id)
        assert [c.id for c in comments] == [response.comment_id]

    @pytest.mark.asyncio
    async def test_missing_post_raises_not_found(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        user_repo = await unit_env.get(UserRepository)
        author = await make_user(user_repo)

        with pytest.raises(NotFoundError, match="Post"):
            await use_case.execute(
                CreateCommentRequest(post_id=77, author_id=author.id, body="Hello")
            )

    @pytest.mark.asyncio
    async def test_unknown_author_raises_not_found(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await make_post(post_repo)

        with pytest.raises(NotFoundError, match="User"):
            await use_case.execute(
                CreateCommentRequest(post_id=post.id, author_id=404, body="Hello")
            )

    @pytest.mark.asyncio
    async def test_empty_body_raises_validation_error(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        user_repo = await unit_env.get(UserRepository)
        author = await make_user(user_repo)
        post = await make_post(post_repo, author_id=author.id)

        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateCommentRequest(post_id=post.id, author_id=author.id, body="")
            )
