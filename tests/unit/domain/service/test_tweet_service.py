"""Unit tests for tweet formatting and TweetService."""

import pytest

from forum.adapter.error import TwitterPostError
from forum.adapter.twitter.client import MockTwitterPoster
from forum.config import TwitterSettings
from forum.domain.model import Post
from forum.domain.service import SocialPoster, TweetService, format_tweet_content
from forum.domain.value import PostId, UserId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


def _post(post_id: int | None, title: str) -> Post:
    return Post(
        id=PostId(post_id) if post_id is not None else None,
        title=title,
        author_id=UserId(1),
    )


class TestFormatTweetContent:
    """Tests for format_tweet_content."""

    def test_short_title_is_kept_whole(self):
        content = format_tweet_content(_post(123, "This is a test discussion"))

        assert content.startswith("This is a test discussion")
        assert content.endswith("http://rbga.me/123")
        assert content == "This is a test discussion http://rbga.me/123"

    def test_long_title_is_cut_to_exact_limit(self):
        content = format_tweet_content(_post(123, "a" * 140))

        assert content == "a" * 121 + " http://rbga.me/123"
        assert len(content) == 140

    def test_longer_id_leaves_less_room_for_title(self):
        content = format_tweet_content(_post(1234567890, "a" * 140))

        assert content == "a" * 114 + " http://rbga.me/1234567890"
        assert len(content) == 140

    def test_title_that_fits_exactly_is_not_cut(self):
        content = format_tweet_content(_post(123, "b" * 121))

        assert content == "b" * 121 + " http://rbga.me/123"

    def test_cut_ignores_word_boundaries(self):
        title = "word " * 40
        content = format_tweet_content(_post(5, title))

        assert content == title[:123] + " http://rbga.me/5"
        assert "…" not in content

    def test_custom_base_and_limit(self):
        content = format_tweet_content(
            _post(9, "Hello world"),
            short_link_base="https://s.example/",
            max_length=20,
        )

        # The link alone fills the limit, so nothing of the title is left
        assert content == " https://s.example/9"
        assert len(content) == 20

    def test_unsaved_post_is_rejected(self):
        with pytest.raises(ValueError, match="unsaved"):
            format_tweet_content(_post(None, "Draft"))


class TestTweetService:
    """Tests for TweetService.notify."""

    @pytest.mark.asyncio
    async def test_notify_posts_once(self, unit_env):
        tweet_service = await unit_env.get(TweetService)
        poster = await unit_env.get(SocialPoster)
        post = _post(123, "This is a test discussion")

        content = await tweet_service.notify(post)

        assert poster.posted == [(content, post)]

    @pytest.mark.asyncio
    async def test_notify_uses_configured_settings(self):
        poster = MockTwitterPoster()
        settings = TwitterSettings(short_link_base="https://s.example/", max_length=30)
        tweet_service = TweetService(social_poster=poster, twitter_settings=settings)

        content = await tweet_service.notify(_post(42, "x" * 50))

        assert content == "x" * 9 + " https://s.example/42"
        assert len(content) == 30

    @pytest.mark.asyncio
    async def test_poster_failure_propagates(self, twitter_settings):
        tweet_service = TweetService(
            social_poster=MockTwitterPoster(fail=True),
            twitter_settings=twitter_settings,
        )

        with pytest.raises(TwitterPostError):
            await tweet_service.notify(_post(1, "Hello"))
