"""Unit tests for the Twitter poster."""

import json

import httpx
import pytest

from forum.adapter.error import ProviderError, TwitterPostError
from forum.adapter.twitter.client import MockTwitterPoster, RealTwitterPoster
from forum.domain.model import Post
from forum.domain.value import PostId, UserId

POST = Post(id=PostId(123), title="Hello", author_id=UserId(1))


class TestRealTwitterPoster:
    """Tests for RealTwitterPoster against a mocked transport."""

    @pytest.mark.asyncio
    async def test_posts_text_with_bearer_token(self):
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(201, json={"data": {"id": "1", "text": "x"}})

        poster = RealTwitterPoster(
            bearer_token="secret",
            api_url="https://api.twitter.test/2/tweets",
            transport=httpx.MockTransport(handler),
        )

        await poster.post("Hello http://rbga.me/123", POST)

        assert len(requests) == 1
        request = requests[0]
        assert request.method == "POST"
        assert str(request.url) == "https://api.twitter.test/2/tweets"
        assert request.headers["Authorization"] == "Bearer secret"
        assert json.loads(request.content) == {"text": "Hello http://rbga.me/123"}

    @pytest.mark.asyncio
    async def test_rejected_tweet_raises(self):
        poster = RealTwitterPoster(
            bearer_token="secret",
            transport=httpx.MockTransport(
                lambda request: httpx.Response(403, json={"detail": "Forbidden"})
            ),
        )

        with pytest.raises(TwitterPostError, match="403"):
            await poster.post("Hello", POST)

    @pytest.mark.asyncio
    async def test_network_error_raises_provider_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        poster = RealTwitterPoster(
            bearer_token="secret", transport=httpx.MockTransport(handler)
        )

        with pytest.raises(ProviderError):
            await poster.post("Hello", POST)


class TestMockTwitterPoster:
    @pytest.mark.asyncio
    async def test_records_posts(self):
        poster = MockTwitterPoster()

        await poster.post("Hello", POST)

        assert poster.posted == [("Hello", POST)]

    @pytest.mark.asyncio
    async def test_can_fail(self):
        with pytest.raises(TwitterPostError):
            await MockTwitterPoster(fail=True).post("Hello", POST)
