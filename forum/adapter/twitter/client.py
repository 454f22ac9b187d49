"""Twitter client announcing new posts.

Uses the v2 ``POST /2/tweets`` endpoint with an app bearer token.
"""

from typing import Optional

import httpx
import logfire

from forum.adapter.error import TwitterPostError
from forum.domain.model.post import Post
from forum.domain.service.tweet_service import SocialPoster


class TwitterPoster(SocialPoster):
    """Base class for Twitter posters.

    Provides type distinction for dependency injection.
    """

    pass


class RealTwitterPoster(TwitterPoster):
    """Posts tweets through the Twitter API."""

    def __init__(
        self,
        bearer_token: str,
        api_url: str = "https://api.twitter.com/2/tweets",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize Twitter poster.

        Args:
            bearer_token: Token of the announcing account
            api_url: Tweet creation endpoint
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.bearer_token = bearer_token
        self.api_url = api_url
        self.timeout = timeout
        self.transport = transport

    async def post(self, content: str, post: Post) -> None:
        """Publish a tweet.

        Args:
            content: Tweet text
            post: The post being announced

        Raises:
            TwitterPostError: If the API rejects the tweet or is unreachable
        """
        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(
                    self.api_url,
                    json={"text": content},
                    headers={"Authorization": f"Bearer {self.bearer_token}"},
                    timeout=self.timeout,
                )

                if not response.is_success:
                    logfire.error(
                        "Tweet rejected",
                        post_id=post.id,
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise TwitterPostError(
                        f"Tweet for post {post.id} failed: {response.status_code}"
                    )

        except httpx.HTTPError as e:
            logfire.error("Twitter HTTP error", post_id=post.id, error=str(e))
            raise TwitterPostError(f"HTTP error posting tweet: {e}") from e

        logfire.info("Tweet published", post_id=post.id)


class MockTwitterPoster(TwitterPoster):
    """Mock Twitter poster for testing.

    Records published tweets instead of calling the API.
    """

    def __init__(self, fail: bool = False) -> None:
        """Initialize mock poster.

        Args:
            fail: Raise TwitterPostError on every post
        """
        self.fail = fail
        self.posted: list[tuple[str, Post]] = []

    async def post(self, content: str, post: Post) -> None:
        """Record the tweet, or fail if configured to."""
        if self.fail:
            raise TwitterPostError("Mock Twitter failure")
        self.posted.append((content, post))
