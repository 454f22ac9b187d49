"""Tweet domain service.

New posts are announced on Twitter with their title and a short link.
"""

from abc import ABC, abstractmethod

import logfire

from forum.config import TwitterSettings
from forum.domain.model.post import Post, short_link

from .base import Service

DEFAULT_SHORT_LINK_BASE = "http://rbga.me/"
DEFAULT_MAX_LENGTH = 140


def format_tweet_content(
    post: Post,
    short_link_base: str = DEFAULT_SHORT_LINK_BASE,
    max_length: int = DEFAULT_MAX_LENGTH,
) -> str:
    """Build the tweet announcing a post.

    The tweet is ``"<title> <short link>"``. When that does not fit in
    ``max_length`` characters the title is cut so the tweet is exactly
    ``max_length`` long. The cut is a hard one: no ellipsis, no word
    boundaries.

    Args:
        post: Persisted post (its ID goes into the link)
        short_link_base: Prefix of the short link
        max_length: Maximum tweet length

    Returns:
        Tweet text

    Raises:
        ValueError: If the post has not been saved yet
    """
    if post.id is None:
        raise ValueError("Cannot build a tweet for an unsaved post")

    link = short_link(short_link_base, post.id)
    title_budget = max(max_length - 1 - len(link), 0)
    return f"{post.title[:title_budget]} {link}"


class SocialPoster(ABC):
    """Outbound social network collaborator."""

    @abstractmethod
    async def post(self, content: str, post: Post) -> None:
        """Publish ``content`` on behalf of ``post``.

        Raises:
            ProviderError: If publishing fails
        """
        pass


class TweetService(Service):
    """Domain service announcing posts on Twitter."""

    def __init__(
        self, social_poster: SocialPoster, twitter_settings: TwitterSettings
    ) -> None:
        """Initialize tweet service.

        Args:
            social_poster: Social network client
            twitter_settings: Short link and length settings
        """
        self.social_poster = social_poster
        self.twitter_settings = twitter_settings

    def tweet_content(self, post: Post) -> str:
        """Tweet text for a post, using the configured link base and limit."""
        return format_tweet_content(
            post,
            short_link_base=self.twitter_settings.short_link_base,
            max_length=self.twitter_settings.max_length,
        )

    async def notify(self, post: Post) -> str:
        """Announce a newly created post.

        Called exactly once per created post. Failures of the social network
        are not retried and propagate to the caller.

        Args:
            post: Persisted post

        Returns:
            The tweet text that was published
        """
        with logfire.span("tweet_service.notify", post_id=post.id):
            content = self.tweet_content(post)
            await self.social_poster.post(content, post)
            logfire.info("Post announced", post_id=post.id, length=len(content))
            return content
