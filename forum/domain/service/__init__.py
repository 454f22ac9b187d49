"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .digest_service import DigestService, Mailer
from .post_service import PostService
from .search_service import SearchService
from .tag_service import TagService, parse_tag_titles
from .tweet_service import SocialPoster, TweetService, format_tweet_content
from .user_service import UserService
from .vote_service import VoteService

__all__ = [
    "CommentService",
    "DigestService",
    "Mailer",
    "PostService",
    "SearchService",
    "Service",
    "SocialPoster",
    "TagService",
    "TweetService",
    "UserService",
    "VoteService",
    "format_tweet_content",
    "parse_tag_titles",
]
