"""Domain layer DI providers."""

from dishka import Scope, provide

from forum.config import DigestSettings, TwitterSettings
from forum.domain.repository import (
    CommentRepository,
    DigestHistoryRepository,
    PostRepository,
    TagRepository,
    UserRepository,
    VoteRepository,
)
from forum.domain.service import (
    CommentService,
    DigestService,
    Mailer,
    PostService,
    SearchService,
    SocialPoster,
    TagService,
    TweetService,
    UserService,
    VoteService,
)
from forum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_tag_service(self, tag_repository: TagRepository) -> TagService:
        """Provide tag domain service."""
        return TagService(tag_repository=tag_repository)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_vote_service(
        self, vote_repository: VoteRepository, post_service: PostService
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(vote_repository=vote_repository, post_service=post_service)

    @provide
    def get_search_service(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> SearchService:
        """Provide search domain service."""
        return SearchService(
            post_repository=post_repository, comment_repository=comment_repository
        )

    @provide
    def get_tweet_service(
        self, social_poster: SocialPoster, twitter_settings: TwitterSettings
    ) -> TweetService:
        """Provide tweet domain service."""
        return TweetService(
            social_poster=social_poster, twitter_settings=twitter_settings
        )

    @provide
    def get_digest_service(
        self,
        post_repository: PostRepository,
        digest_history_repository: DigestHistoryRepository,
        mailer: Mailer,
        digest_settings: DigestSettings,
        twitter_settings: TwitterSettings,
    ) -> DigestService:
        """Provide digest domain service."""
        return DigestService(
            post_repository=post_repository,
            digest_history_repository=digest_history_repository,
            mailer=mailer,
            digest_settings=digest_settings,
            twitter_settings=twitter_settings,
        )
