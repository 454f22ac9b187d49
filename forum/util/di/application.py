"""Application layer DI providers."""

from dishka import Scope, provide

from forum.application.usecase.comment import CreateCommentUseCase
from forum.application.usecase.digest import SendDigestUseCase
from forum.application.usecase.post import (
    CreatePostUseCase,
    SearchPostsUseCase,
    UpdatePostUseCase,
)
from forum.application.usecase.vote import AddVoteUseCase
from forum.domain.service import (
    CommentService,
    DigestService,
    PostService,
    SearchService,
    TagService,
    TweetService,
    UserService,
    VoteService,
)
from forum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self,
        post_service: PostService,
        tag_service: TagService,
        user_service: UserService,
        tweet_service: TweetService,
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(
            post_service=post_service,
            tag_service=tag_service,
            user_service=user_service,
            tweet_service=tweet_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_post_use_case(
        self, post_service: PostService, tag_service: TagService
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(post_service=post_service, tag_service=tag_service)

    @provide(scope=Scope.REQUEST)
    def get_search_posts_use_case(
        self, search_service: SearchService
    ) -> SearchPostsUseCase:
        """Provide search posts use case."""
        return SearchPostsUseCase(search_service=search_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            post_service=post_service,
            user_service=user_service,
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_add_vote_use_case(
        self, vote_service: VoteService, user_service: UserService
    ) -> AddVoteUseCase:
        """Provide add vote use case."""
        return AddVoteUseCase(vote_service=vote_service, user_service=user_service)

    # Digest use cases
    @provide(scope=Scope.REQUEST)
    def get_send_digest_use_case(
        self, digest_service: DigestService, user_service: UserService
    ) -> SendDigestUseCase:
        """Provide send digest use case."""
        return SendDigestUseCase(
            digest_service=digest_service, user_service=user_service
        )
