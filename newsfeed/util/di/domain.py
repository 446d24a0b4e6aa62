"""Domain layer DI providers."""

from dishka import Scope, provide

from newsfeed.config import AuthSettings, FeedSettings
from newsfeed.domain.repository import (
    CommentRepository,
    FollowRepository,
    LedgerLock,
    NewsRepository,
    SaveRepository,
    UserRepository,
    VoteRepository,
)
from newsfeed.domain.service import (
    CommentService,
    EngagementService,
    FeedReader,
    FeedService,
    FollowService,
    JWTService,
    NewsService,
    ReplyCounterService,
    UserService,
)
from newsfeed.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_engagement_service(
        self,
        news_repository: NewsRepository,
        comment_repository: CommentRepository,
        vote_repository: VoteRepository,
        save_repository: SaveRepository,
        ledger_lock: LedgerLock,
    ) -> EngagementService:
        """Provide engagement ledger service."""
        return EngagementService(
            news_repository=news_repository,
            comment_repository=comment_repository,
            vote_repository=vote_repository,
            save_repository=save_repository,
            ledger_lock=ledger_lock,
        )

    @provide
    def get_reply_counter_service(
        self,
        news_repository: NewsRepository,
        comment_repository: CommentRepository,
        engagement_service: EngagementService,
        feed_settings: FeedSettings,
    ) -> ReplyCounterService:
        """Provide reply counter propagation service."""
        return ReplyCounterService(
            news_repository=news_repository,
            comment_repository=comment_repository,
            engagement_service=engagement_service,
            feed_settings=feed_settings,
        )

    @provide
    def get_feed_reader(
        self,
        news_repository: NewsRepository,
        comment_repository: CommentRepository,
        feed_settings: FeedSettings,
    ) -> FeedReader:
        """Provide ranked feed reader."""
        return FeedReader(
            news_repository=news_repository,
            comment_repository=comment_repository,
            feed_settings=feed_settings,
        )

    @provide
    def get_feed_service(
        self,
        feed_reader: FeedReader,
        news_repository: NewsRepository,
        comment_repository: CommentRepository,
        vote_repository: VoteRepository,
        save_repository: SaveRepository,
        follow_repository: FollowRepository,
        user_repository: UserRepository,
    ) -> FeedService:
        """Provide feed façade service."""
        return FeedService(
            feed_reader=feed_reader,
            news_repository=news_repository,
            comment_repository=comment_repository,
            vote_repository=vote_repository,
            save_repository=save_repository,
            follow_repository=follow_repository,
            user_repository=user_repository,
        )

    @provide
    def get_news_service(
        self,
        news_repository: NewsRepository,
        user_repository: UserRepository,
        user_service: UserService,
        feed_settings: FeedSettings,
    ) -> NewsService:
        """Provide news domain service."""
        return NewsService(
            news_repository=news_repository,
            user_repository=user_repository,
            user_service=user_service,
            feed_settings=feed_settings,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        news_repository: NewsRepository,
        reply_counter_service: ReplyCounterService,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            news_repository=news_repository,
            reply_counter_service=reply_counter_service,
        )

    @provide
    def get_follow_service(
        self,
        follow_repository: FollowRepository,
        user_repository: UserRepository,
        feed_settings: FeedSettings,
    ) -> FollowService:
        """Provide follow domain service."""
        return FollowService(
            follow_repository=follow_repository,
            user_repository=user_repository,
            feed_settings=feed_settings,
        )
