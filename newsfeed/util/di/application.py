"""Application layer DI providers."""

from dishka import Scope, provide

from newsfeed.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentUseCase,
    UpdateCommentUseCase,
)
from newsfeed.application.usecase.engagement import SetSaveUseCase, SetVoteUseCase
from newsfeed.application.usecase.feed import (
    ListCommentsUseCase,
    ListEngagedUseCase,
    ListNewsUseCase,
)
from newsfeed.application.usecase.follow import (
    FollowAuthorUseCase,
    GetAuthorUseCase,
    ListFollowingUseCase,
    UnfollowAuthorUseCase,
)
from newsfeed.application.usecase.news import (
    CreateNewsUseCase,
    DeleteNewsUseCase,
    GetNewsUseCase,
    IngestNewsUseCase,
    UpdateNewsUseCase,
)
from newsfeed.config import FeedSettings
from newsfeed.domain.service import (
    CommentService,
    EngagementService,
    FeedService,
    FollowService,
    NewsService,
    UserService,
)
from newsfeed.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Feed use cases
    @provide(scope=Scope.REQUEST)
    def get_list_news_use_case(
        self,
        feed_service: FeedService,
        engagement_service: EngagementService,
        feed_settings: FeedSettings,
    ) -> ListNewsUseCase:
        """Provide list news use case."""
        return ListNewsUseCase(
            feed_service=feed_service,
            engagement_service=engagement_service,
            feed_settings=feed_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self,
        feed_service: FeedService,
        engagement_service: EngagementService,
        feed_settings: FeedSettings,
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(
            feed_service=feed_service,
            engagement_service=engagement_service,
            feed_settings=feed_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_engaged_use_case(
        self,
        feed_service: FeedService,
        engagement_service: EngagementService,
        feed_settings: FeedSettings,
    ) -> ListEngagedUseCase:
        """Provide liked/saved items use case."""
        return ListEngagedUseCase(
            feed_service=feed_service,
            engagement_service=engagement_service,
            feed_settings=feed_settings,
        )

    # News use cases
    @provide(scope=Scope.REQUEST)
    def get_create_news_use_case(self, news_service: NewsService) -> CreateNewsUseCase:
        """Provide create news use case."""
        return CreateNewsUseCase(news_service=news_service)

    @provide(scope=Scope.REQUEST)
    def get_get_news_use_case(
        self, news_service: NewsService, engagement_service: EngagementService
    ) -> GetNewsUseCase:
        """Provide get news use case."""
        return GetNewsUseCase(
            news_service=news_service, engagement_service=engagement_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_news_use_case(self, news_service: NewsService) -> UpdateNewsUseCase:
        """Provide update news use case."""
        return UpdateNewsUseCase(news_service=news_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_news_use_case(self, news_service: NewsService) -> DeleteNewsUseCase:
        """Provide delete news use case."""
        return DeleteNewsUseCase(news_service=news_service)

    @provide(scope=Scope.REQUEST)
    def get_ingest_news_use_case(self, news_service: NewsService) -> IngestNewsUseCase:
        """Provide news ingestion use case."""
        return IngestNewsUseCase(news_service=news_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_comment_use_case(
        self,
        comment_service: CommentService,
        engagement_service: EngagementService,
    ) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(
            comment_service=comment_service, engagement_service=engagement_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Engagement use cases
    @provide(scope=Scope.REQUEST)
    def get_set_vote_use_case(
        self, engagement_service: EngagementService
    ) -> SetVoteUseCase:
        """Provide set vote use case."""
        return SetVoteUseCase(engagement_service=engagement_service)

    @provide(scope=Scope.REQUEST)
    def get_set_save_use_case(
        self, engagement_service: EngagementService
    ) -> SetSaveUseCase:
        """Provide set save use case."""
        return SetSaveUseCase(engagement_service=engagement_service)

    # Follow use cases
    @provide(scope=Scope.REQUEST)
    def get_follow_author_use_case(
        self, follow_service: FollowService, user_service: UserService
    ) -> FollowAuthorUseCase:
        """Provide follow author use case."""
        return FollowAuthorUseCase(
            follow_service=follow_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_unfollow_author_use_case(
        self, follow_service: FollowService, user_service: UserService
    ) -> UnfollowAuthorUseCase:
        """Provide unfollow author use case."""
        return UnfollowAuthorUseCase(
            follow_service=follow_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_following_use_case(
        self, follow_service: FollowService, feed_settings: FeedSettings
    ) -> ListFollowingUseCase:
        """Provide followed authors use case."""
        return ListFollowingUseCase(
            follow_service=follow_service, feed_settings=feed_settings
        )

    @provide(scope=Scope.REQUEST)
    def get_author_use_case(
        self, user_service: UserService, follow_service: FollowService
    ) -> GetAuthorUseCase:
        """Provide author profile use case."""
        return GetAuthorUseCase(
            user_service=user_service, follow_service=follow_service
        )
