"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .engagement_service import EngagementService, SaveResult, VoteResult
from .feed_reader import FeedReader
from .feed_service import EngagedPage, FeedService
from .follow_service import FollowingPage, FollowService
from .jwt_service import JWTService
from .news_service import NewsService
from .reply_counter_service import ReplyCounterService
from .user_service import UserService

__all__ = [
    "CommentService",
    "EngagedPage",
    "EngagementService",
    "FeedReader",
    "FeedService",
    "FollowingPage",
    "FollowService",
    "JWTService",
    "NewsService",
    "ReplyCounterService",
    "SaveResult",
    "Service",
    "UserService",
    "VoteResult",
]
