"""Repository interfaces for the news feed domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from newsfeed.domain.repository.comment import CommentRepository
from newsfeed.domain.repository.content import ContentRepository
from newsfeed.domain.repository.follow import FollowRepository
from newsfeed.domain.repository.lock import LedgerLock
from newsfeed.domain.repository.news import NewsRepository
from newsfeed.domain.repository.save import SaveRepository
from newsfeed.domain.repository.user import UserRepository
from newsfeed.domain.repository.vote import VoteRepository

__all__ = [
    "ContentRepository",
    "NewsRepository",
    "CommentRepository",
    "VoteRepository",
    "SaveRepository",
    "FollowRepository",
    "UserRepository",
    "LedgerLock",
]
