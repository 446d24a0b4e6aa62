"""PostgreSQL repository implementations."""

from newsfeed.persistence.repository.comment import PostgresCommentRepository
from newsfeed.persistence.repository.follow import PostgresFollowRepository
from newsfeed.persistence.repository.lock import PostgresLedgerLock
from newsfeed.persistence.repository.news import PostgresNewsRepository
from newsfeed.persistence.repository.save import PostgresSaveRepository
from newsfeed.persistence.repository.user import PostgresUserRepository
from newsfeed.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresNewsRepository",
    "PostgresCommentRepository",
    "PostgresVoteRepository",
    "PostgresSaveRepository",
    "PostgresFollowRepository",
    "PostgresLedgerLock",
]
