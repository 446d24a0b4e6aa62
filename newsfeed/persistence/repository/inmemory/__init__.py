"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .follow import InMemoryFollowRepository
from .lock import InMemoryLedgerLock
from .news import InMemoryNewsRepository
from .save import InMemorySaveRepository
from .store import InMemoryStore
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryFollowRepository",
    "InMemoryLedgerLock",
    "InMemoryNewsRepository",
    "InMemorySaveRepository",
    "InMemoryStore",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
