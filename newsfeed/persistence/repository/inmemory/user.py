"""In-memory user repository for testing."""

from typing import List, Optional, Sequence

from sqlalchemy.exc import IntegrityError

from newsfeed.domain.model import User
from newsfeed.domain.repository import UserRepository
from newsfeed.domain.value import UserId

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self.store = store or InMemoryStore()

    @property
    def _users(self) -> dict[int, User]:
        return self.store.users

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        return [self._users[i] for i in set(user_ids) if i in self._users]

    async def create(self, user: User) -> User:
        """Insert a user, keeping its ID when given.

        Raises:
            IntegrityError: If the ID is taken
        """
        if user.id is None:
            user = user.model_copy(update={"id": UserId(self.store.next_id("users"))})
        elif user.id in self._users:
            raise IntegrityError("Duplicate user", None, Exception())
        else:
            self.store.bump_sequence("users", user.id)

        self._users[user.id] = user
        return user

    def _adjust(self, user_id: UserId, field: str, delta: int) -> Optional[User]:
        user = self._users.get(user_id)
        if user is None:
            return None

        updated = user.model_copy(
            update={field: max(getattr(user, field) + delta, 0)}
        )
        self._users[user_id] = updated
        return updated

    async def adjust_followers(self, user_id: UserId, delta: int) -> Optional[User]:
        return self._adjust(user_id, "followers", delta)

    async def adjust_written_news(
        self, user_id: UserId, delta: int
    ) -> Optional[User]:
        return self._adjust(user_id, "written_news", delta)
