"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from newsfeed.domain.model.user import User
from newsfeed.domain.value import UserId


class UserRepository(ABC):
    """Repository for User entity.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users at once (batch query)."""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Insert a user mirrored from the identity service.

        Keeps ``user.id`` when given, otherwise one is assigned.
        """
        pass

    @abstractmethod
    async def adjust_followers(self, user_id: UserId, delta: int) -> Optional[User]:
        """Atomically add ``delta`` to the follower count (floored at zero).

        Returns:
            The updated user, None if not found
        """
        pass

    @abstractmethod
    async def adjust_written_news(
        self, user_id: UserId, delta: int
    ) -> Optional[User]:
        """Atomically add ``delta`` to the written news count (floored at zero).

        Returns:
            The updated user, None if not found
        """
        pass
