"""Follow repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from newsfeed.domain.model.follow import Follow
from newsfeed.domain.value import FollowId, RecordPosition, UserId


class FollowRepository(ABC):
    """Repository for Follow entity."""

    @abstractmethod
    async def find(self, user_id: UserId, author_id: UserId) -> Optional[Follow]:
        """Find the follow of ``author_id`` by ``user_id``, if any."""
        pass

    @abstractmethod
    async def create(self, follow: Follow) -> Follow:
        """Insert a follow.

        Raises:
            IntegrityError: If the user already follows the author
        """
        pass

    @abstractmethod
    async def delete(self, follow_id: FollowId) -> bool:
        pass

    @abstractmethod
    async def find_author_ids(self, user_id: UserId) -> frozenset[UserId]:
        """IDs of every author the user follows."""
        pass

    @abstractmethod
    async def seek_by_user(
        self,
        user_id: UserId,
        after: Optional[RecordPosition],
        limit: int,
    ) -> List[Follow]:
        """A user's follows, most recent first, strictly after ``after``."""
        pass
