"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from newsfeed.domain.model.vote import Vote
from newsfeed.domain.value import (
    ParentType,
    RecordPosition,
    UserId,
    VoteId,
    VoteKind,
)


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_user_and_parent(
        self,
        user_id: UserId,
        parent_type: ParentType,
        parent_id: int,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item.

        Args:
            user_id: The user's ID
            parent_type: Type of item (news or comment)
            parent_id: ID of the item

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_parents(
        self,
        user_id: UserId,
        parent_type: ParentType,
        parent_ids: Sequence[int],
    ) -> List[Vote]:
        """Find a user's votes on multiple items (batch query).

        Args:
            user_id: The user's ID
            parent_type: Type of items (news or comment)
            parent_ids: IDs of the items to check

        Returns:
            Votes by the user on the specified items
        """
        pass

    @abstractmethod
    async def create(self, vote: Vote) -> Vote:
        """Insert a vote.

        Returns:
            The stored vote, carrying its assigned ID

        Raises:
            IntegrityError: If the user already voted on the item
        """
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote.

        Returns:
            True if a vote was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def delete_by_parent(self, parent_type: ParentType, parent_id: int) -> int:
        """Delete every vote on an item. Returns the number deleted."""
        pass

    @abstractmethod
    async def seek_by_user(
        self,
        user_id: UserId,
        kind: VoteKind,
        after: Optional[RecordPosition],
        limit: int,
    ) -> List[Vote]:
        """A user's votes of one kind, most recent first.

        Ordered by (created_at DESC, id DESC), starting strictly after
        ``after`` when given.
        """
        pass
