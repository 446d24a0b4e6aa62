"""Save repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from newsfeed.domain.model.save import Save
from newsfeed.domain.value import ParentType, RecordPosition, SaveId, UserId


class SaveRepository(ABC):
    """Repository for Save entity."""

    @abstractmethod
    async def find_by_user_and_parent(
        self,
        user_id: UserId,
        parent_type: ParentType,
        parent_id: int,
    ) -> Optional[Save]:
        """Find a user's save of a specific item, None if not saved."""
        pass

    @abstractmethod
    async def find_by_user_and_parents(
        self,
        user_id: UserId,
        parent_type: ParentType,
        parent_ids: Sequence[int],
    ) -> List[Save]:
        """Find a user's saves among multiple items (batch query)."""
        pass

    @abstractmethod
    async def create(self, save: Save) -> Save:
        """Insert a save.

        Raises:
            IntegrityError: If the user already saved the item
        """
        pass

    @abstractmethod
    async def delete(self, save_id: SaveId) -> bool:
        pass

    @abstractmethod
    async def delete_by_parent(self, parent_type: ParentType, parent_id: int) -> int:
        """Delete every save of an item. Returns the number deleted."""
        pass

    @abstractmethod
    async def seek_by_user(
        self,
        user_id: UserId,
        after: Optional[RecordPosition],
        limit: int,
    ) -> List[Save]:
        """A user's saves, most recent first, strictly after ``after``."""
        pass
