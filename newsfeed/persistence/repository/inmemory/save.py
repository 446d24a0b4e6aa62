"""In-memory save repository for testing."""

from typing import List, Optional, Sequence

from sqlalchemy.exc import IntegrityError

from newsfeed.domain.model import Save
from newsfeed.domain.repository import SaveRepository
from newsfeed.domain.value import ParentType, RecordPosition, SaveId, UserId

from .seek import newest_first, older_than
from .store import InMemoryStore


class InMemorySaveRepository(SaveRepository):
    """In-memory implementation of SaveRepository for testing."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self.store = store or InMemoryStore()

    @property
    def _saves(self) -> dict[int, Save]:
        return self.store.saves

    async def find_by_user_and_parent(
        self,
        user_id: UserId,
        parent_type: ParentType,
        parent_id: int,
    ) -> Optional[Save]:
        for save in self._saves.values():
            if (
                save.user_id == user_id
                and save.parent_type is parent_type
                and save.parent_id == parent_id
            ):
                return save
        return None

    async def find_by_user_and_parents(
        self,
        user_id: UserId,
        parent_type: ParentType,
        parent_ids: Sequence[int],
    ) -> List[Save]:
        wanted = set(parent_ids)
        return [
            s
            for s in self._saves.values()
            if s.user_id == user_id
            and s.parent_type is parent_type
            and s.parent_id in wanted
        ]

    async def create(self, save: Save) -> Save:
        """Insert a save.

        Raises:
            IntegrityError: If the item is already saved (duplicate)
        """
        if await self.find_by_user_and_parent(
            save.user_id, save.parent_type, save.parent_id
        ):
            raise IntegrityError("Duplicate save", None, Exception())

        created = save.model_copy(update={"id": SaveId(self.store.next_id("saves"))})
        self._saves[created.id] = created
        return created

    async def delete(self, save_id: SaveId) -> bool:
        return self._saves.pop(save_id, None) is not None

    async def delete_by_parent(self, parent_type: ParentType, parent_id: int) -> int:
        doomed = [
            s.id
            for s in self._saves.values()
            if s.parent_type is parent_type and s.parent_id == parent_id
        ]
        for save_id in doomed:
            del self._saves[save_id]
        return len(doomed)

    async def seek_by_user(
        self,
        user_id: UserId,
        after: Optional[RecordPosition],
        limit: int,
    ) -> List[Save]:
        rows = [
            s
            for s in self._saves.values()
            if s.user_id == user_id and (after is None or older_than(s, after))
        ]
        return newest_first(rows)[:limit]
