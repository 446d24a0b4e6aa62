"""In-memory follow repository for testing."""

from typing import List, Optional

from sqlalchemy.exc import IntegrityError

from newsfeed.domain.model import Follow
from newsfeed.domain.repository import FollowRepository
from newsfeed.domain.value import FollowId, RecordPosition, UserId

from .seek import newest_first, older_than
from .store import InMemoryStore


class InMemoryFollowRepository(FollowRepository):
    """In-memory implementation of FollowRepository for testing."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self.store = store or InMemoryStore()

    @property
    def _follows(self) -> dict[int, Follow]:
        return self.store.follows

    async def find(self, user_id: UserId, author_id: UserId) -> Optional[Follow]:
        for follow in self._follows.values():
            if follow.user_id == user_id and follow.author_id == author_id:
                return follow
        return None

    async def create(self, follow: Follow) -> Follow:
        """Insert a follow.

        Raises:
            IntegrityError: If the author is already followed (duplicate)
        """
        if await self.find(follow.user_id, follow.author_id):
            raise IntegrityError("Duplicate follow", None, Exception())

        created = follow.model_copy(
            update={"id": FollowId(self.store.next_id("follows"))}
        )
        self._follows[created.id] = created
        return created

    async def delete(self, follow_id: FollowId) -> bool:
        return self._follows.pop(follow_id, None) is not None

    async def find_author_ids(self, user_id: UserId) -> frozenset[UserId]:
        return frozenset(
            f.author_id for f in self._follows.values() if f.user_id == user_id
        )

    async def seek_by_user(
        self,
        user_id: UserId,
        after: Optional[RecordPosition],
        limit: int,
    ) -> List[Follow]:
        rows = [
            f
            for f in self._follows.values()
            if f.user_id == user_id and (after is None or older_than(f, after))
        ]
        return newest_first(rows)[:limit]
