"""In-memory vote repository for testing."""

from typing import List, Optional, Sequence

from sqlalchemy.exc import IntegrityError

from newsfeed.domain.model import Vote
from newsfeed.domain.repository import VoteRepository
from newsfeed.domain.value import ParentType, RecordPosition, UserId, VoteId, VoteKind

from .seek import newest_first, older_than
from .store import InMemoryStore


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self.store = store or InMemoryStore()

    @property
    def _votes(self) -> dict[int, Vote]:
        return self.store.votes

    async def find_by_user_and_parent(
        self,
        user_id: UserId,
        parent_type: ParentType,
        parent_id: int,
    ) -> Optional[Vote]:
        """Find a vote by user and item."""
        for vote in self._votes.values():
            if (
                vote.user_id == user_id
                and vote.parent_type is parent_type
                and vote.parent_id == parent_id
            ):
                return vote
        return None

    async def find_by_user_and_parents(
        self,
        user_id: UserId,
        parent_type: ParentType,
        parent_ids: Sequence[int],
    ) -> List[Vote]:
        wanted = set(parent_ids)
        return [
            v
            for v in self._votes.values()
            if v.user_id == user_id
            and v.parent_type is parent_type
            and v.parent_id in wanted
        ]

    async def create(self, vote: Vote) -> Vote:
        """Insert a vote.

        Raises:
            IntegrityError: If vote already exists (duplicate)
        """
        existing = await self.find_by_user_and_parent(
            vote.user_id, vote.parent_type, vote.parent_id
        )
        if existing:
            raise IntegrityError("Duplicate vote", None, Exception())

        created = vote.model_copy(update={"id": VoteId(self.store.next_id("votes"))})
        self._votes[created.id] = created
        return created

    async def delete(self, vote_id: VoteId) -> bool:
        return self._votes.pop(vote_id, None) is not None

    async def delete_by_parent(self, parent_type: ParentType, parent_id: int) -> int:
        doomed = [
            v.id
            for v in self._votes.values()
            if v.parent_type is parent_type and v.parent_id == parent_id
        ]
        for vote_id in doomed:
            del self._votes[vote_id]
        return len(doomed)

    async def seek_by_user(
        self,
        user_id: UserId,
        kind: VoteKind,
        after: Optional[RecordPosition],
        limit: int,
    ) -> List[Vote]:
        rows = [
            v
            for v in self._votes.values()
            if v.user_id == user_id
            and v.kind is kind
            and (after is None or older_than(v, after))
        ]
        return newest_first(rows)[:limit]
