"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional, Sequence

from sqlalchemy import and_, delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from newsfeed.domain.model import Vote
from newsfeed.domain.repository import VoteRepository
from newsfeed.domain.value import ParentType, RecordPosition, UserId, VoteId, VoteKind
from newsfeed.persistence.mappers import model_to_dict, row_to_vote
from newsfeed.persistence.seek import by_recency, older_than
from newsfeed.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_parent(
        self,
        user_id: UserId,
        parent_type: ParentType,
        parent_id: int,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.parent_type == parent_type.value,
                votes_table.c.parent_id == parent_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_user_and_parents(
        self,
        user_id: UserId,
        parent_type: ParentType,
        parent_ids: Sequence[int],
    ) -> List[Vote]:
        """Find a user's votes on multiple items (batch query)."""
        if not parent_ids:
            return []

        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.parent_type == parent_type.value,
                votes_table.c.parent_id.in_(list(parent_ids)),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def create(self, vote: Vote) -> Vote:
        """Insert a vote (create)."""
        stmt = (
            insert(votes_table)
            .values(**model_to_dict(vote, exclude={"id"}))
            .returning(votes_table)
        )
        result = await self.session.execute(stmt)
        return row_to_vote(result.one()._asdict())

    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote."""
        stmt = delete(votes_table).where(votes_table.c.id == vote_id)
        result = await self.session.execute(stmt)
        return result.rowcount > 0

    async def delete_by_parent(self, parent_type: ParentType, parent_id: int) -> int:
        stmt = delete(votes_table).where(
            and_(
                votes_table.c.parent_type == parent_type.value,
                votes_table.c.parent_id == parent_id,
            )
        )
        result = await self.session.execute(stmt)
        return result.rowcount

    async def seek_by_user(
        self,
        user_id: UserId,
        kind: VoteKind,
        after: Optional[RecordPosition],
        limit: int,
    ) -> List[Vote]:
        """A user's votes of one kind, most recent first."""
        stmt = select(votes_table).where(
            votes_table.c.user_id == user_id,
            votes_table.c.kind == kind.value,
        )
        if after is not None:
            stmt = stmt.where(older_than(votes_table, after))
        stmt = by_recency(stmt, votes_table).limit(limit)

        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]
