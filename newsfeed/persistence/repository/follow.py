"""PostgreSQL implementation of Follow repository."""

from typing import List, Optional

from sqlalchemy import and_, delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from newsfeed.domain.model import Follow
from newsfeed.domain.repository import FollowRepository
from newsfeed.domain.value import FollowId, RecordPosition, UserId
from newsfeed.persistence.mappers import model_to_dict, row_to_follow
from newsfeed.persistence.seek import by_recency, older_than
from newsfeed.persistence.tables import follows_table


class PostgresFollowRepository(FollowRepository):
    """PostgreSQL implementation of FollowRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find(self, user_id: UserId, author_id: UserId) -> Optional[Follow]:
        stmt = select(follows_table).where(
            and_(
                follows_table.c.user_id == user_id,
                follows_table.c.author_id == author_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_follow(row._asdict()) if row else None

    async def create(self, follow: Follow) -> Follow:
        stmt = (
            insert(follows_table)
            .values(**model_to_dict(follow, exclude={"id"}))
            .returning(follows_table)
        )
        result = await self.session.execute(stmt)
        return row_to_follow(result.one()._asdict())

    async def delete(self, follow_id: FollowId) -> bool:
        stmt = delete(follows_table).where(follows_table.c.id == follow_id)
        result = await self.session.execute(stmt)
        return result.rowcount > 0

    async def find_author_ids(self, user_id: UserId) -> frozenset[UserId]:
        stmt = select(follows_table.c.author_id).where(
            follows_table.c.user_id == user_id
        )
        result = await self.session.execute(stmt)
        return frozenset(UserId(author_id) for author_id in result.scalars())

    async def seek_by_user(
        self,
        user_id: UserId,
        after: Optional[RecordPosition],
        limit: int,
    ) -> List[Follow]:
        stmt = select(follows_table).where(follows_table.c.user_id == user_id)
        if after is not None:
            stmt = stmt.where(older_than(follows_table, after))
        stmt = by_recency(stmt, follows_table).limit(limit)

        result = await self.session.execute(stmt)
        return [row_to_follow(row._asdict()) for row in result.fetchall()]
