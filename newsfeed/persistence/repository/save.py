"""PostgreSQL implementation of Save repository."""

from typing import List, Optional, Sequence

from sqlalchemy import and_, delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from newsfeed.domain.model import Save
from newsfeed.domain.repository import SaveRepository
from newsfeed.domain.value import ParentType, RecordPosition, SaveId, UserId
from newsfeed.persistence.mappers import model_to_dict, row_to_save
from newsfeed.persistence.seek import by_recency, older_than
from newsfeed.persistence.tables import saves_table


class PostgresSaveRepository(SaveRepository):
    """PostgreSQL implementation of SaveRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_user_and_parent(
        self,
        user_id: UserId,
        parent_type: ParentType,
        parent_id: int,
    ) -> Optional[Save]:
        stmt = select(saves_table).where(
            and_(
                saves_table.c.user_id == user_id,
                saves_table.c.parent_type == parent_type.value,
                saves_table.c.parent_id == parent_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_save(row._asdict()) if row else None

    async def find_by_user_and_parents(
        self,
        user_id: UserId,
        parent_type: ParentType,
        parent_ids: Sequence[int],
    ) -> List[Save]:
        if not parent_ids:
            return []

        stmt = select(saves_table).where(
            and_(
                saves_table.c.user_id == user_id,
                saves_table.c.parent_type == parent_type.value,
                saves_table.c.parent_id.in_(list(parent_ids)),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_save(row._asdict()) for row in result.fetchall()]

    async def create(self, save: Save) -> Save:
        stmt = (
            insert(saves_table)
            .values(**model_to_dict(save, exclude={"id"}))
            .returning(saves_table)
        )
        result = await self.session.execute(stmt)
        return row_to_save(result.one()._asdict())

    async def delete(self, save_id: SaveId) -> bool:
        stmt = delete(saves_table).where(saves_table.c.id == save_id)
        result = await self.session.execute(stmt)
        return result.rowcount > 0

    async def delete_by_parent(self, parent_type: ParentType, parent_id: int) -> int:
        stmt = delete(saves_table).where(
            and_(
                saves_table.c.parent_type == parent_type.value,
                saves_table.c.parent_id == parent_id,
            )
        )
        result = await self.session.execute(stmt)
        return result.rowcount

    async def seek_by_user(
        self,
        user_id: UserId,
        after: Optional[RecordPosition],
        limit: int,
    ) -> List[Save]:
        stmt = select(saves_table).where(saves_table.c.user_id == user_id)
        if after is not None:
            stmt = stmt.where(older_than(saves_table, after))
        stmt = by_recency(stmt, saves_table).limit(limit)

        result = await self.session.execute(stmt)
        return [row_to_save(row._asdict()) for row in result.fetchall()]
