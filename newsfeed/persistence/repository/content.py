"""PostgreSQL base for news and comment repositories."""

from typing import Any, Callable, Dict, Generic, List, Optional, Sequence

import logfire
from sqlalchemy import Table, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from newsfeed.domain.repository.content import ItemT
from newsfeed.domain.value import FeedFilter, FeedPosition
from newsfeed.persistence.mappers import row_to_position
from newsfeed.persistence.seek import below_score_page, recency_page, score_band_page


class PostgresContentRepository(Generic[ItemT]):
    """Seek queries and counter updates shared by news and comments.

    Subclasses set ``table`` and ``row_to_item``.
    """

    table: Table
    row_to_item: Callable[[Dict[str, Any]], ItemT]
    name: str

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _to_item(self, row: Any) -> ItemT:
        return type(self).row_to_item(row._asdict())

    async def _fetch_all(self, stmt) -> List[ItemT]:
        result = await self.session.execute(stmt)
        return [self._to_item(row) for row in result.fetchall()]

    async def find_by_id(self, item_id: int) -> Optional[ItemT]:
        stmt = select(self.table).where(self.table.c.id == item_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return self._to_item(row) if row else None

    async def find_by_ids(self, item_ids: Sequence[int]) -> List[ItemT]:
        if not item_ids:
            return []
        stmt = select(self.table).where(self.table.c.id.in_(list(item_ids)))
        return await self._fetch_all(stmt)

    async def find_position(self, item_id: int) -> Optional[FeedPosition]:
        stmt = select(
            self.table.c.score, self.table.c.created_at, self.table.c.id
        ).where(self.table.c.id == item_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_position(row._asdict()) if row else None

    async def seek_recency(
        self,
        feed_filter: FeedFilter,
        after: Optional[FeedPosition],
        limit: int,
    ) -> List[ItemT]:
        with logfire.span(f"{self.name}_repository.seek_recency", limit=limit):
            return await self._fetch_all(
                recency_page(self.table, feed_filter, after, limit)
            )

    async def seek_score_band(
        self,
        feed_filter: FeedFilter,
        cursor: FeedPosition,
        limit: int,
    ) -> List[ItemT]:
        with logfire.span(
            f"{self.name}_repository.seek_score_band", score=cursor.score, limit=limit
        ):
            return await self._fetch_all(
                score_band_page(self.table, feed_filter, cursor, limit)
            )

    async def seek_below_score(
        self,
        feed_filter: FeedFilter,
        score: Optional[int],
        limit: int,
    ) -> List[ItemT]:
        with logfire.span(
            f"{self.name}_repository.seek_below_score", score=score, limit=limit
        ):
            return await self._fetch_all(
                below_score_page(self.table, feed_filter, score, limit)
            )

    async def apply_vote_delta(
        self,
        item_id: int,
        likes_delta: int,
        dislikes_delta: int,
    ) -> Optional[ItemT]:
        """Atomically adjust likes and dislikes, recomputing the score.

        Every SET expression reads the pre-update row, so the score is
        computed from the same values the counters are incremented from.
        """
        table = self.table
        stmt = (
            update(table)
            .where(table.c.id == item_id)
            .values(
                likes=table.c.likes + likes_delta,
                dislikes=table.c.dislikes + dislikes_delta,
                score=(table.c.likes + likes_delta)
                - (table.c.dislikes + dislikes_delta),
            )
            .returning(table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return self._to_item(row) if row else None

    async def increment_reply_count(self, item_id: int) -> Optional[ItemT]:
        """Atomically increment reply_count by 1."""
        stmt = (
            update(self.table)
            .where(self.table.c.id == item_id)
            .values(reply_count=self.table.c.reply_count + 1)
            .returning(self.table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return self._to_item(row) if row else None
