"""PostgreSQL implementation of News repository."""

from typing import List, Optional, Sequence

import logfire
from sqlalchemy import select, update
from sqlalchemy.dialects.postgresql import insert

from newsfeed.domain.model import News
from newsfeed.domain.repository.news import NewsRepository
from newsfeed.persistence.mappers import model_to_dict, row_to_news
from newsfeed.persistence.repository.content import PostgresContentRepository
from newsfeed.persistence.tables import news_table

# Columns an edit or tombstone may change; counters move only by increments
EDITABLE_COLUMNS = (
    "title",
    "body",
    "sources",
    "tags",
    "thumbnail",
    "link",
    "deleted",
    "updated_at",
)


class PostgresNewsRepository(PostgresContentRepository[News], NewsRepository):
    """PostgreSQL implementation of NewsRepository."""

    table = news_table
    row_to_item = staticmethod(row_to_news)
    name = "news"

    async def create(self, news: News) -> News:
        """Insert a news item and return it with its assigned ID."""
        with logfire.span("news_repository.create", title=news.title):
            stmt = (
                insert(news_table)
                .values(**model_to_dict(news, exclude={"id"}))
                .returning(news_table)
            )
            result = await self.session.execute(stmt)
            created = self._to_item(result.one())
            logfire.info("News inserted", news_id=created.id)
            return created

    async def create_ingested(self, news: News) -> Optional[News]:
        """Insert unless a row with the same external_id exists."""
        with logfire.span(
            "news_repository.create_ingested", external_id=news.external_id
        ):
            stmt = (
                insert(news_table)
                .values(**model_to_dict(news, exclude={"id"}))
                .on_conflict_do_nothing(index_elements=["external_id"])
                .returning(news_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            if row is None:
                logfire.debug("News already ingested", external_id=news.external_id)
                return None
            return self._to_item(row)

    async def update(self, news: News) -> News:
        """Write back the editable columns of a news item."""
        if news.id is None:
            raise ValueError("Cannot update news without an ID")

        values = model_to_dict(news)
        stmt = (
            update(news_table)
            .where(news_table.c.id == news.id)
            .values(**{column: values[column] for column in EDITABLE_COLUMNS})
            .returning(news_table)
        )
        result = await self.session.execute(stmt)
        return self._to_item(result.one())

    async def find_by_external_ids(self, external_ids: Sequence[str]) -> List[News]:
        if not external_ids:
            return []
        stmt = select(news_table).where(
            news_table.c.external_id.in_(list(external_ids))
        )
        return await self._fetch_all(stmt)
