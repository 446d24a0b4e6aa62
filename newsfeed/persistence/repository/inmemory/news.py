"""In-memory news repository for testing."""

from typing import List, Optional, Sequence

from newsfeed.domain.model import News
from newsfeed.domain.repository.news import NewsRepository

from .content import InMemoryContentRepository

# Fields an edit or tombstone may change; counters move only by increments
EDITABLE_FIELDS = (
    "title",
    "body",
    "sources",
    "tags",
    "thumbnail",
    "link",
    "deleted",
    "updated_at",
)


class InMemoryNewsRepository(InMemoryContentRepository[News], NewsRepository):
    """In-memory implementation of NewsRepository for testing."""

    table = "news"

    async def create(self, news: News) -> News:
        return self._insert(news)

    async def create_ingested(self, news: News) -> Optional[News]:
        """Insert unless the external_id is already stored."""
        if any(n.external_id == news.external_id for n in self._items.values()):
            return None
        return self._insert(news)

    async def update(self, news: News) -> News:
        if news.id is None:
            raise ValueError("Cannot update news without an ID")

        current = self._items[news.id]
        updated = current.model_copy(
            update={field: getattr(news, field) for field in EDITABLE_FIELDS}
        )
        self._items[news.id] = updated
        return updated

    async def find_by_external_ids(self, external_ids: Sequence[str]) -> List[News]:
        wanted = set(external_ids)
        return [n for n in self._items.values() if n.external_id in wanted]
