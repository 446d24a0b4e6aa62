"""News repository interface."""

from abc import abstractmethod
from typing import List, Optional, Sequence

from newsfeed.domain.model.news import News
from newsfeed.domain.repository.content import ContentRepository


class NewsRepository(ContentRepository[News]):
    """Repository for News aggregate.

    Defines the contract for news persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def create(self, news: News) -> News:
        """Insert a news item.

        Args:
            news: The news item to insert (``id`` is ignored)

        Returns:
            The stored news item, carrying its assigned ID
        """
        pass

    @abstractmethod
    async def create_ingested(self, news: News) -> Optional[News]:
        """Insert an externally sourced news item unless already present.

        Args:
            news: The news item, with ``external_id`` set

        Returns:
            The stored news item, or None if one with the same
            ``external_id`` already exists
        """
        pass

    @abstractmethod
    async def update(self, news: News) -> News:
        """Write back the editable fields of a news item.

        Counters are not touched; they only change through the atomic
        increment methods.

        Raises:
            ValueError: If the news item has no ID
        """
        pass

    @abstractmethod
    async def find_by_external_ids(self, external_ids: Sequence[str]) -> List[News]:
        """Find news items by their source IDs (batch query)."""
        pass
