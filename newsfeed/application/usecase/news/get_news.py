"""Get news use case."""

from typing import Optional

from pydantic import BaseModel

from newsfeed.application.usecase.base import BaseUseCase
from newsfeed.application.usecase.feed.items import NewsItem, to_items
from newsfeed.domain.service import EngagementService, NewsService
from newsfeed.domain.value import NewsId, Viewer


class GetNewsRequest(BaseModel):
    """Get news request."""

    news_id: int
    viewer: Optional[Viewer] = None


class GetNewsUseCase(BaseUseCase):
    """Use case for fetching a single news item."""

    def __init__(
        self, news_service: NewsService, engagement_service: EngagementService
    ) -> None:
        """Initialize get news use case.

        Args:
            news_service: News domain service
            engagement_service: For the viewer's vote and save states
        """
        self.news_service = news_service
        self.engagement_service = engagement_service

    async def execute(self, request: GetNewsRequest) -> NewsItem:
        """Execute get news flow.

        Deleted news stays fetchable by ID, as a tombstone.

        Raises:
            NotFoundError: If the news item doesn't exist
        """
        news = await self.news_service.get_news(NewsId(request.news_id))
        [item] = await to_items([news], self.engagement_service, request.viewer)
        return item
