"""Delete news use case."""

from pydantic import BaseModel

from newsfeed.application.usecase.base import BaseUseCase
from newsfeed.application.usecase.feed.items import NewsItem, to_item
from newsfeed.domain.service import NewsService
from newsfeed.domain.value import NewsId, Viewer


class DeleteNewsRequest(BaseModel):
    """Delete news request."""

    viewer: Viewer
    news_id: int


class DeleteNewsUseCase(BaseUseCase):
    """Use case for deleting one's own news item.

    The item is tombstoned, not removed, and the tombstone is returned.
    """

    def __init__(self, news_service: NewsService) -> None:
        self.news_service = news_service

    async def execute(self, request: DeleteNewsRequest) -> NewsItem:
        news = await self.news_service.delete_news(
            request.viewer, NewsId(request.news_id)
        )
        return to_item(news)
