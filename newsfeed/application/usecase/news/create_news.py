"""Create news use case."""

from typing import Optional

from pydantic import BaseModel, Field

from newsfeed.application.usecase.base import BaseUseCase
from newsfeed.application.usecase.feed.items import NewsItem, to_item
from newsfeed.domain.service import NewsService
from newsfeed.domain.value import Viewer


class CreateNewsRequest(BaseModel):
    """Create news request."""

    viewer: Viewer
    title: str = Field(min_length=1, max_length=300)
    body: str = ""
    sources: str = ""
    tags: str = ""
    thumbnail: Optional[str] = None
    link: Optional[str] = None


class CreateNewsUseCase(BaseUseCase):
    """Use case for publishing a news item."""

    def __init__(self, news_service: NewsService) -> None:
        """Initialize create news use case.

        Args:
            news_service: News domain service
        """
        self.news_service = news_service

    async def execute(self, request: CreateNewsRequest) -> NewsItem:
        """Execute create news flow.

        Raises:
            ForbiddenError: If the caller isn't a verified author
        """
        news = await self.news_service.create_news(
            request.viewer,
            title=request.title,
            body=request.body,
            sources=request.sources,
            tags=request.tags,
            thumbnail=request.thumbnail,
            link=request.link,
        )
        return to_item(news)
