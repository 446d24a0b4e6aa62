"""Update news use case."""

from typing import Optional

from pydantic import BaseModel, Field

from newsfeed.application.usecase.base import BaseUseCase
from newsfeed.application.usecase.feed.items import NewsItem, to_item
from newsfeed.domain.service import NewsService
from newsfeed.domain.value import NewsId, Viewer


class UpdateNewsRequest(BaseModel):
    """Update news request. Fields left as None are unchanged."""

    viewer: Viewer
    news_id: int
    title: Optional[str] = Field(default=None, min_length=1, max_length=300)
    body: Optional[str] = None
    sources: Optional[str] = None
    tags: Optional[str] = None
    thumbnail: Optional[str] = None
    link: Optional[str] = None


class UpdateNewsUseCase(BaseUseCase):
    """Use case for editing one's own news item."""

    def __init__(self, news_service: NewsService) -> None:
        self.news_service = news_service

    async def execute(self, request: UpdateNewsRequest) -> NewsItem:
        news = await self.news_service.update_news(
            request.viewer,
            NewsId(request.news_id),
            title=request.title,
            body=request.body,
            sources=request.sources,
            tags=request.tags,
            thumbnail=request.thumbnail,
            link=request.link,
        )
        return to_item(news)
