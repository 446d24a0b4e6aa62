"""Ingest news use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from newsfeed.application.usecase.base import BaseUseCase
from newsfeed.application.usecase.feed.items import NewsItem, to_item
from newsfeed.domain.model import News
from newsfeed.domain.service import NewsService
from newsfeed.domain.value import NewsOrigin, Viewer


class IngestedArticle(BaseModel):
    """One article as handed over by the content source."""

    external_id: str = Field(min_length=1, max_length=255)
    title: str = Field(min_length=1, max_length=300)
    body: str = ""
    thumbnail: Optional[str] = None
    link: Optional[str] = None
    sources: str = ""
    tags: str = ""


class IngestNewsRequest(BaseModel):
    """Ingest news request.

    ``source_cursor`` is the content source's own paging token. It is
    passed through unchanged so the caller can fetch the next batch; the
    service never keeps it.
    """

    viewer: Viewer
    articles: list[IngestedArticle]
    source_cursor: Optional[str] = None


class IngestNewsResponse(BaseModel):
    """Ingest news response."""

    created: list[NewsItem]
    skipped: int
    source_cursor: Optional[str]


class IngestNewsUseCase(BaseUseCase):
    """Use case for storing a batch of externally sourced news."""

    def __init__(self, news_service: NewsService) -> None:
        self.news_service = news_service

    async def execute(self, request: IngestNewsRequest) -> IngestNewsResponse:
        """Execute ingest flow. Already known articles are skipped."""
        with logfire.span("ingest_news.execute", count=len(request.articles)):
            created = await self.news_service.ingest_news(
                request.viewer,
                [
                    News(
                        title=article.title,
                        body=article.body,
                        sources=article.sources,
                        tags=article.tags,
                        thumbnail=article.thumbnail,
                        link=article.link,
                        origin=NewsOrigin.INGESTED,
                        external_id=article.external_id,
                    )
                    for article in request.articles
                ],
            )
            return IngestNewsResponse(
                created=[to_item(news) for news in created],
                skipped=len(request.articles) - len(created),
                source_cursor=request.source_cursor,
            )
