"""List news use case (home feed and author feed)."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from newsfeed.application.usecase.base import BaseUseCase
from newsfeed.config import FeedSettings
from newsfeed.domain.service import EngagementService, FeedService
from newsfeed.domain.service.feed_reader import resolve_page_size
from newsfeed.domain.value import NewsId, NewsOrigin, SortKey, UserId, Viewer

from .items import NewsItem, to_items


class ListNewsRequest(BaseModel):
    """List news request.

    With ``author_id`` set, lists that author's news; otherwise the home
    feed, optionally restricted to followed authors or to one
    ``origin``.
    """

    sort: SortKey = SortKey.RECENCY
    cursor: Optional[int] = None  # ID of the last news item already seen
    page_size: Optional[int] = Field(default=None, ge=0)
    followed_only: bool = False
    origin: Optional[NewsOrigin] = None
    author_id: Optional[int] = None
    viewer: Optional[Viewer] = None


class ListNewsResponse(BaseModel):
    """List news response."""

    items: list[NewsItem]
    next_cursor: Optional[int]  # None once the feed is exhausted


class ListNewsUseCase(BaseUseCase):
    """Use case for paging through a news feed."""

    def __init__(
        self,
        feed_service: FeedService,
        engagement_service: EngagementService,
        feed_settings: FeedSettings,
    ) -> None:
        """Initialize list news use case.

        Args:
            feed_service: Feed façade
            engagement_service: For the viewer's vote and save states
            feed_settings: Page size defaults
        """
        self.feed_service = feed_service
        self.engagement_service = engagement_service
        self.feed_settings = feed_settings

    async def execute(self, request: ListNewsRequest) -> ListNewsResponse:
        """Execute list news flow.

        Returns:
            One page of news and the cursor for the next one

        Raises:
            NotFoundError: If the author is unknown
            UnauthenticatedError: If followed_only is asked anonymously
        """
        limit = resolve_page_size(request.page_size, self.feed_settings)
        cursor = NewsId(request.cursor) if request.cursor is not None else None

        with logfire.span(
            "list_news.execute",
            sort=request.sort.value,
            cursor=request.cursor,
            author_id=request.author_id,
            followed_only=request.followed_only,
            origin=request.origin.value if request.origin else None,
        ):
            if request.author_id is not None:
                news = await self.feed_service.author_feed(
                    UserId(request.author_id), request.sort, cursor, limit
                )
            else:
                news = await self.feed_service.home_feed(
                    request.sort,
                    cursor,
                    viewer=request.viewer,
                    followed_only=request.followed_only,
                    page_size=limit,
                    origin=request.origin,
                )

            items = await to_items(news, self.engagement_service, request.viewer)
            return ListNewsResponse(
                items=items,
                next_cursor=items[-1].id if items and len(items) == limit else None,
            )
