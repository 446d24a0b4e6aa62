"""List comments use case (thread and replies)."""

from typing import Optional

from pydantic import BaseModel, Field

from newsfeed.application.usecase.base import BaseUseCase
from newsfeed.config import FeedSettings
from newsfeed.domain.service import EngagementService, FeedService
from newsfeed.domain.service.feed_reader import resolve_page_size
from newsfeed.domain.value import CommentId, NewsId, ParentType, SortKey, Viewer

from .items import CommentItem, to_items


class ListCommentsRequest(BaseModel):
    """List comments request: direct children of a news item or comment."""

    parent_id: int
    parent_type: ParentType
    sort: SortKey = SortKey.SCORE
    cursor: Optional[int] = None  # ID of the last comment already seen
    page_size: Optional[int] = Field(default=None, ge=0)
    viewer: Optional[Viewer] = None


class ListCommentsResponse(BaseModel):
    """List comments response."""

    parent_id: int
    parent_type: ParentType
    items: list[CommentItem]
    next_cursor: Optional[int]


class ListCommentsUseCase(BaseUseCase):
    """Use case for paging through a thread or a comment's replies."""

    def __init__(
        self,
        feed_service: FeedService,
        engagement_service: EngagementService,
        feed_settings: FeedSettings,
    ) -> None:
        self.feed_service = feed_service
        self.engagement_service = engagement_service
        self.feed_settings = feed_settings

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow.

        Tombstoned comments are listed so their replies stay reachable.

        Raises:
            NotFoundError: If the parent doesn't exist
        """
        limit = resolve_page_size(request.page_size, self.feed_settings)
        cursor = CommentId(request.cursor) if request.cursor is not None else None

        if request.parent_type is ParentType.NEWS:
            comments = await self.feed_service.thread(
                NewsId(request.parent_id), request.sort, cursor, limit
            )
        else:
            comments = await self.feed_service.replies(
                CommentId(request.parent_id), request.sort, cursor, limit
            )

        items = await to_items(comments, self.engagement_service, request.viewer)
        return ListCommentsResponse(
            parent_id=request.parent_id,
            parent_type=request.parent_type,
            items=items,
            next_cursor=items[-1].id if items and len(items) == limit else None,
        )
