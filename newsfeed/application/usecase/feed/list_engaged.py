"""List liked or saved items use case."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from newsfeed.application.usecase.base import BaseUseCase
from newsfeed.config import FeedSettings
from newsfeed.domain.service import EngagementService, FeedService
from newsfeed.domain.service.feed_reader import resolve_page_size
from newsfeed.domain.value import RecordPosition, Viewer

from .items import CommentItem, NewsItem, to_items


class EngagedList(str, Enum):
    """Which of the viewer's ledgers to list."""

    LIKED = "liked"
    SAVED = "saved"


class RecordCursorView(BaseModel):
    """Position in a listing of the viewer's likes, saves or follows.

    The last record's own (created_at, id) rather than the item it points at,
    so the cursor survives the record being withdrawn.
    """

    created_at: datetime
    id: int


class ListEngagedRequest(BaseModel):
    """List liked or saved items request."""

    which: EngagedList
    viewer: Viewer
    cursor: Optional[RecordCursorView] = None
    page_size: Optional[int] = Field(default=None, ge=0)


class ListEngagedResponse(BaseModel):
    """List liked or saved items response."""

    items: list[NewsItem | CommentItem]
    next_cursor: Optional[RecordCursorView]


class ListEngagedUseCase(BaseUseCase):
    """Use case for listing what the viewer liked or saved, latest first."""

    def __init__(
        self,
        feed_service: FeedService,
        engagement_service: EngagementService,
        feed_settings: FeedSettings,
    ) -> None:
        self.feed_service = feed_service
        self.engagement_service = engagement_service
        self.feed_settings = feed_settings

    async def execute(self, request: ListEngagedRequest) -> ListEngagedResponse:
        limit = resolve_page_size(request.page_size, self.feed_settings)
        after = (
            RecordPosition(created_at=request.cursor.created_at, id=request.cursor.id)
            if request.cursor
            else None
        )
        user_id = request.viewer.user_id

        if request.which is EngagedList.LIKED:
            page = await self.feed_service.liked_items(user_id, after, limit)
        else:
            page = await self.feed_service.saved_items(user_id, after, limit)

        items = await to_items(page.items, self.engagement_service, request.viewer)
        next_cursor = None
        if page.next_position is not None:
            next_cursor = RecordCursorView(
                created_at=page.next_position.created_at, id=page.next_position.id
            )
        return ListEngagedResponse(items=items, next_cursor=next_cursor)
