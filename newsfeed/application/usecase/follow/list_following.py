"""List followed authors use case."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from newsfeed.application.usecase.base import BaseUseCase
from newsfeed.application.usecase.feed import RecordCursorView
from newsfeed.config import FeedSettings
from newsfeed.domain.service import FollowService
from newsfeed.domain.service.feed_reader import resolve_page_size
from newsfeed.domain.value import Handle, RecordPosition, Viewer


class AuthorItem(BaseModel):
    """Author item in response."""

    author_id: int
    handle: Handle
    verified: bool
    followers: int
    written_news: int
    created_at: datetime


class ListFollowingRequest(BaseModel):
    """List followed authors request."""

    viewer: Viewer
    cursor: Optional[RecordCursorView] = None
    page_size: Optional[int] = Field(default=None, ge=0)


class ListFollowingResponse(BaseModel):
    """List followed authors response."""

    authors: list[AuthorItem]
    next_cursor: Optional[RecordCursorView]


class ListFollowingUseCase(BaseUseCase):
    """Use case for listing the authors a user follows, latest first."""

    def __init__(
        self, follow_service: FollowService, feed_settings: FeedSettings
    ) -> None:
        self.follow_service = follow_service
        self.feed_settings = feed_settings

    async def execute(self, request: ListFollowingRequest) -> ListFollowingResponse:
        limit = resolve_page_size(request.page_size, self.feed_settings)
        after = (
            RecordPosition(created_at=request.cursor.created_at, id=request.cursor.id)
            if request.cursor
            else None
        )

        page = await self.follow_service.followed_authors(
            request.viewer.user_id, after, limit
        )
        items = [
            AuthorItem(
                author_id=author.id,
                handle=author.handle,
                verified=author.verified,
                followers=author.followers,
                written_news=author.written_news,
                created_at=author.created_at,
            )
            for author in page.authors
        ]
        next_cursor = None
        if page.next_position is not None:
            next_cursor = RecordCursorView(
                created_at=page.next_position.created_at, id=page.next_position.id
            )
        return ListFollowingResponse(authors=items, next_cursor=next_cursor)
