"""Get comment use case."""

from typing import Optional

from pydantic import BaseModel

from newsfeed.application.usecase.base import BaseUseCase
from newsfeed.application.usecase.feed.items import CommentItem, to_items
from newsfeed.domain.service import CommentService, EngagementService
from newsfeed.domain.value import CommentId, Viewer


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: int
    viewer: Optional[Viewer] = None


class GetCommentUseCase(BaseUseCase):
    """Use case for fetching a single comment, tombstones included."""

    def __init__(
        self, comment_service: CommentService, engagement_service: EngagementService
    ) -> None:
        self.comment_service = comment_service
        self.engagement_service = engagement_service

    async def execute(self, request: GetCommentRequest) -> CommentItem:
        comment = await self.comment_service.get_comment(CommentId(request.comment_id))
        [item] = await to_items([comment], self.engagement_service, request.viewer)
        return item
