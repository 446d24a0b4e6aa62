"""Update comment use case."""

from pydantic import BaseModel, Field

from newsfeed.application.usecase.base import BaseUseCase
from newsfeed.application.usecase.feed.items import CommentItem, to_item
from newsfeed.domain.service import CommentService
from newsfeed.domain.value import CommentId, Viewer


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    viewer: Viewer
    comment_id: int
    body: str = Field(min_length=1, max_length=10000)


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing one's own comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> CommentItem:
        comment = await self.comment_service.edit_comment(
            request.viewer, CommentId(request.comment_id), request.body
        )
        return to_item(comment)
