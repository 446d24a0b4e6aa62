"""Delete comment use case."""

from typing import Optional

from pydantic import BaseModel

from newsfeed.application.usecase.base import BaseUseCase
from newsfeed.application.usecase.feed.items import CommentItem, to_item
from newsfeed.domain.service import CommentService
from newsfeed.domain.value import CommentId, Viewer


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    viewer: Viewer
    comment_id: int


class DeleteCommentResponse(BaseModel):
    """Delete comment response.

    ``tombstone`` is the placeholder left behind when the comment had
    replies; None when it was deleted outright.
    """

    comment_id: int
    tombstone: Optional[CommentItem]


class DeleteCommentUseCase(BaseUseCase):
    """Use case for removing one's own comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        tombstone = await self.comment_service.remove_comment(
            request.viewer, CommentId(request.comment_id)
        )
        return DeleteCommentResponse(
            comment_id=request.comment_id,
            tombstone=to_item(tombstone) if tombstone else None,
        )
