"""Create comment use case."""

from pydantic import BaseModel, Field

from newsfeed.application.usecase.base import BaseUseCase
from newsfeed.application.usecase.feed.items import CommentItem, to_item
from newsfeed.domain.service import CommentService
from newsfeed.domain.value import ParentType, Viewer


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    viewer: Viewer
    parent_id: int
    parent_type: ParentType
    body: str = Field(min_length=1, max_length=10000)


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on news or replying to a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Raises:
            NotFoundError: If the parent doesn't exist
            ContentDeletedError: If the parent was deleted
        """
        comment = await self.comment_service.add_comment(
            request.viewer, request.parent_id, request.parent_type, request.body
        )
        return to_item(comment)
