"""Set save use case."""

from pydantic import BaseModel

from newsfeed.application.usecase.base import BaseUseCase
from newsfeed.domain.service import EngagementService
from newsfeed.domain.value import ParentType, SaveAction, SaveState, Viewer


class SetSaveRequest(BaseModel):
    """Set save request."""

    viewer: Viewer
    parent_id: int
    parent_type: ParentType
    action: SaveAction


class SetSaveResponse(BaseModel):
    """Set save response."""

    parent_id: int
    parent_type: ParentType
    save_state: SaveState
    message: str


class SetSaveUseCase(BaseUseCase):
    """Use case for saving an item for later, or unsaving it."""

    def __init__(self, engagement_service: EngagementService) -> None:
        self.engagement_service = engagement_service

    async def execute(self, request: SetSaveRequest) -> SetSaveResponse:
        """Execute set save flow.

        Raises:
            NotFoundError: If saving an item that doesn't exist
            InvalidStateError: If the item is already in the requested state
        """
        result = await self.engagement_service.set_save(
            request.viewer.user_id,
            request.parent_id,
            request.parent_type,
            request.action,
        )
        return SetSaveResponse(
            parent_id=request.parent_id,
            parent_type=request.parent_type,
            save_state=result.state,
            message=result.message,
        )
