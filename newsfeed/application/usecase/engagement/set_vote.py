"""Set vote use case."""

from pydantic import BaseModel

from newsfeed.application.usecase.base import BaseUseCase
from newsfeed.domain.service import EngagementService
from newsfeed.domain.value import ParentType, Viewer, VoteKind, VoteOutcome, VoteState


class SetVoteRequest(BaseModel):
    """Set vote request."""

    viewer: Viewer
    parent_id: int
    parent_type: ParentType
    kind: VoteKind


class SetVoteResponse(BaseModel):
    """Set vote response: the item's counters after the toggle."""

    parent_id: int
    parent_type: ParentType
    likes: int
    dislikes: int
    score: int
    vote_state: VoteState
    outcome: VoteOutcome
    message: str


class SetVoteUseCase(BaseUseCase):
    """Use case for toggling a like or dislike."""

    def __init__(self, engagement_service: EngagementService) -> None:
        """Initialize set vote use case.

        Args:
            engagement_service: Engagement ledger
        """
        self.engagement_service = engagement_service

    async def execute(self, request: SetVoteRequest) -> SetVoteResponse:
        """Execute set vote flow.

        Raises:
            NotFoundError: If the item doesn't exist
        """
        result = await self.engagement_service.set_vote(
            request.viewer.user_id,
            request.parent_id,
            request.parent_type,
            request.kind,
        )
        return SetVoteResponse(
            parent_id=request.parent_id,
            parent_type=request.parent_type,
            likes=result.likes,
            dislikes=result.dislikes,
            score=result.score,
            vote_state=result.state,
            outcome=result.outcome,
            message=result.message,
        )
