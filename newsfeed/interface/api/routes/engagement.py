"""Vote and save routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel

from newsfeed.application.usecase.engagement import (
    SetSaveRequest,
    SetSaveResponse,
    SetSaveUseCase,
    SetVoteRequest,
    SetVoteResponse,
    SetVoteUseCase,
)
from newsfeed.domain.error import DomainError
from newsfeed.domain.service import JWTService
from newsfeed.domain.value import ParentType, SaveAction, VoteKind
from newsfeed.interface.api.auth import require_viewer
from newsfeed.interface.error import to_http_exception

router = APIRouter(tags=["engagement"], route_class=DishkaRoute)


class VoteAPIRequest(BaseModel):
    """API request for voting: the same kind twice cancels the vote."""

    kind: VoteKind


class SaveAPIRequest(BaseModel):
    """API request for saving or unsaving."""

    action: SaveAction


async def _set_vote(
    use_case: SetVoteUseCase,
    jwt_service: JWTService,
    parent_id: int,
    parent_type: ParentType,
    kind: VoteKind,
    auth_token: str | None,
) -> SetVoteResponse:
    viewer = require_viewer(jwt_service, auth_token, "vote")
    try:
        return await use_case.execute(
            SetVoteRequest(
                viewer=viewer,
                parent_id=parent_id,
                parent_type=parent_type,
                kind=kind,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


async def _set_save(
    use_case: SetSaveUseCase,
    jwt_service: JWTService,
    parent_id: int,
    parent_type: ParentType,
    action: SaveAction,
    auth_token: str | None,
) -> SetSaveResponse:
    viewer = require_viewer(jwt_service, auth_token, "save items")
    try:
        return await use_case.execute(
            SetSaveRequest(
                viewer=viewer,
                parent_id=parent_id,
                parent_type=parent_type,
                action=action,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/news/{news_id}/vote", response_model=SetVoteResponse)
async def vote_news(
    news_id: int,
    request: VoteAPIRequest,
    set_vote_use_case: FromDishka[SetVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> SetVoteResponse:
    """Like or dislike a news item.

    Requires authentication.

    Args:
        news_id: News item ID
        request: Vote kind
        set_vote_use_case: Set vote use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        The item's counters and the caller's vote after the toggle
    """
    return await _set_vote(
        set_vote_use_case,
        jwt_service,
        news_id,
        ParentType.NEWS,
        request.kind,
        auth_token,
    )


@router.post("/comments/{comment_id}/vote", response_model=SetVoteResponse)
async def vote_comment(
    comment_id: int,
    request: VoteAPIRequest,
    set_vote_use_case: FromDishka[SetVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> SetVoteResponse:
    """Like or dislike a comment."""
    return await _set_vote(
        set_vote_use_case,
        jwt_service,
        comment_id,
        ParentType.COMMENT,
        request.kind,
        auth_token,
    )


@router.post("/news/{news_id}/save", response_model=SetSaveResponse)
async def save_news(
    news_id: int,
    request: SaveAPIRequest,
    set_save_use_case: FromDishka[SetSaveUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> SetSaveResponse:
    """Save a news item for later, or unsave it.

    Raises:
        HTTPException: 400 if the item is already in the requested state
    """
    return await _set_save(
        set_save_use_case,
        jwt_service,
        news_id,
        ParentType.NEWS,
        request.action,
        auth_token,
    )


@router.post("/comments/{comment_id}/save", response_model=SetSaveResponse)
async def save_comment(
    comment_id: int,
    request: SaveAPIRequest,
    set_save_use_case: FromDishka[SetSaveUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> SetSaveResponse:
    """Save a comment for later, or unsave it."""
    return await _set_save(
        set_save_use_case,
        jwt_service,
        comment_id,
        ParentType.COMMENT,
        request.action,
        auth_token,
    )
