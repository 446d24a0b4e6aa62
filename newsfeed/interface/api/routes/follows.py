"""Follow routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from newsfeed.application.usecase.follow import (
    FollowAuthorRequest,
    FollowAuthorResponse,
    FollowAuthorUseCase,
    GetAuthorRequest,
    GetAuthorResponse,
    GetAuthorUseCase,
    UnfollowAuthorUseCase,
)
from newsfeed.domain.error import DomainError
from newsfeed.domain.service import JWTService
from newsfeed.interface.api.auth import require_viewer
from newsfeed.interface.error import to_http_exception

router = APIRouter(prefix="/authors", tags=["follows"], route_class=DishkaRoute)


@router.get("/{author_id}", response_model=GetAuthorResponse)
async def get_author(
    author_id: int,
    get_author_use_case: FromDishka[GetAuthorUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetAuthorResponse:
    """Public profile of an author.

    Signed-in callers also learn whether they follow the author.

    Raises:
        HTTPException: 404 if the author is unknown
    """
    viewer = jwt_service.get_viewer_from_token(auth_token)

    try:
        return await get_author_use_case.execute(
            GetAuthorRequest(author_id=author_id, viewer=viewer)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/{author_id}/follow", response_model=FollowAuthorResponse)
async def follow_author(
    author_id: int,
    follow_author_use_case: FromDishka[FollowAuthorUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> FollowAuthorResponse:
    """Follow an author.

    Raises:
        HTTPException: 400 if following oneself or already following,
            404 if the author is unknown
    """
    viewer = require_viewer(jwt_service, auth_token, "follow authors")

    try:
        return await follow_author_use_case.execute(
            FollowAuthorRequest(viewer=viewer, author_id=author_id)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.delete("/{author_id}/follow", response_model=FollowAuthorResponse)
async def unfollow_author(
    author_id: int,
    unfollow_author_use_case: FromDishka[UnfollowAuthorUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> FollowAuthorResponse:
    """Stop following an author."""
    viewer = require_viewer(jwt_service, auth_token, "unfollow authors")

    try:
        return await unfollow_author_use_case.execute(
            FollowAuthorRequest(viewer=viewer, author_id=author_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
