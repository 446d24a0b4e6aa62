"""Routes for the signed-in caller's own lists."""

from datetime import datetime
from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status

from newsfeed.application.usecase.feed import (
    EngagedList,
    ListEngagedRequest,
    ListEngagedResponse,
    ListEngagedUseCase,
    RecordCursorView,
)
from newsfeed.application.usecase.follow import (
    ListFollowingRequest,
    ListFollowingResponse,
    ListFollowingUseCase,
)
from newsfeed.domain.error import DomainError
from newsfeed.domain.service import JWTService
from newsfeed.interface.api.auth import require_viewer
from newsfeed.interface.error import to_http_exception

router = APIRouter(prefix="/me", tags=["me"], route_class=DishkaRoute)


def _record_cursor(
    cursor_created_at: Optional[datetime], cursor_id: Optional[int]
) -> Optional[RecordCursorView]:
    if (cursor_id is None) != (cursor_created_at is None):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="cursor_id and cursor_created_at must be given together",
        )
    if cursor_id is None:
        return None
    return RecordCursorView(created_at=cursor_created_at, id=cursor_id)


async def _list_engaged(
    use_case: ListEngagedUseCase,
    jwt_service: JWTService,
    which: EngagedList,
    cursor_created_at: Optional[datetime],
    cursor_id: Optional[int],
    page_size: Optional[int],
    auth_token: str | None,
) -> ListEngagedResponse:
    viewer = require_viewer(jwt_service, auth_token, f"list {which.value} items")

    cursor = _record_cursor(cursor_created_at, cursor_id)

    try:
        request = ListEngagedRequest(
            which=which, viewer=viewer, cursor=cursor, page_size=page_size
        )
        return await use_case.execute(request)
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/liked", response_model=ListEngagedResponse)
async def list_liked(
    list_engaged_use_case: FromDishka[ListEngagedUseCase],
    jwt_service: FromDishka[JWTService],
    cursor_created_at: Optional[datetime] = None,
    cursor_id: Optional[int] = None,
    page_size: Optional[int] = None,
    auth_token: str | None = Cookie(default=None),
) -> ListEngagedResponse:
    """News and comments the caller liked, most recently liked first.

    Args:
        list_engaged_use_case: Liked/saved use case from DI
        jwt_service: JWT service for token verification (injected)
        cursor_created_at: ``next_cursor.created_at`` of the previous page
        cursor_id: ``next_cursor.id`` of the previous page
        page_size: Items per page
        auth_token: JWT token from cookie

    Returns:
        One page of liked items and the cursor for the next one
    """
    return await _list_engaged(
        list_engaged_use_case,
        jwt_service,
        EngagedList.LIKED,
        cursor_created_at,
        cursor_id,
        page_size,
        auth_token,
    )


@router.get("/saved", response_model=ListEngagedResponse)
async def list_saved(
    list_engaged_use_case: FromDishka[ListEngagedUseCase],
    jwt_service: FromDishka[JWTService],
    cursor_created_at: Optional[datetime] = None,
    cursor_id: Optional[int] = None,
    page_size: Optional[int] = None,
    auth_token: str | None = Cookie(default=None),
) -> ListEngagedResponse:
    """News and comments the caller saved, most recently saved first."""
    return await _list_engaged(
        list_engaged_use_case,
        jwt_service,
        EngagedList.SAVED,
        cursor_created_at,
        cursor_id,
        page_size,
        auth_token,
    )


@router.get("/following", response_model=ListFollowingResponse)
async def list_following(
    list_following_use_case: FromDishka[ListFollowingUseCase],
    jwt_service: FromDishka[JWTService],
    cursor_created_at: Optional[datetime] = None,
    cursor_id: Optional[int] = None,
    page_size: Optional[int] = None,
    auth_token: str | None = Cookie(default=None),
) -> ListFollowingResponse:
    """Authors the caller follows, most recently followed first."""
    viewer = require_viewer(jwt_service, auth_token, "list followed authors")
    cursor = _record_cursor(cursor_created_at, cursor_id)

    try:
        request = ListFollowingRequest(
            viewer=viewer, cursor=cursor, page_size=page_size
        )
        return await list_following_use_case.execute(request)
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
