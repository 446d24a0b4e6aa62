"""Comment routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel, Field

from newsfeed.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from newsfeed.application.usecase.feed import (
    CommentItem,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
)
from newsfeed.domain.error import DomainError
from newsfeed.domain.service import JWTService
from newsfeed.domain.value import ParentType
from newsfeed.interface.api.auth import require_viewer
from newsfeed.interface.error import to_http_exception

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


async def _list_children(
    use_case: ListCommentsUseCase,
    jwt_service: JWTService,
    parent_id: int,
    parent_type: ParentType,
    sort: str,
    cursor: Optional[int],
    page_size: Optional[int],
    auth_token: str | None,
) -> ListCommentsResponse:
    viewer = jwt_service.get_viewer_from_token(auth_token)
    try:
        request = ListCommentsRequest(
            parent_id=parent_id,
            parent_type=parent_type,
            sort=sort,
            cursor=cursor,
            page_size=page_size,
            viewer=viewer,
        )
        return await use_case.execute(request)
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/news/{news_id}/comments", response_model=ListCommentsResponse)
async def list_news_comments(
    news_id: int,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    sort: str = "score",
    cursor: Optional[int] = None,
    page_size: Optional[int] = None,
    auth_token: str | None = Cookie(default=None),
) -> ListCommentsResponse:
    """Top-level comments of a news item, best first by default.

    Args:
        news_id: News item ID
        list_comments_use_case: List comments use case from DI
        jwt_service: JWT service for token verification (injected)
        sort: "score" or "recency"
        cursor: ID of the last comment already seen
        page_size: Comments per page
        auth_token: JWT token from cookie (optional)

    Returns:
        One page of comments and the cursor for the next one
    """
    return await _list_children(
        list_comments_use_case,
        jwt_service,
        news_id,
        ParentType.NEWS,
        sort,
        cursor,
        page_size,
        auth_token,
    )


@router.get("/comments/{comment_id}/replies", response_model=ListCommentsResponse)
async def list_replies(
    comment_id: int,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    sort: str = "score",
    cursor: Optional[int] = None,
    page_size: Optional[int] = None,
    auth_token: str | None = Cookie(default=None),
) -> ListCommentsResponse:
    """Direct replies to a comment."""
    return await _list_children(
        list_comments_use_case,
        jwt_service,
        comment_id,
        ParentType.COMMENT,
        sort,
        cursor,
        page_size,
        auth_token,
    )


@router.get("/comments/{comment_id}", response_model=CommentItem)
async def get_comment(
    comment_id: int,
    get_comment_use_case: FromDishka[GetCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Get a single comment, tombstones included."""
    viewer = jwt_service.get_viewer_from_token(auth_token)
    try:
        return await get_comment_use_case.execute(
            GetCommentRequest(comment_id=comment_id, viewer=viewer)
        )
    except DomainError as e:
        raise to_http_exception(e)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    parent_id: int
    parent_type: ParentType
    body: str = Field(min_length=1, max_length=10000)


@router.post(
    "/comments",
    response_model=CommentItem,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Comment on a news item or reply to a comment.

    Requires authentication.

    Raises:
        HTTPException: 401 if not authenticated, 404 if the parent is unknown,
            400 if the parent was deleted
    """
    viewer = require_viewer(jwt_service, auth_token, "create comments")

    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                viewer=viewer,
                parent_id=request.parent_id,
                parent_type=request.parent_type,
                body=request.body,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    body: str = Field(min_length=1, max_length=10000)


@router.patch("/comments/{comment_id}", response_model=CommentItem)
async def update_comment(
    comment_id: int,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Edit a comment. Only the comment author can edit."""
    viewer = require_viewer(jwt_service, auth_token, "edit comments")

    try:
        return await update_comment_use_case.execute(
            UpdateCommentRequest(
                viewer=viewer, comment_id=comment_id, body=request.body
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: int,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Remove a comment.

    A comment with replies becomes a tombstone; one without is deleted
    together with its votes and saves.
    """
    viewer = require_viewer(jwt_service, auth_token, "delete comments")

    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(viewer=viewer, comment_id=comment_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
