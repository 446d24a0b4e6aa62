"""News routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel, Field

from newsfeed.application.usecase.feed import (
    ListNewsRequest,
    ListNewsResponse,
    ListNewsUseCase,
    NewsItem,
)
from newsfeed.application.usecase.news import (
    CreateNewsRequest,
    CreateNewsUseCase,
    DeleteNewsRequest,
    DeleteNewsUseCase,
    GetNewsRequest,
    GetNewsUseCase,
    IngestedArticle,
    IngestNewsRequest,
    IngestNewsResponse,
    IngestNewsUseCase,
    UpdateNewsRequest,
    UpdateNewsUseCase,
)
from newsfeed.domain.error import DomainError
from newsfeed.domain.service import JWTService
from newsfeed.interface.api.auth import require_viewer
from newsfeed.interface.error import to_http_exception

router = APIRouter(tags=["news"], route_class=DishkaRoute)


@router.get("/news", response_model=ListNewsResponse)
async def list_news(
    list_news_use_case: FromDishka[ListNewsUseCase],
    jwt_service: FromDishka[JWTService],
    sort: str = "recency",
    cursor: Optional[int] = None,
    page_size: Optional[int] = None,
    followed: bool = False,
    origin: Optional[str] = None,
    auth_token: str | None = Cookie(default=None),
) -> ListNewsResponse:
    """Home feed: live news, newest or best first.

    Authentication is optional. Signed-in callers get their vote and save
    state on every item and may restrict the feed to followed authors.

    Args:
        list_news_use_case: List news use case from DI
        jwt_service: JWT service for token verification (injected)
        sort: "recency" or "score"
        cursor: ID of the last news item already seen
        page_size: Items per page
        followed: Only news from authors the caller follows
        origin: "created" or "ingested" to list only news of that origin
        auth_token: JWT token from cookie

    Returns:
        One page of news and the cursor for the next one
    """
    viewer = jwt_service.get_viewer_from_token(auth_token)

    try:
        request = ListNewsRequest(
            sort=sort,
            cursor=cursor,
            page_size=page_size,
            followed_only=followed,
            origin=origin,
            viewer=viewer,
        )
        return await list_news_use_case.execute(request)
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/authors/{author_id}/news", response_model=ListNewsResponse)
async def list_author_news(
    author_id: int,
    list_news_use_case: FromDishka[ListNewsUseCase],
    jwt_service: FromDishka[JWTService],
    sort: str = "recency",
    cursor: Optional[int] = None,
    page_size: Optional[int] = None,
    auth_token: str | None = Cookie(default=None),
) -> ListNewsResponse:
    """Live news written by one author.

    Returns:
        One page of the author's news and the cursor for the next one

    Raises:
        HTTPException: 404 if the author is unknown
    """
    viewer = jwt_service.get_viewer_from_token(auth_token)

    try:
        request = ListNewsRequest(
            sort=sort,
            cursor=cursor,
            page_size=page_size,
            author_id=author_id,
            viewer=viewer,
        )
        return await list_news_use_case.execute(request)
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/news/{news_id}", response_model=NewsItem)
async def get_news(
    news_id: int,
    get_news_use_case: FromDishka[GetNewsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> NewsItem:
    """Get a single news item, tombstones included."""
    viewer = jwt_service.get_viewer_from_token(auth_token)

    try:
        return await get_news_use_case.execute(
            GetNewsRequest(news_id=news_id, viewer=viewer)
        )
    except DomainError as e:
        raise to_http_exception(e)


class CreateNewsAPIRequest(BaseModel):
    """API request for publishing news."""

    title: str = Field(min_length=1, max_length=300)
    body: str = ""
    sources: str = ""
    tags: str = ""
    thumbnail: Optional[str] = None
    link: Optional[str] = None


@router.post(
    "/news",
    response_model=NewsItem,
    status_code=status.HTTP_201_CREATED,
)
async def create_news(
    request: CreateNewsAPIRequest,
    create_news_use_case: FromDishka[CreateNewsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> NewsItem:
    """Publish a news item.

    Requires a verified author.

    Args:
        request: News content
        create_news_use_case: Create news use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created news item

    Raises:
        HTTPException: 401 if not authenticated, 403 if not a verified author
    """
    viewer = require_viewer(jwt_service, auth_token, "publish news")

    try:
        return await create_news_use_case.execute(
            CreateNewsRequest(viewer=viewer, **request.model_dump())
        )
    except DomainError as e:
        raise to_http_exception(e)


class IngestNewsAPIRequest(BaseModel):
    """API request for importing externally sourced news."""

    articles: list[IngestedArticle]
    source_cursor: Optional[str] = None


@router.post("/news/ingest", response_model=IngestNewsResponse)
async def ingest_news(
    request: IngestNewsAPIRequest,
    ingest_news_use_case: FromDishka[IngestNewsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> IngestNewsResponse:
    """Import a batch of news from an external source.

    Articles whose ``external_id`` is already known are skipped, so a batch
    can be replayed. ``source_cursor`` is echoed back for the next fetch.
    """
    viewer = require_viewer(jwt_service, auth_token, "import news")

    try:
        return await ingest_news_use_case.execute(
            IngestNewsRequest(
                viewer=viewer,
                articles=request.articles,
                source_cursor=request.source_cursor,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


class UpdateNewsAPIRequest(BaseModel):
    """API request for editing news. Omitted fields stay as they are."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=300)
    body: Optional[str] = None
    sources: Optional[str] = None
    tags: Optional[str] = None
    thumbnail: Optional[str] = None
    link: Optional[str] = None


@router.patch("/news/{news_id}", response_model=NewsItem)
async def update_news(
    news_id: int,
    request: UpdateNewsAPIRequest,
    update_news_use_case: FromDishka[UpdateNewsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> NewsItem:
    """Edit a news item. Only its author can edit.

    Raises:
        HTTPException: 401, 403 if not the author, 404 if not found
    """
    viewer = require_viewer(jwt_service, auth_token, "edit news")

    try:
        return await update_news_use_case.execute(
            UpdateNewsRequest(
                viewer=viewer,
                news_id=news_id,
                **request.model_dump(exclude_none=True),
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.delete("/news/{news_id}", response_model=NewsItem)
async def delete_news(
    news_id: int,
    delete_news_use_case: FromDishka[DeleteNewsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> NewsItem:
    """Delete a news item, leaving a tombstone so its comments stay reachable.

    Returns:
        The tombstone
    """
    viewer = require_viewer(jwt_service, auth_token, "delete news")

    try:
        return await delete_news_use_case.execute(
            DeleteNewsRequest(viewer=viewer, news_id=news_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
