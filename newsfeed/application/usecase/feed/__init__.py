"""Feed use cases."""

from .items import CommentItem, ContentItemView, NewsItem, to_item, to_items
from .list_comments import (
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
)
from .list_engaged import (
    EngagedList,
    ListEngagedRequest,
    ListEngagedResponse,
    ListEngagedUseCase,
    RecordCursorView,
)
from .list_news import ListNewsRequest, ListNewsResponse, ListNewsUseCase

__all__ = [
    "CommentItem",
    "ContentItemView",
    "NewsItem",
    "to_item",
    "to_items",
    "ListCommentsRequest",
    "ListCommentsResponse",
    "ListCommentsUseCase",
    "EngagedList",
    "ListEngagedRequest",
    "ListEngagedResponse",
    "ListEngagedUseCase",
    "RecordCursorView",
    "ListNewsRequest",
    "ListNewsResponse",
    "ListNewsUseCase",
]
