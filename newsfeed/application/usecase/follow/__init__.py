"""Follow use cases."""

from .follow_author import (
    FollowAuthorRequest,
    FollowAuthorResponse,
    FollowAuthorUseCase,
    UnfollowAuthorUseCase,
)
from .get_author import GetAuthorRequest, GetAuthorResponse, GetAuthorUseCase
from .list_following import (
    AuthorItem,
    ListFollowingRequest,
    ListFollowingResponse,
    ListFollowingUseCase,
)

__all__ = [
    "FollowAuthorRequest",
    "FollowAuthorResponse",
    "FollowAuthorUseCase",
    "UnfollowAuthorUseCase",
    "GetAuthorRequest",
    "GetAuthorResponse",
    "GetAuthorUseCase",
    "AuthorItem",
    "ListFollowingRequest",
    "ListFollowingResponse",
    "ListFollowingUseCase",
]
