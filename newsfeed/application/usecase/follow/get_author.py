"""Get author profile use case."""

from datetime import datetime
from typing import Optional

import logfire
from pydantic import BaseModel

from newsfeed.application.usecase.base import BaseUseCase
from newsfeed.domain.service import FollowService, UserService
from newsfeed.domain.value import Handle, UserId, UserRole, Viewer


class GetAuthorRequest(BaseModel):
    """Get author request."""

    author_id: int
    viewer: Optional[Viewer] = None


class GetAuthorResponse(BaseModel):
    """Public profile of an author.

    ``is_following`` is None for anonymous callers.
    """

    author_id: int
    handle: Handle
    role: UserRole
    verified: bool
    followers: int
    written_news: int
    created_at: datetime
    is_following: Optional[bool] = None


class GetAuthorUseCase(BaseUseCase):
    """Use case for reading an author's profile."""

    def __init__(
        self, user_service: UserService, follow_service: FollowService
    ) -> None:
        self.user_service = user_service
        self.follow_service = follow_service

    async def execute(self, request: GetAuthorRequest) -> GetAuthorResponse:
        """Execute get author flow.

        Raises:
            NotFoundError: If the author is unknown
        """
        author_id = UserId(request.author_id)

        with logfire.span("get_author.execute", author_id=request.author_id):
            author = await self.user_service.get_by_id(author_id)

            is_following = None
            if request.viewer is not None:
                is_following = await self.follow_service.is_following(
                    request.viewer.user_id, author_id
                )

            return GetAuthorResponse(
                author_id=author.id,
                handle=author.handle,
                role=author.role,
                verified=author.verified,
                followers=author.followers,
                written_news=author.written_news,
                created_at=author.created_at,
                is_following=is_following,
            )
