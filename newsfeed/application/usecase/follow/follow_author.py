"""Follow and unfollow author use cases."""

from pydantic import BaseModel

from newsfeed.application.usecase.base import BaseUseCase
from newsfeed.domain.service import FollowService, UserService
from newsfeed.domain.value import UserId, Viewer


class FollowAuthorRequest(BaseModel):
    """Follow or unfollow request."""

    viewer: Viewer
    author_id: int


class FollowAuthorResponse(BaseModel):
    """Follow state after the change."""

    author_id: int
    following: bool
    followers: int
    message: str


class FollowAuthorUseCase(BaseUseCase):
    """Use case for following an author."""

    def __init__(
        self, follow_service: FollowService, user_service: UserService
    ) -> None:
        self.follow_service = follow_service
        self.user_service = user_service

    async def execute(self, request: FollowAuthorRequest) -> FollowAuthorResponse:
        """Execute follow flow.

        Raises:
            InvalidArgumentError: If following oneself
            NotFoundError: If the author doesn't exist
            InvalidStateError: If already following
        """
        author_id = UserId(request.author_id)
        await self.follow_service.follow(request.viewer.user_id, author_id)
        author = await self.user_service.get_by_id(author_id)
        return FollowAuthorResponse(
            author_id=request.author_id,
            following=True,
            followers=author.followers,
            message="Followed successfully",
        )


class UnfollowAuthorUseCase(BaseUseCase):
    """Use case for unfollowing an author."""

    def __init__(
        self, follow_service: FollowService, user_service: UserService
    ) -> None:
        self.follow_service = follow_service
        self.user_service = user_service

    async def execute(self, request: FollowAuthorRequest) -> FollowAuthorResponse:
        """Execute unfollow flow.

        Raises:
            InvalidStateError: If not following
        """
        author_id = UserId(request.author_id)
        await self.follow_service.unfollow(request.viewer.user_id, author_id)
        author = await self.user_service.get_by_id(author_id)
        return FollowAuthorResponse(
            author_id=request.author_id,
            following=False,
            followers=author.followers,
            message="Unfollowed successfully",
        )
