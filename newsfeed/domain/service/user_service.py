"""User domain service."""

from typing import List, Sequence

import logfire

from newsfeed.domain.error import NotFoundError
from newsfeed.domain.model import User
from newsfeed.domain.repository import UserRepository
from newsfeed.domain.value import Handle, UserId, Viewer


class UserService:
    """Domain service for the locally mirrored user records."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=user_id):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=user_id)
                raise NotFoundError("User", user_id)
            return user

    async def get_by_ids(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        """Get several users at once, keyed by ID. Unknown IDs are left out."""
        if not user_ids:
            return {}
        users: List[User] = await self.user_repository.find_by_ids(user_ids)
        return {user.id: user for user in users}

    async def ensure_user(self, viewer: Viewer) -> User:
        """Get the mirror record of the caller, creating it on first sight.

        Args:
            viewer: Caller identity from the identity service

        Returns:
            The user record
        """
        with logfire.span("user_service.ensure_user", user_id=viewer.user_id):
            user = await self.user_repository.find_by_id(viewer.user_id)
            if user:
                return user

            user = await self.user_repository.create(
                User(
                    id=viewer.user_id,
                    handle=Handle(viewer.handle or f"user-{viewer.user_id}"),
                    role=viewer.role,
                    verified=viewer.verified,
                )
            )
            logfire.info(
                "User mirrored", user_id=user.id, role=user.role.value
            )
            return user
