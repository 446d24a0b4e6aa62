"""Follow domain service."""

from typing import List, Optional

import logfire
from sqlalchemy.exc import IntegrityError

from newsfeed.config import FeedSettings
from newsfeed.domain.error import (
    InvalidArgumentError,
    InvalidStateError,
    NotFoundError,
)
from newsfeed.domain.model import Follow, User
from newsfeed.domain.repository import FollowRepository, UserRepository
from newsfeed.domain.value import RecordPosition, UserId
from newsfeed.domain.value.common import ValueObject

from .base import Service
from .feed_reader import resolve_page_size


class FollowingPage(ValueObject):
    """One page of followed authors, with the position of the last follow read."""

    authors: List[User]
    next_position: Optional[RecordPosition] = None


class FollowService(Service):
    """Domain service for following authors."""

    def __init__(
        self,
        follow_repository: FollowRepository,
        user_repository: UserRepository,
        feed_settings: FeedSettings,
    ) -> None:
        """Initialize follow service.

        Args:
            follow_repository: Follow repository
            user_repository: User repository, for the follower counter
            feed_settings: Page size defaults
        """
        self.follow_repository = follow_repository
        self.user_repository = user_repository
        self.feed_settings = feed_settings

    async def _author(self, author_id: UserId) -> User:
        author = await self.user_repository.find_by_id(author_id)
        if author is None or not author.is_author:
            logfire.warn("Author not found", author_id=author_id)
            raise NotFoundError("Author", author_id)
        return author

    async def follow(self, user_id: UserId, author_id: UserId) -> Follow:
        """Start following an author.

        Raises:
            InvalidArgumentError: If the user tries to follow themselves
            NotFoundError: If the author doesn't exist
            InvalidStateError: If the user already follows the author
        """
        with logfire.span(
            "follow_service.follow", user_id=user_id, author_id=author_id
        ):
            if user_id == author_id:
                raise InvalidArgumentError("You can't follow yourself")

            await self._author(author_id)

            if await self.follow_repository.find(user_id, author_id):
                raise InvalidStateError("You already follow this author")

            try:
                follow = await self.follow_repository.create(
                    Follow(user_id=user_id, author_id=author_id)
                )
            except IntegrityError:
                logfire.warn(
                    "Duplicate follow attempt", user_id=user_id, author_id=author_id
                )
                raise InvalidStateError("You already follow this author")

            await self.user_repository.adjust_followers(author_id, 1)
            logfire.info("Author followed", user_id=user_id, author_id=author_id)
            return follow

    async def unfollow(self, user_id: UserId, author_id: UserId) -> None:
        """Stop following an author.

        Raises:
            InvalidStateError: If the user doesn't follow the author
        """
        with logfire.span(
            "follow_service.unfollow", user_id=user_id, author_id=author_id
        ):
            follow = await self.follow_repository.find(user_id, author_id)
            if follow is None or not await self.follow_repository.delete(follow.id):
                raise InvalidStateError("You are not following this author")

            await self.user_repository.adjust_followers(author_id, -1)
            logfire.info("Author unfollowed", user_id=user_id, author_id=author_id)

    async def is_following(self, user_id: UserId, author_id: UserId) -> bool:
        return await self.follow_repository.find(user_id, author_id) is not None

    async def followed_authors(
        self,
        user_id: UserId,
        after: Optional[RecordPosition] = None,
        page_size: Optional[int] = None,
    ) -> FollowingPage:
        """Authors the user follows, most recently followed first.

        Pages seek on the follow record's (created_at, id), so a cursor stays
        valid after the user unfollows the author behind it.

        Args:
            user_id: The user
            after: Position of the last follow record already seen
            page_size: Maximum number of follows; None uses the default

        Returns:
            The followed authors in follow order
        """
        limit = resolve_page_size(page_size, self.feed_settings)
        if limit == 0:
            return FollowingPage(authors=[])

        with logfire.span(
            "follow_service.followed_authors", user_id=user_id, page_size=limit
        ):
            follows = await self.follow_repository.seek_by_user(user_id, after, limit)
            authors = {
                user.id: user
                for user in await self.user_repository.find_by_ids(
                    [follow.author_id for follow in follows]
                )
            }

            next_position = None
            if len(follows) == limit:
                next_position = RecordPosition(
                    created_at=follows[-1].created_at, id=follows[-1].id
                )
            return FollowingPage(
                authors=[
                    authors[f.author_id] for f in follows if f.author_id in authors
                ],
                next_position=next_position,
            )
