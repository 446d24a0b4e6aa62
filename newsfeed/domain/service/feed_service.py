"""Feed façade: the concrete feeds callers ask for."""

from typing import List, Optional, Sequence

import logfire

from newsfeed.domain.error import NotFoundError, UnauthenticatedError
from newsfeed.domain.model import ContentItem, Save, Vote
from newsfeed.domain.repository import (
    CommentRepository,
    FollowRepository,
    NewsRepository,
    SaveRepository,
    UserRepository,
    VoteRepository,
)
from newsfeed.domain.value import (
    CommentId,
    FeedFilter,
    NewsId,
    NewsOrigin,
    ParentType,
    RecordPosition,
    SortKey,
    UserId,
    Viewer,
    VoteKind,
)
from newsfeed.domain.value.common import ValueObject

from .base import Service
from .feed_reader import FeedReader


class EngagedPage(ValueObject):
    """One page of a liked or saved listing.

    ``next_position`` is the last record read when the page came back full,
    even if some of the items it points at are gone.
    """

    items: List[ContentItem]
    next_position: Optional[RecordPosition] = None


class FeedService(Service):
    """Domain service composing feeds out of the ranked feed reader.

    Content feeds fix a filter and delegate to ``FeedReader``. Liked and
    saved listings page through the user's own records instead, then fetch
    the referenced items in bulk.
    """

    def __init__(
        self,
        feed_reader: FeedReader,
        news_repository: NewsRepository,
        comment_repository: CommentRepository,
        vote_repository: VoteRepository,
        save_repository: SaveRepository,
        follow_repository: FollowRepository,
        user_repository: UserRepository,
    ) -> None:
        self.feed_reader = feed_reader
        self.news_repository = news_repository
        self.comment_repository = comment_repository
        self.vote_repository = vote_repository
        self.save_repository = save_repository
        self.follow_repository = follow_repository
        self.user_repository = user_repository

    async def home_feed(
        self,
        sort_key: SortKey | str,
        cursor_id: Optional[NewsId],
        viewer: Optional[Viewer] = None,
        followed_only: bool = False,
        page_size: Optional[int] = None,
        origin: Optional[NewsOrigin] = None,
    ) -> List[ContentItem]:
        """Live news from everyone, or only from followed authors.

        With ``origin`` set, only news written on the site or only ingested
        news is listed.

        Raises:
            UnauthenticatedError: If ``followed_only`` is asked anonymously
        """
        author_ids = None
        if followed_only:
            if viewer is None:
                raise UnauthenticatedError()
            author_ids = await self.follow_repository.find_author_ids(viewer.user_id)

        return await self.feed_reader.page(
            sort_key,
            cursor_id,
            page_size,
            FeedFilter.news(author_ids=author_ids, origin=origin),
        )

    async def author_feed(
        self,
        author_id: UserId,
        sort_key: SortKey | str,
        cursor_id: Optional[NewsId],
        page_size: Optional[int] = None,
    ) -> List[ContentItem]:
        """Live news written by one author.

        Raises:
            NotFoundError: If the author is unknown
        """
        if await self.user_repository.find_by_id(author_id) is None:
            raise NotFoundError("Author", author_id)

        return await self.feed_reader.page(
            sort_key,
            cursor_id,
            page_size,
            FeedFilter.news(author_ids=frozenset({author_id})),
        )

    async def thread(
        self,
        news_id: NewsId,
        sort_key: SortKey | str,
        cursor_id: Optional[CommentId],
        page_size: Optional[int] = None,
    ) -> List[ContentItem]:
        """Top-level comments of a news item.

        Raises:
            NotFoundError: If the news item doesn't exist
        """
        if await self.news_repository.find_by_id(news_id) is None:
            raise NotFoundError("News", news_id)

        return await self.feed_reader.page(
            sort_key,
            cursor_id,
            page_size,
            FeedFilter.children_of(news_id, ParentType.NEWS),
        )

    async def replies(
        self,
        comment_id: CommentId,
        sort_key: SortKey | str,
        cursor_id: Optional[CommentId],
        page_size: Optional[int] = None,
    ) -> List[ContentItem]:
        """Direct replies to a comment.

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        if await self.comment_repository.find_by_id(comment_id) is None:
            raise NotFoundError("Comment", comment_id)

        return await self.feed_reader.page(
            sort_key,
            cursor_id,
            page_size,
            FeedFilter.children_of(comment_id, ParentType.COMMENT),
        )

    async def liked_items(
        self,
        user_id: UserId,
        after: Optional[RecordPosition] = None,
        page_size: Optional[int] = None,
    ) -> EngagedPage:
        """Items the user liked, most recently liked first.

        Pages seek on the like record's (created_at, id), so a cursor stays
        valid after the like behind it is withdrawn.

        Args:
            user_id: The user
            after: Position of the last like record already seen
            page_size: Maximum number of records; None uses the default

        Returns:
            Liked items in like order; items that no longer exist are skipped
        """
        limit = self.feed_reader.resolve_page_size(page_size)

        with logfire.span("feed_service.liked_items", user_id=user_id, page_size=limit):
            if limit == 0:
                return EngagedPage(items=[])

            votes = await self.vote_repository.seek_by_user(
                user_id, VoteKind.LIKE, after, limit
            )
            return await self._page_of(votes, limit)

    async def saved_items(
        self,
        user_id: UserId,
        after: Optional[RecordPosition] = None,
        page_size: Optional[int] = None,
    ) -> EngagedPage:
        """Items the user saved, most recently saved first.

        Same cursor rules as ``liked_items``.
        """
        limit = self.feed_reader.resolve_page_size(page_size)

        with logfire.span("feed_service.saved_items", user_id=user_id, page_size=limit):
            if limit == 0:
                return EngagedPage(items=[])

            saves = await self.save_repository.seek_by_user(user_id, after, limit)
            return await self._page_of(saves, limit)

    async def _page_of(
        self, records: Sequence[Vote | Save], limit: int
    ) -> EngagedPage:
        next_position = None
        if len(records) == limit:
            last = records[-1]
            next_position = RecordPosition(created_at=last.created_at, id=last.id)
        return EngagedPage(
            items=await self._fetch_referenced(records), next_position=next_position
        )

    async def _fetch_referenced(
        self, records: Sequence[Vote | Save]
    ) -> List[ContentItem]:
        """Fetch the items behind a page of records, one query per kind."""
        news_ids = [r.parent_id for r in records if r.parent_type is ParentType.NEWS]
        comment_ids = [
            r.parent_id for r in records if r.parent_type is ParentType.COMMENT
        ]

        found: dict[tuple[ParentType, int], ContentItem] = {}
        if news_ids:
            for news in await self.news_repository.find_by_ids(news_ids):
                found[(ParentType.NEWS, news.id)] = news
        if comment_ids:
            for comment in await self.comment_repository.find_by_ids(comment_ids):
                found[(ParentType.COMMENT, comment.id)] = comment

        items = []
        for record in records:
            item = found.get((record.parent_type, record.parent_id))
            if item is None:
                logfire.debug(
                    "Referenced item missing",
                    parent_id=record.parent_id,
                    parent_type=record.parent_type.value,
                )
                continue
            items.append(item)
        return items
