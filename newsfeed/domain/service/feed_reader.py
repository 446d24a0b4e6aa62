"""Ranked feed reader.

Serves pages of news or comments ordered by recency or by score, using seek
pagination: the caller passes the ID of the last item it has seen and the
reader continues strictly after that item's sort key. No offsets are used,
so pages neither skip nor repeat items when rows are inserted or removed
between requests.

Score ordering is (score DESC, created_at DESC, id DESC). Scores are not
unique, so a page continues in two steps: first the rest of the cursor's
score band, then, if the page isn't full yet, everything with a lower score.
"""

from typing import List, Optional

import logfire

from newsfeed.config import FeedSettings
from newsfeed.domain.error import InvalidArgumentError
from newsfeed.domain.model import ContentItem
from newsfeed.domain.repository import (
    CommentRepository,
    ContentRepository,
    NewsRepository,
)
from newsfeed.domain.value import FeedFilter, ParentType, SortKey, coerce_enum

from .base import Service


def resolve_page_size(page_size: Optional[int], feed_settings: FeedSettings) -> int:
    """Apply the default and upper bound to a requested page size.

    Raises:
        InvalidArgumentError: If the page size is negative
    """
    if page_size is None:
        return feed_settings.page_size
    if page_size < 0:
        raise InvalidArgumentError(f"Invalid page size: {page_size}")
    return min(page_size, feed_settings.max_page_size)


class FeedReader(Service):
    """Domain service paging through ranked feeds."""

    def __init__(
        self,
        news_repository: NewsRepository,
        comment_repository: CommentRepository,
        feed_settings: FeedSettings,
    ) -> None:
        self.news_repository = news_repository
        self.comment_repository = comment_repository
        self.feed_settings = feed_settings

    def _content_repository(self, kind: ParentType) -> ContentRepository:
        if kind is ParentType.NEWS:
            return self.news_repository
        return self.comment_repository

    def resolve_page_size(self, page_size: Optional[int]) -> int:
        return resolve_page_size(page_size, self.feed_settings)

    async def page(
        self,
        sort_key: SortKey | str,
        cursor_id: Optional[int],
        page_size: Optional[int],
        feed_filter: FeedFilter,
    ) -> List[ContentItem]:
        """Fetch the page of items following ``cursor_id``.

        Args:
            sort_key: RECENCY or SCORE
            cursor_id: ID of the last item already seen; None (or an ID that
                no longer resolves) starts from the top
            page_size: Maximum number of items; None uses the default
            feed_filter: Which items belong to the feed

        Returns:
            Up to ``page_size`` items in feed order. An empty list is a
            valid page, not an error.

        Raises:
            InvalidArgumentError: If sort_key is unknown or page_size negative
        """
        sort_key = coerce_enum(SortKey, sort_key, "sort key")
        limit = self.resolve_page_size(page_size)

        with logfire.span(
            "feed_reader.page",
            sort_key=sort_key.value,
            cursor_id=cursor_id,
            page_size=limit,
            kind=feed_filter.kind.value,
        ):
            if limit == 0:
                return []
            if feed_filter.author_ids is not None and not feed_filter.author_ids:
                return []

            repository = self._content_repository(feed_filter.kind)

            # The cursor's position comes from the item itself, even when the
            # item falls outside the filter
            position = None
            if cursor_id is not None:
                position = await repository.find_position(cursor_id)
                if position is None:
                    logfire.debug("Cursor did not resolve", cursor_id=cursor_id)

            if sort_key is SortKey.RECENCY:
                return await repository.seek_recency(feed_filter, position, limit)

            items: List[ContentItem] = []
            if position is not None:
                items.extend(
                    await repository.seek_score_band(feed_filter, position, limit)
                )

            if len(items) < limit:
                items.extend(
                    await repository.seek_below_score(
                        feed_filter,
                        position.score if position is not None else None,
                        limit - len(items),
                    )
                )

            return items
