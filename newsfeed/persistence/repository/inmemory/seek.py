"""Seek pagination over in-memory rows, mirroring the SQL queries."""

from typing import Iterable, List, Optional, TypeVar

from newsfeed.domain.model import ContentItem
from newsfeed.domain.value import FeedFilter, FeedPosition, RecordPosition

T = TypeVar("T")
ItemT = TypeVar("ItemT", bound=ContentItem)


def matches(item: ContentItem, feed_filter: FeedFilter) -> bool:
    """Whether an item belongs to a feed."""
    if feed_filter.parent_id is not None:
        if (
            getattr(item, "parent_id", None) != feed_filter.parent_id
            or getattr(item, "parent_type", None) is not feed_filter.parent_type
        ):
            return False
    author_ids = feed_filter.author_ids
    if author_ids is not None and item.author_id not in author_ids:
        return False
    if feed_filter.origin is not None:
        if getattr(item, "origin", None) is not feed_filter.origin:
            return False
    if not feed_filter.include_deleted and item.deleted:
        return False
    return True


def older_than(row, position: FeedPosition | RecordPosition) -> bool:
    return (row.created_at, row.id) < (position.created_at, position.id)


def newest_first(rows: Iterable[T]) -> List[T]:
    return sorted(rows, key=lambda row: (row.created_at, row.id), reverse=True)


def recency_page(
    items: Iterable[ItemT],
    feed_filter: FeedFilter,
    after: Optional[FeedPosition],
    limit: int,
) -> List[ItemT]:
    rows = [
        item
        for item in items
        if matches(item, feed_filter)
        and (after is None or older_than(item, after))
    ]
    return newest_first(rows)[:limit]


def score_band_page(
    items: Iterable[ItemT],
    feed_filter: FeedFilter,
    cursor: FeedPosition,
    limit: int,
) -> List[ItemT]:
    rows = [
        item
        for item in items
        if matches(item, feed_filter)
        and item.score == cursor.score
        and older_than(item, cursor)
    ]
    return newest_first(rows)[:limit]


def below_score_page(
    items: Iterable[ItemT],
    feed_filter: FeedFilter,
    score: Optional[int],
    limit: int,
) -> List[ItemT]:
    rows = [
        item
        for item in items
        if matches(item, feed_filter) and (score is None or item.score < score)
    ]
    rows.sort(key=lambda item: (item.score, item.created_at, item.id), reverse=True)
    return rows[:limit]
