"""Shared repository contract for votable content (news and comments).

The ranked feed reader and the engagement ledger only talk to content through
this interface, so the same algorithms serve both kinds of item.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, Sequence, TypeVar

from newsfeed.domain.model.content import ContentItem
from newsfeed.domain.value import FeedFilter, FeedPosition

ItemT = TypeVar("ItemT", bound=ContentItem)


class ContentRepository(ABC, Generic[ItemT]):
    """Repository primitives shared by news items and comments.

    Seek methods never use offsets: each takes the position of the last item
    the caller has seen and returns the items strictly after it.
    """

    @abstractmethod
    async def find_by_id(self, item_id: int) -> Optional[ItemT]:
        """Find an item by ID.

        Args:
            item_id: The item's unique identifier

        Returns:
            The item if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, item_ids: Sequence[int]) -> List[ItemT]:
        """Find several items at once (batch query).

        Args:
            item_ids: IDs to look up

        Returns:
            The items that exist, in no particular order
        """
        pass

    @abstractmethod
    async def find_position(self, item_id: int) -> Optional[FeedPosition]:
        """Read the sort key of an item, regardless of any feed filter.

        Args:
            item_id: The item's unique identifier

        Returns:
            (score, created_at, id) of the item, None if it doesn't exist
        """
        pass

    @abstractmethod
    async def seek_recency(
        self,
        feed_filter: FeedFilter,
        after: Optional[FeedPosition],
        limit: int,
    ) -> List[ItemT]:
        """Items older than ``after``, newest first.

        Ordered by (created_at DESC, id DESC). With no position, starts from
        the newest item.
        """
        pass

    @abstractmethod
    async def seek_score_band(
        self,
        feed_filter: FeedFilter,
        cursor: FeedPosition,
        limit: int,
    ) -> List[ItemT]:
        """Remaining items with exactly the cursor's score.

        Returns items with ``score == cursor.score`` that sort after the
        cursor by (created_at DESC, id DESC).
        """
        pass

    @abstractmethod
    async def seek_below_score(
        self,
        feed_filter: FeedFilter,
        score: Optional[int],
        limit: int,
    ) -> List[ItemT]:
        """Items with a score strictly below ``score``.

        Ordered by (score DESC, created_at DESC, id DESC). With no score,
        starts from the top of the ranking.
        """
        pass

    @abstractmethod
    async def apply_vote_delta(
        self,
        item_id: int,
        likes_delta: int,
        dislikes_delta: int,
    ) -> Optional[ItemT]:
        """Atomically adjust the vote counters of an item.

        The score is recomputed from the adjusted counters in the same
        statement. Never a read-modify-write of previously loaded values.

        Args:
            item_id: The item to adjust
            likes_delta: Change to apply to ``likes``
            dislikes_delta: Change to apply to ``dislikes``

        Returns:
            The item with its new counters, None if it doesn't exist
        """
        pass

    @abstractmethod
    async def increment_reply_count(self, item_id: int) -> Optional[ItemT]:
        """Atomically add one to ``reply_count``.

        Returns:
            The updated item, None if it doesn't exist
        """
        pass
