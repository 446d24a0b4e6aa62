"""In-memory base for news and comment repositories."""

from typing import Generic, List, Optional, Sequence

from sqlalchemy.exc import IntegrityError

from newsfeed.domain.repository.content import ItemT
from newsfeed.domain.value import FeedFilter, FeedPosition

from .seek import below_score_page, recency_page, score_band_page
from .store import InMemoryStore


class InMemoryContentRepository(Generic[ItemT]):
    """Seek queries and counter updates shared by news and comments.

    Subclasses point ``table`` at one of the store's dicts.
    """

    table: str

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self.store = store or InMemoryStore()

    @property
    def _items(self) -> dict[int, ItemT]:
        return getattr(self.store, self.table)

    def _insert(self, item: ItemT) -> ItemT:
        created = item.model_copy(update={"id": self.store.next_id(self.table)})
        self._items[created.id] = created
        return created

    async def find_by_id(self, item_id: int) -> Optional[ItemT]:
        return self._items.get(item_id)

    async def find_by_ids(self, item_ids: Sequence[int]) -> List[ItemT]:
        return [self._items[i] for i in set(item_ids) if i in self._items]

    async def find_position(self, item_id: int) -> Optional[FeedPosition]:
        item = self._items.get(item_id)
        return item.position if item else None

    async def seek_recency(
        self,
        feed_filter: FeedFilter,
        after: Optional[FeedPosition],
        limit: int,
    ) -> List[ItemT]:
        return recency_page(self._items.values(), feed_filter, after, limit)

    async def seek_score_band(
        self,
        feed_filter: FeedFilter,
        cursor: FeedPosition,
        limit: int,
    ) -> List[ItemT]:
        return score_band_page(self._items.values(), feed_filter, cursor, limit)

    async def seek_below_score(
        self,
        feed_filter: FeedFilter,
        score: Optional[int],
        limit: int,
    ) -> List[ItemT]:
        return below_score_page(self._items.values(), feed_filter, score, limit)

    async def apply_vote_delta(
        self,
        item_id: int,
        likes_delta: int,
        dislikes_delta: int,
    ) -> Optional[ItemT]:
        """Adjust counters in one step (no await between read and write).

        Raises:
            IntegrityError: If a counter would go negative
        """
        item = self._items.get(item_id)
        if item is None:
            return None

        likes = item.likes + likes_delta
        dislikes = item.dislikes + dislikes_delta
        if likes < 0 or dislikes < 0:
            raise IntegrityError("Negative vote counter", None, Exception())

        updated = item.model_copy(update={"likes": likes, "dislikes": dislikes})
        self._items[item_id] = updated
        return updated

    async def increment_reply_count(self, item_id: int) -> Optional[ItemT]:
        item = self._items.get(item_id)
        if item is None:
            return None

        updated = item.model_copy(update={"reply_count": item.reply_count + 1})
        self._items[item_id] = updated
        return updated
