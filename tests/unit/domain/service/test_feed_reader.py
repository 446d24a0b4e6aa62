"""Unit tests for FeedReader."""

import pytest

from newsfeed.domain.error import InvalidArgumentError
from newsfeed.domain.repository import CommentRepository, NewsRepository
from newsfeed.domain.service import FeedReader
from newsfeed.domain.value import FeedFilter, ParentType, SortKey, UserId
from tests.conftest import at, seed_comment, seed_news
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


async def read_all(reader, sort_key, feed_filter, page_size):
    """Follow next cursors until a short page, collecting every page."""
    pages = []
    cursor = None
    while True:
        page = await reader.page(sort_key, cursor, page_size, feed_filter)
        pages.append(page)
        if len(page) < page_size:
            return pages
        cursor = page[-1].id


class TestRecencyFeed:
    """Tests for newest-first pagination."""

    @pytest.mark.asyncio
    async def test_pages_cover_every_item_once_in_order(self, unit_env):
        """Following cursors should list each item exactly once, newest first."""
        # Arrange
        reader = await unit_env.get(FeedReader)
        news_repo = await unit_env.get(NewsRepository)
        created = [
            await seed_news(news_repo, title=f"News {i}", created_at=at(i))
            for i in range(7)
        ]

        # Act
        pages = await read_all(reader, SortKey.RECENCY, FeedFilter.news(), 3)

        # Assert
        assert [len(p) for p in pages] == [3, 3, 1]
        ids = [item.id for page in pages for item in page]
        assert ids == [n.id for n in reversed(created)]

    @pytest.mark.asyncio
    async def test_same_timestamp_orders_by_id(self, unit_env):
        """Items created at the same instant should be ordered by ID."""
        # Arrange
        reader = await unit_env.get(FeedReader)
        news_repo = await unit_env.get(NewsRepository)
        first = await seed_news(news_repo, created_at=at(0))
        second = await seed_news(news_repo, created_at=at(0))

        # Act
        page = await reader.page(SortKey.RECENCY, None, 10, FeedFilter.news())

        # Assert
        assert [n.id for n in page] == [second.id, first.id]

    @pytest.mark.asyncio
    async def test_new_items_do_not_shift_later_pages(self, unit_env):
        """An item published between requests should not repeat or skip items."""
        # Arrange
        reader = await unit_env.get(FeedReader)
        news_repo = await unit_env.get(NewsRepository)
        created = [
            await seed_news(news_repo, title=f"News {i}", created_at=at(i))
            for i in range(5)
        ]
        first_page = await reader.page(SortKey.RECENCY, None, 2, FeedFilter.news())

        # Act
        await seed_news(news_repo, title="Breaking", created_at=at(10))
        second_page = await reader.page(
            SortKey.RECENCY, first_page[-1].id, 2, FeedFilter.news()
        )

        # Assert
        assert [n.id for n in first_page] == [created[4].id, created[3].id]
        assert [n.id for n in second_page] == [created[2].id, created[1].id]

    @pytest.mark.asyncio
    async def test_unknown_cursor_starts_from_top(self, unit_env):
        """A cursor that no longer resolves should restart the feed."""
        # Arrange
        reader = await unit_env.get(FeedReader)
        news_repo = await unit_env.get(NewsRepository)
        newest = await seed_news(news_repo, created_at=at(5))
        await seed_news(news_repo, created_at=at(1))

        # Act
        page = await reader.page(SortKey.RECENCY, 12345, 1, FeedFilter.news())

        # Assert
        assert [n.id for n in page] == [newest.id]

    @pytest.mark.asyncio
    async def test_deleted_news_is_left_out(self, unit_env):
        """Tombstoned news should not appear in news feeds."""
        # Arrange
        reader = await unit_env.get(FeedReader)
        news_repo = await unit_env.get(NewsRepository)
        live = await seed_news(news_repo, created_at=at(1))
        await seed_news(news_repo, created_at=at(2), deleted=True)

        # Act
        page = await reader.page(SortKey.RECENCY, None, 10, FeedFilter.news())

        # Assert
        assert [n.id for n in page] == [live.id]

    @pytest.mark.asyncio
    async def test_author_filter(self, unit_env):
        """Restricting to authors should only list their news."""
        # Arrange
        reader = await unit_env.get(FeedReader)
        news_repo = await unit_env.get(NewsRepository)
        mine = await seed_news(news_repo, author_id=1, created_at=at(1))
        await seed_news(news_repo, author_id=2, created_at=at(2))
        await seed_news(news_repo, created_at=at(3))

        # Act
        page = await reader.page(
            SortKey.RECENCY,
            None,
            10,
            FeedFilter.news(author_ids=frozenset({UserId(1)})),
        )

        # Assert
        assert [n.id for n in page] == [mine.id]

    @pytest.mark.asyncio
    async def test_empty_author_set_yields_empty_page(self, unit_env):
        """Following nobody should give an empty feed, not everything."""
        # Arrange
        reader = await unit_env.get(FeedReader)
        await seed_news(await unit_env.get(NewsRepository))

        # Act
        page = await reader.page(
            SortKey.RECENCY, None, 10, FeedFilter.news(author_ids=frozenset())
        )

        # Assert
        assert page == []


class TestScoreFeed:
    """Tests for best-first pagination across tied scores."""

    @pytest.mark.asyncio
    async def test_pages_cross_score_bands_without_gaps(self, unit_env):
        """Scores [5, 5, 3, 3, 3, 1] in pages of 3 should split inside a band."""
        # Arrange
        reader = await unit_env.get(FeedReader)
        news_repo = await unit_env.get(NewsRepository)
        five_old = await seed_news(news_repo, likes=5, created_at=at(0))
        five_new = await seed_news(news_repo, likes=5, created_at=at(1))
        three_a = await seed_news(news_repo, likes=3, created_at=at(2))
        three_b = await seed_news(news_repo, likes=3, created_at=at(3))
        three_c = await seed_news(news_repo, likes=3, created_at=at(4))
        one = await seed_news(news_repo, likes=1, created_at=at(5))

        # Act
        first = await reader.page(SortKey.SCORE, None, 3, FeedFilter.news())
        second = await reader.page(SortKey.SCORE, first[-1].id, 3, FeedFilter.news())
        third = await reader.page(SortKey.SCORE, second[-1].id, 3, FeedFilter.news())

        # Assert
        assert [n.id for n in first] == [five_new.id, five_old.id, three_c.id]
        assert [n.id for n in second] == [three_b.id, three_a.id, one.id]
        assert third == []

    @pytest.mark.asyncio
    async def test_score_accounts_for_dislikes(self, unit_env):
        """Ordering should use likes minus dislikes."""
        # Arrange
        reader = await unit_env.get(FeedReader)
        news_repo = await unit_env.get(NewsRepository)
        controversial = await seed_news(news_repo, likes=10, dislikes=9)
        liked = await seed_news(news_repo, likes=2)
        disliked = await seed_news(news_repo, dislikes=3)

        # Act
        page = await reader.page(SortKey.SCORE, None, 10, FeedFilter.news())

        # Assert
        assert [n.id for n in page] == [liked.id, controversial.id, disliked.id]

    @pytest.mark.asyncio
    async def test_cursor_outside_filter_still_positions_page(self, unit_env):
        """A cursor item that left the feed should still mark where to resume."""
        # Arrange
        reader = await unit_env.get(FeedReader)
        news_repo = await unit_env.get(NewsRepository)
        top = await seed_news(news_repo, likes=9)
        removed = await seed_news(news_repo, likes=5, deleted=True)
        lower = await seed_news(news_repo, likes=1)

        # Act
        page = await reader.page(SortKey.SCORE, removed.id, 10, FeedFilter.news())

        # Assert
        assert [n.id for n in page] == [lower.id]
        assert top.id not in [n.id for n in page]


class TestThreadFeed:
    """Tests for paging through comments."""

    @pytest.mark.asyncio
    async def test_children_include_tombstones(self, unit_env):
        """Removed comments with replies should keep their place in the thread."""
        # Arrange
        reader = await unit_env.get(FeedReader)
        comment_repo = await unit_env.get(CommentRepository)
        news = await seed_news(await unit_env.get(NewsRepository))
        live = await seed_comment(comment_repo, news.id, created_at=at(1))
        tombstone = await seed_comment(
            comment_repo, news.id, body="[deleted]", deleted=True, created_at=at(2)
        )
        await seed_comment(comment_repo, live.id, ParentType.COMMENT)

        # Act
        page = await reader.page(
            SortKey.RECENCY,
            None,
            10,
            FeedFilter.children_of(news.id, ParentType.NEWS),
        )

        # Assert
        assert [c.id for c in page] == [tombstone.id, live.id]


class TestPageSize:
    """Tests for page size handling."""

    @pytest.mark.asyncio
    async def test_zero_page_size_returns_empty_page(self, unit_env):
        """A page size of zero should be a valid, empty page."""
        # Arrange
        reader = await unit_env.get(FeedReader)
        await seed_news(await unit_env.get(NewsRepository))

        # Act
        page = await reader.page(SortKey.SCORE, None, 0, FeedFilter.news())

        # Assert
        assert page == []

    @pytest.mark.asyncio
    async def test_negative_page_size_is_rejected(self, unit_env):
        """A negative page size should be rejected."""
        # Arrange
        reader = await unit_env.get(FeedReader)

        # Act & Assert
        with pytest.raises(InvalidArgumentError, match="Invalid page size"):
            await reader.page(SortKey.RECENCY, None, -1, FeedFilter.news())

    @pytest.mark.asyncio
    async def test_default_and_maximum_page_sizes(self, unit_env):
        """Missing sizes should use the default and large ones be capped."""
        # Arrange
        reader = await unit_env.get(FeedReader)
        news_repo = await unit_env.get(NewsRepository)
        for i in range(60):
            await seed_news(news_repo, title=f"News {i}")

        # Act
        default_page = await reader.page(SortKey.RECENCY, None, None, FeedFilter.news())
        capped_page = await reader.page(SortKey.RECENCY, None, 500, FeedFilter.news())

        # Assert
        assert len(default_page) == 10
        assert len(capped_page) == 50

    @pytest.mark.asyncio
    async def test_unknown_sort_key_is_rejected(self, unit_env):
        """A sort key other than recency or score should be rejected."""
        # Arrange
        reader = await unit_env.get(FeedReader)

        # Act & Assert
        with pytest.raises(InvalidArgumentError, match="Invalid sort key"):
            await reader.page("hot", None, 10, FeedFilter.news())
