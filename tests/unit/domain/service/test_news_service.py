"""Unit tests for NewsService."""

import pytest

from newsfeed.domain.error import (
    ContentDeletedError,
    ForbiddenError,
    NotAuthorizedError,
    NotFoundError,
)
from newsfeed.domain.model import News
from newsfeed.domain.repository import NewsRepository, UserRepository
from newsfeed.domain.service import NewsService
from newsfeed.domain.value import NewsOrigin
from tests.conftest import author, reader
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


def ingested(external_id: str, title: str = "Wire story") -> News:
    return News(
        title=title,
        link=f"https://example.org/{external_id}",
        origin=NewsOrigin.INGESTED,
        external_id=external_id,
    )


class TestCreateNews:
    """Tests for publishing news."""

    @pytest.mark.asyncio
    async def test_verified_author_publishes(self, unit_env):
        """A verified author should publish and be mirrored locally."""
        # Arrange
        service = await unit_env.get(NewsService)
        user_repo = await unit_env.get(UserRepository)

        # Act
        news = await service.create_news(
            author(1, handle="ada"), "Big discovery", body="Details", tags="physics"
        )

        # Assert
        assert news.id is not None
        assert news.author_id == 1
        assert news.origin is NewsOrigin.CREATED
        assert news.score == 0
        user = await user_repo.find_by_id(1)
        assert user.handle.root == "ada"
        assert user.written_news == 1

    @pytest.mark.asyncio
    async def test_plain_user_forbidden(self, unit_env):
        """Readers can't publish news."""
        # Arrange
        service = await unit_env.get(NewsService)

        # Act & Assert
        with pytest.raises(ForbiddenError, match="verified authors"):
            await service.create_news(reader(1), "Hot take")

    @pytest.mark.asyncio
    async def test_unverified_author_forbidden(self, unit_env):
        """Authors must be verified before publishing."""
        # Arrange
        service = await unit_env.get(NewsService)

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await service.create_news(author(1, verified=False), "Hot take")


class TestUpdateNews:
    """Tests for editing news."""

    @pytest.mark.asyncio
    async def test_only_given_fields_change(self, unit_env):
        """Fields left out of an edit should keep their values."""
        # Arrange
        service = await unit_env.get(NewsService)
        news = await service.create_news(author(1), "Title", body="Body")

        # Act
        updated = await service.update_news(author(1), news.id, title="New title")

        # Assert
        assert updated.title == "New title"
        assert updated.body == "Body"

    @pytest.mark.asyncio
    async def test_other_author_cannot_edit(self, unit_env):
        """Editing someone else's news should be refused."""
        # Arrange
        service = await unit_env.get(NewsService)
        news = await service.create_news(author(1), "Title")

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await service.update_news(author(2), news.id, title="Mine now")

    @pytest.mark.asyncio
    async def test_missing_news_not_found(self, unit_env):
        """Editing news that doesn't exist should fail."""
        # Arrange
        service = await unit_env.get(NewsService)

        # Act & Assert
        with pytest.raises(NotFoundError, match="News not found: 404"):
            await service.update_news(author(1), 404, title="Ghost")


class TestDeleteNews:
    """Tests for deleting news."""

    @pytest.mark.asyncio
    async def test_delete_leaves_tombstone(self, unit_env):
        """Deleted news keeps its row with the content replaced."""
        # Arrange
        service = await unit_env.get(NewsService)
        user_repo = await unit_env.get(UserRepository)
        news = await service.create_news(
            author(1), "Title", body="Body", link="https://example.org"
        )

        # Act
        tombstone = await service.delete_news(author(1), news.id)

        # Assert
        assert tombstone.id == news.id
        assert tombstone.deleted is True
        assert tombstone.title == "[deleted]"
        assert tombstone.body == "[deleted]"
        assert tombstone.link is None
        assert (await user_repo.find_by_id(1)).written_news == 0

    @pytest.mark.asyncio
    async def test_deleted_news_cannot_change(self, unit_env):
        """Tombstoned news can't be edited or deleted again."""
        # Arrange
        service = await unit_env.get(NewsService)
        news = await service.create_news(author(1), "Title")
        await service.delete_news(author(1), news.id)

        # Act & Assert
        with pytest.raises(ContentDeletedError):
            await service.update_news(author(1), news.id, title="Back")
        with pytest.raises(ContentDeletedError):
            await service.delete_news(author(1), news.id)


class TestIngestNews:
    """Tests for importing external news."""

    @pytest.mark.asyncio
    async def test_ingest_skips_known_external_ids(self, unit_env):
        """Running the same batch twice should only create items once."""
        # Arrange
        service = await unit_env.get(NewsService)
        news_repo = await unit_env.get(NewsRepository)
        batch = [ingested("a-1"), ingested("a-2"), ingested("a-1")]

        # Act
        first = await service.ingest_news(author(1), batch)
        second = await service.ingest_news(author(1), batch)

        # Assert
        assert [n.external_id for n in first] == ["a-1", "a-2"]
        assert second == []
        stored = await news_repo.find_by_external_ids(["a-1", "a-2"])
        assert len(stored) == 2
        assert all(n.author_id is None for n in stored)

    @pytest.mark.asyncio
    async def test_reader_cannot_ingest(self, unit_env):
        """Ingestion is reserved for verified authors."""
        # Arrange
        service = await unit_env.get(NewsService)

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await service.ingest_news(reader(1), [ingested("a-1")])
