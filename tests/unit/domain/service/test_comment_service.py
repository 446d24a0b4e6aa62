"""Unit tests for CommentService."""

import pytest

from newsfeed.domain.error import (
    ContentDeletedError,
    InvalidArgumentError,
    NotAuthorizedError,
    NotFoundError,
)
from newsfeed.domain.repository import CommentRepository, NewsRepository
from newsfeed.domain.service import CommentService
from newsfeed.domain.value import ParentType
from tests.conftest import reader, seed_news
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestAddComment:
    """Tests for commenting and replying."""

    @pytest.mark.asyncio
    async def test_comment_on_news(self, unit_env):
        """Commenting on news should store the comment and count it."""
        # Arrange
        service = await unit_env.get(CommentService)
        news_repo = await unit_env.get(NewsRepository)
        news = await seed_news(news_repo)

        # Act
        comment = await service.add_comment(
            reader(1), news.id, ParentType.NEWS, "First!"
        )

        # Assert
        assert comment.id is not None
        assert comment.author_id == 1
        assert comment.parent_id == news.id
        assert comment.parent_type is ParentType.NEWS
        assert comment.body == "First!"
        assert (await news_repo.find_by_id(news.id)).reply_count == 1

    @pytest.mark.asyncio
    async def test_reply_to_comment(self, unit_env):
        """Replying should count on the parent comment and on the news item."""
        # Arrange
        service = await unit_env.get(CommentService)
        news_repo = await unit_env.get(NewsRepository)
        comment_repo = await unit_env.get(CommentRepository)
        news = await seed_news(news_repo)
        parent = await service.add_comment(reader(1), news.id, "news", "Question?")

        # Act
        reply = await service.add_comment(reader(2), parent.id, "comment", "Answer.")

        # Assert
        assert reply.parent_type is ParentType.COMMENT
        assert (await comment_repo.find_by_id(parent.id)).reply_count == 1
        assert (await news_repo.find_by_id(news.id)).reply_count == 2

    @pytest.mark.asyncio
    async def test_missing_parent_not_found(self, unit_env):
        """Replying to a comment that doesn't exist should fail."""
        # Arrange
        service = await unit_env.get(CommentService)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Comment not found: 42"):
            await service.add_comment(reader(1), 42, ParentType.COMMENT, "Hello")

    @pytest.mark.asyncio
    async def test_deleted_parent_rejected(self, unit_env):
        """Commenting on deleted news should fail."""
        # Arrange
        service = await unit_env.get(CommentService)
        news = await seed_news(await unit_env.get(NewsRepository), deleted=True)

        # Act & Assert
        with pytest.raises(ContentDeletedError):
            await service.add_comment(reader(1), news.id, ParentType.NEWS, "Hello")

    @pytest.mark.asyncio
    async def test_invalid_parent_type(self, unit_env):
        """Only news and comments can be commented on."""
        # Arrange
        service = await unit_env.get(CommentService)

        # Act & Assert
        with pytest.raises(InvalidArgumentError, match="Invalid parent type"):
            await service.add_comment(reader(1), 1, "user", "Hello")


class TestEditComment:
    """Tests for editing comments."""

    @pytest.mark.asyncio
    async def test_author_can_edit(self, unit_env):
        """The author should be able to replace the body."""
        # Arrange
        service = await unit_env.get(CommentService)
        news = await seed_news(await unit_env.get(NewsRepository))
        comment = await service.add_comment(reader(1), news.id, "news", "Typo")

        # Act
        updated = await service.edit_comment(reader(1), comment.id, "Fixed")

        # Assert
        assert updated.body == "Fixed"
        assert (await service.get_comment(comment.id)).body == "Fixed"

    @pytest.mark.asyncio
    async def test_other_user_cannot_edit(self, unit_env):
        """Editing someone else's comment should be refused."""
        # Arrange
        service = await unit_env.get(CommentService)
        news = await seed_news(await unit_env.get(NewsRepository))
        comment = await service.add_comment(reader(1), news.id, "news", "Mine")

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await service.edit_comment(reader(2), comment.id, "Yours now")

    @pytest.mark.asyncio
    async def test_empty_body_rejected(self, unit_env):
        """An edit must leave a non-empty body."""
        # Arrange
        service = await unit_env.get(CommentService)
        news = await seed_news(await unit_env.get(NewsRepository))
        comment = await service.add_comment(reader(1), news.id, "news", "Text")

        # Act & Assert
        with pytest.raises(ValueError):
            await service.edit_comment(reader(1), comment.id, "")


class TestRemoveComment:
    """Tests for removing comments."""

    @pytest.mark.asyncio
    async def test_remove_leaf_deletes(self, unit_env):
        """A comment without replies disappears."""
        # Arrange
        service = await unit_env.get(CommentService)
        news = await seed_news(await unit_env.get(NewsRepository))
        comment = await service.add_comment(reader(1), news.id, "news", "Bye")

        # Act
        result = await service.remove_comment(reader(1), comment.id)

        # Assert
        assert result is None
        with pytest.raises(NotFoundError):
            await service.get_comment(comment.id)

    @pytest.mark.asyncio
    async def test_remove_with_replies_leaves_tombstone(self, unit_env):
        """A comment with replies stays as a tombstone that can't be edited."""
        # Arrange
        service = await unit_env.get(CommentService)
        news = await seed_news(await unit_env.get(NewsRepository))
        parent = await service.add_comment(reader(1), news.id, "news", "Parent")
        await service.add_comment(reader(2), parent.id, "comment", "Reply")

        # Act
        tombstone = await service.remove_comment(reader(1), parent.id)

        # Assert
        assert tombstone.deleted is True
        assert tombstone.body == "[deleted]"
        with pytest.raises(ContentDeletedError):
            await service.edit_comment(reader(1), parent.id, "Back")
        with pytest.raises(ContentDeletedError):
            await service.remove_comment(reader(1), parent.id)

    @pytest.mark.asyncio
    async def test_other_user_cannot_remove(self, unit_env):
        """Removing someone else's comment should be refused."""
        # Arrange
        service = await unit_env.get(CommentService)
        news = await seed_news(await unit_env.get(NewsRepository))
        comment = await service.add_comment(reader(1), news.id, "news", "Mine")

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await service.remove_comment(reader(2), comment.id)
