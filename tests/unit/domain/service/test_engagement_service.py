"""Unit tests for EngagementService."""

import asyncio

import pytest

from newsfeed.domain.error import InvalidArgumentError, InvalidStateError, NotFoundError
from newsfeed.domain.repository import (
    CommentRepository,
    NewsRepository,
    SaveRepository,
    VoteRepository,
)
from newsfeed.domain.service import EngagementService
from newsfeed.domain.value import (
    ParentType,
    SaveAction,
    SaveState,
    UserId,
    VoteKind,
    VoteOutcome,
    VoteState,
)
from tests.conftest import seed_comment, seed_news
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()

USER = UserId(1)


class TestSetVote:
    """Tests for the vote state machine."""

    @pytest.mark.asyncio
    async def test_like_from_none_adds_like(self, unit_env):
        """Liking an item with no vote should count one like."""
        # Arrange
        service = await unit_env.get(EngagementService)
        news = await seed_news(await unit_env.get(NewsRepository))

        # Act
        result = await service.set_vote(USER, news.id, ParentType.NEWS, VoteKind.LIKE)

        # Assert
        assert result.likes == 1
        assert result.dislikes == 0
        assert result.score == 1
        assert result.state is VoteState.LIKED
        assert result.outcome is VoteOutcome.ADDED
        assert result.message == "Like added"

    @pytest.mark.asyncio
    async def test_like_twice_cancels(self, unit_env):
        """Repeating a like should remove it and restore the counters."""
        # Arrange
        service = await unit_env.get(EngagementService)
        vote_repo = await unit_env.get(VoteRepository)
        news = await seed_news(await unit_env.get(NewsRepository))
        await service.set_vote(USER, news.id, ParentType.NEWS, VoteKind.LIKE)

        # Act
        result = await service.set_vote(USER, news.id, ParentType.NEWS, VoteKind.LIKE)

        # Assert
        assert result.likes == 0
        assert result.state is VoteState.NONE
        assert result.outcome is VoteOutcome.REMOVED
        assert result.message == "Like removed"
        assert (
            await vote_repo.find_by_user_and_parent(USER, ParentType.NEWS, news.id)
            is None
        )

    @pytest.mark.asyncio
    async def test_dislike_after_like_switches_vote(self, unit_env):
        """Switching from like to dislike should move one count across."""
        # Arrange
        service = await unit_env.get(EngagementService)
        vote_repo = await unit_env.get(VoteRepository)
        news = await seed_news(await unit_env.get(NewsRepository))
        await service.set_vote(USER, news.id, ParentType.NEWS, VoteKind.LIKE)

        # Act
        result = await service.set_vote(
            USER, news.id, ParentType.NEWS, VoteKind.DISLIKE
        )

        # Assert
        assert result.likes == 0
        assert result.dislikes == 1
        assert result.score == -1
        assert result.state is VoteState.DISLIKED
        assert result.message == "Dislike added"

        votes = await vote_repo.find_by_user_and_parents(
            USER, ParentType.NEWS, [news.id]
        )
        assert [v.kind for v in votes] == [VoteKind.DISLIKE]

    @pytest.mark.asyncio
    async def test_like_after_dislike_switches_vote(self, unit_env):
        """Switching from dislike to like should move one count across."""
        # Arrange
        service = await unit_env.get(EngagementService)
        news = await seed_news(await unit_env.get(NewsRepository))
        await service.set_vote(USER, news.id, ParentType.NEWS, VoteKind.DISLIKE)

        # Act
        result = await service.set_vote(USER, news.id, ParentType.NEWS, VoteKind.LIKE)

        # Assert
        assert (result.likes, result.dislikes, result.score) == (1, 0, 1)
        assert result.state is VoteState.LIKED

    @pytest.mark.asyncio
    async def test_dislike_twice_cancels(self, unit_env):
        """Repeating a dislike should remove it."""
        # Arrange
        service = await unit_env.get(EngagementService)
        news = await seed_news(await unit_env.get(NewsRepository))
        await service.set_vote(USER, news.id, ParentType.NEWS, VoteKind.DISLIKE)

        # Act
        result = await service.set_vote(
            USER, news.id, ParentType.NEWS, VoteKind.DISLIKE
        )

        # Assert
        assert (result.likes, result.dislikes) == (0, 0)
        assert result.message == "Dislike removed"

    @pytest.mark.asyncio
    async def test_counters_match_vote_records(self, unit_env):
        """Counters should equal the number of like and dislike records."""
        # Arrange
        service = await unit_env.get(EngagementService)
        comment_repo = await unit_env.get(CommentRepository)
        news = await seed_news(await unit_env.get(NewsRepository))
        comment = await seed_comment(comment_repo, news.id)

        # Act
        await service.set_vote(UserId(1), comment.id, "comment", "like")
        await service.set_vote(UserId(2), comment.id, "comment", "like")
        await service.set_vote(UserId(3), comment.id, "comment", "dislike")
        await service.set_vote(UserId(2), comment.id, "comment", "dislike")
        await service.set_vote(UserId(4), comment.id, "comment", "like")
        await service.set_vote(UserId(4), comment.id, "comment", "like")

        # Assert
        stored = await comment_repo.find_by_id(comment.id)
        assert stored.likes == 1
        assert stored.dislikes == 2
        assert stored.score == -1

    @pytest.mark.asyncio
    async def test_vote_on_missing_item_raises_not_found(self, unit_env):
        """Voting on an item that doesn't exist should fail without side effects."""
        # Arrange
        service = await unit_env.get(EngagementService)
        vote_repo = await unit_env.get(VoteRepository)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Comment not found: 999"):
            await service.set_vote(USER, 999, ParentType.COMMENT, VoteKind.LIKE)

        assert (
            await vote_repo.find_by_user_and_parent(USER, ParentType.COMMENT, 999)
            is None
        )

    @pytest.mark.asyncio
    async def test_unknown_vote_kind_is_rejected(self, unit_env):
        """A vote kind other than like or dislike should be rejected."""
        # Arrange
        service = await unit_env.get(EngagementService)
        news = await seed_news(await unit_env.get(NewsRepository))

        # Act & Assert
        with pytest.raises(InvalidArgumentError, match="Invalid vote kind"):
            await service.set_vote(USER, news.id, ParentType.NEWS, "love")

    @pytest.mark.asyncio
    async def test_unknown_parent_type_is_rejected(self, unit_env):
        """A parent type other than news or comment should be rejected."""
        # Arrange
        service = await unit_env.get(EngagementService)

        # Act & Assert
        with pytest.raises(InvalidArgumentError, match="Invalid parent type"):
            await service.set_vote(USER, 1, "post", VoteKind.LIKE)

    @pytest.mark.asyncio
    async def test_concurrent_likes_by_different_users_are_all_counted(
        self, unit_env
    ):
        """Concurrent likes by different users should never lose an update."""
        # Arrange
        service = await unit_env.get(EngagementService)
        news_repo = await unit_env.get(NewsRepository)
        news = await seed_news(news_repo)

        # Act
        await asyncio.gather(
            *(
                service.set_vote(UserId(i), news.id, ParentType.NEWS, VoteKind.LIKE)
                for i in range(1, 21)
            )
        )

        # Assert
        stored = await news_repo.find_by_id(news.id)
        assert stored.likes == 20
        assert stored.score == 20

    @pytest.mark.asyncio
    async def test_concurrent_toggles_by_one_user_are_serialized(self, unit_env):
        """Two concurrent likes by one user should act as like then unlike."""
        # Arrange
        service = await unit_env.get(EngagementService)
        news_repo = await unit_env.get(NewsRepository)
        vote_repo = await unit_env.get(VoteRepository)
        news = await seed_news(news_repo)

        # Act
        results = await asyncio.gather(
            service.set_vote(USER, news.id, ParentType.NEWS, VoteKind.LIKE),
            service.set_vote(USER, news.id, ParentType.NEWS, VoteKind.LIKE),
        )

        # Assert
        assert {r.outcome for r in results} == {VoteOutcome.ADDED, VoteOutcome.REMOVED}
        stored = await news_repo.find_by_id(news.id)
        assert stored.likes == 0
        assert (
            await vote_repo.find_by_user_and_parent(USER, ParentType.NEWS, news.id)
            is None
        )


class TestVoteStates:
    """Tests for reading a user's votes."""

    @pytest.mark.asyncio
    async def test_get_vote_state_defaults_to_none(self, unit_env):
        """A user who never voted should read NONE."""
        # Arrange
        service = await unit_env.get(EngagementService)

        # Act
        state = await service.get_vote_state(USER, 1, ParentType.NEWS)

        # Assert
        assert state is VoteState.NONE

    @pytest.mark.asyncio
    async def test_get_vote_states_reads_a_page_at_once(self, unit_env):
        """Batch lookup should map every requested ID."""
        # Arrange
        service = await unit_env.get(EngagementService)
        news_repo = await unit_env.get(NewsRepository)
        liked = await seed_news(news_repo, title="Liked")
        disliked = await seed_news(news_repo, title="Disliked")
        untouched = await seed_news(news_repo, title="Untouched")
        await service.set_vote(USER, liked.id, ParentType.NEWS, VoteKind.LIKE)
        await service.set_vote(USER, disliked.id, ParentType.NEWS, VoteKind.DISLIKE)

        # Act
        states = await service.get_vote_states(
            USER, ParentType.NEWS, [liked.id, disliked.id, untouched.id]
        )

        # Assert
        assert states == {
            liked.id: VoteState.LIKED,
            disliked.id: VoteState.DISLIKED,
            untouched.id: VoteState.NONE,
        }


class TestSetSave:
    """Tests for saving and unsaving."""

    @pytest.mark.asyncio
    async def test_save_then_unsave(self, unit_env):
        """Saving and unsaving should flip the save state."""
        # Arrange
        service = await unit_env.get(EngagementService)
        news = await seed_news(await unit_env.get(NewsRepository))

        # Act
        saved = await service.set_save(USER, news.id, ParentType.NEWS, SaveAction.SAVE)
        state_after_save = await service.get_save_state(
            USER, news.id, ParentType.NEWS
        )
        unsaved = await service.set_save(
            USER, news.id, ParentType.NEWS, SaveAction.UNSAVE
        )

        # Assert
        assert saved.state is SaveState.SAVED
        assert saved.message == "Saved successfully"
        assert state_after_save is SaveState.SAVED
        assert unsaved.state is SaveState.UNSAVED
        assert unsaved.message == "Unsaved successfully"
        assert (
            await service.get_save_state(USER, news.id, ParentType.NEWS)
            is SaveState.UNSAVED
        )

    @pytest.mark.asyncio
    async def test_saving_twice_is_rejected(self, unit_env):
        """Saving an already saved item should be rejected, not toggled."""
        # Arrange
        service = await unit_env.get(EngagementService)
        save_repo = await unit_env.get(SaveRepository)
        news = await seed_news(await unit_env.get(NewsRepository))
        await service.set_save(USER, news.id, ParentType.NEWS, SaveAction.SAVE)

        # Act & Assert
        with pytest.raises(InvalidStateError, match="Invalid action"):
            await service.set_save(USER, news.id, ParentType.NEWS, SaveAction.SAVE)

        saves = await save_repo.find_by_user_and_parents(
            USER, ParentType.NEWS, [news.id]
        )
        assert len(saves) == 1

    @pytest.mark.asyncio
    async def test_unsaving_unsaved_item_is_rejected(self, unit_env):
        """Unsaving an item that isn't saved should be rejected."""
        # Arrange
        service = await unit_env.get(EngagementService)
        news = await seed_news(await unit_env.get(NewsRepository))

        # Act & Assert
        with pytest.raises(InvalidStateError, match="Invalid action"):
            await service.set_save(USER, news.id, ParentType.NEWS, SaveAction.UNSAVE)

    @pytest.mark.asyncio
    async def test_saving_missing_item_raises_not_found(self, unit_env):
        """Saving an item that doesn't exist should fail."""
        # Arrange
        service = await unit_env.get(EngagementService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.set_save(USER, 42, ParentType.NEWS, SaveAction.SAVE)

    @pytest.mark.asyncio
    async def test_unknown_save_action_is_rejected(self, unit_env):
        """An action other than save or unsave should be rejected."""
        # Arrange
        service = await unit_env.get(EngagementService)

        # Act & Assert
        with pytest.raises(InvalidArgumentError, match="Invalid save action"):
            await service.set_save(USER, 1, ParentType.NEWS, "bookmark")


class TestPurge:
    """Tests for dropping engagement on a deleted item."""

    @pytest.mark.asyncio
    async def test_purge_drops_votes_and_saves(self, unit_env):
        """Purging should remove every user's vote and save on the item."""
        # Arrange
        service = await unit_env.get(EngagementService)
        vote_repo = await unit_env.get(VoteRepository)
        save_repo = await unit_env.get(SaveRepository)
        comment = await seed_comment(
            await unit_env.get(CommentRepository), parent_id=1
        )
        await service.set_vote(UserId(1), comment.id, "comment", "like")
        await service.set_vote(UserId(2), comment.id, "comment", "dislike")
        await service.set_save(UserId(1), comment.id, "comment", "save")

        # Act
        await service.purge(ParentType.COMMENT, comment.id)

        # Assert
        for user_id in (UserId(1), UserId(2)):
            assert (
                await vote_repo.find_by_user_and_parent(
                    user_id, ParentType.COMMENT, comment.id
                )
                is None
            )
        assert (
            await save_repo.find_by_user_and_parent(
                UserId(1), ParentType.COMMENT, comment.id
            )
            is None
        )
