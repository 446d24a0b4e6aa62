"""Engagement ledger: likes, dislikes and saves.

A user's vote on an item is one of NONE, LIKED or DISLIKED:

    from       desired   records                      counters
    NONE       like      insert like                  likes +1
    LIKED      like      delete                       likes -1
    DISLIKED   like      delete dislike, insert like  dislikes -1, likes +1
    NONE       dislike   insert dislike               dislikes +1
    DISLIKED   dislike   delete                       dislikes -1
    LIKED      dislike   delete like, insert dislike  likes -1, dislikes +1

Each transition reads the current state, changes the records and adjusts the
counters while holding the ledger lock for (user, parent_type, parent_id).
Counters move by atomic increments in the store, so concurrent votes by
different users never lose an update.
"""

from typing import Sequence

import logfire

from newsfeed.domain.error import InvalidStateError, NotFoundError
from newsfeed.domain.model import Save, Vote
from newsfeed.domain.repository import (
    CommentRepository,
    ContentRepository,
    LedgerLock,
    NewsRepository,
    SaveRepository,
    VoteRepository,
)
from newsfeed.domain.value import (
    ParentType,
    SaveAction,
    SaveState,
    UserId,
    VoteKind,
    VoteOutcome,
    VoteState,
    coerce_enum,
)
from newsfeed.domain.value.common import ValueObject

from .base import Service


class VoteResult(ValueObject):
    """Counters of the item and the user's vote after a transition."""

    likes: int
    dislikes: int
    score: int
    state: VoteState
    outcome: VoteOutcome
    message: str


class SaveResult(ValueObject):
    """The user's save state after a transition."""

    state: SaveState
    message: str


class EngagementService(Service):
    """Domain service toggling votes and saves on news and comments."""

    def __init__(
        self,
        news_repository: NewsRepository,
        comment_repository: CommentRepository,
        vote_repository: VoteRepository,
        save_repository: SaveRepository,
        ledger_lock: LedgerLock,
    ) -> None:
        """Initialize engagement service.

        Args:
            news_repository: News repository
            comment_repository: Comment repository
            vote_repository: Vote repository
            save_repository: Save repository
            ledger_lock: Per-(user, item) lock for transitions
        """
        self.news_repository = news_repository
        self.comment_repository = comment_repository
        self.vote_repository = vote_repository
        self.save_repository = save_repository
        self.ledger_lock = ledger_lock

    def _content_repository(self, parent_type: ParentType) -> ContentRepository:
        if parent_type is ParentType.NEWS:
            return self.news_repository
        return self.comment_repository

    async def set_vote(
        self,
        user_id: UserId,
        parent_id: int,
        parent_type: ParentType | str,
        desired_kind: VoteKind | str,
    ) -> VoteResult:
        """Toggle a user's like or dislike on an item.

        Voting the same way twice cancels the vote; voting the other way
        switches it.

        Args:
            user_id: Voting user
            parent_id: ID of the news item or comment
            parent_type: Kind of item
            desired_kind: Vote the user asked for

        Returns:
            The item's new counters and the user's new vote state

        Raises:
            InvalidArgumentError: If parent_type or desired_kind is invalid
            NotFoundError: If the item doesn't exist
        """
        parent_type = coerce_enum(ParentType, parent_type, "parent type")
        desired_kind = coerce_enum(VoteKind, desired_kind, "vote kind")
        repository = self._content_repository(parent_type)

        with logfire.span(
            "engagement_service.set_vote",
            user_id=user_id,
            parent_id=parent_id,
            parent_type=parent_type.value,
            kind=desired_kind.value,
        ):
            async with self.ledger_lock.hold(user_id, parent_type, parent_id):
                if await repository.find_by_id(parent_id) is None:
                    logfire.warn(
                        "Vote on non-existent item",
                        parent_id=parent_id,
                        parent_type=parent_type.value,
                    )
                    raise NotFoundError(parent_type.value.capitalize(), parent_id)

                current = await self.vote_repository.find_by_user_and_parent(
                    user_id, parent_type, parent_id
                )

                likes_delta = 0
                dislikes_delta = 0

                if current is not None:
                    await self.vote_repository.delete(current.id)
                    if current.kind is VoteKind.LIKE:
                        likes_delta -= 1
                    else:
                        dislikes_delta -= 1

                if current is None or current.kind is not desired_kind:
                    await self.vote_repository.create(
                        Vote(
                            user_id=user_id,
                            parent_id=parent_id,
                            parent_type=parent_type,
                            kind=desired_kind,
                        )
                    )
                    if desired_kind is VoteKind.LIKE:
                        likes_delta += 1
                    else:
                        dislikes_delta += 1
                    outcome = VoteOutcome.ADDED
                    state = VoteState.from_kind(desired_kind)
                else:
                    outcome = VoteOutcome.REMOVED
                    state = VoteState.NONE

                item = await repository.apply_vote_delta(
                    parent_id, likes_delta, dislikes_delta
                )
                if item is None:
                    # Removed between the existence check and the update
                    raise NotFoundError(parent_type.value.capitalize(), parent_id)

            label = "Like" if desired_kind is VoteKind.LIKE else "Dislike"
            message = f"{label} {outcome.value}"
            logfire.info(
                message,
                user_id=user_id,
                parent_id=parent_id,
                parent_type=parent_type.value,
                likes=item.likes,
                dislikes=item.dislikes,
            )

            return VoteResult(
                likes=item.likes,
                dislikes=item.dislikes,
                score=item.score,
                state=state,
                outcome=outcome,
                message=message,
            )

    async def get_vote_state(
        self,
        user_id: UserId,
        parent_id: int,
        parent_type: ParentType | str,
    ) -> VoteState:
        """Read a user's current vote on an item (NONE when there is none)."""
        parent_type = coerce_enum(ParentType, parent_type, "parent type")
        vote = await self.vote_repository.find_by_user_and_parent(
            user_id, parent_type, parent_id
        )
        return VoteState.from_kind(vote.kind if vote else None)

    async def get_vote_states(
        self,
        user_id: UserId,
        parent_type: ParentType,
        parent_ids: Sequence[int],
    ) -> dict[int, VoteState]:
        """Read a user's votes on a page of items with a single query.

        Returns:
            Vote state per requested ID; items without a vote map to NONE
        """
        if not parent_ids:
            return {}

        votes = await self.vote_repository.find_by_user_and_parents(
            user_id, parent_type, parent_ids
        )
        states = {parent_id: VoteState.NONE for parent_id in parent_ids}
        for vote in votes:
            states[vote.parent_id] = VoteState.from_kind(vote.kind)
        return states

    async def set_save(
        self,
        user_id: UserId,
        parent_id: int,
        parent_type: ParentType | str,
        desired_state: SaveAction | str,
    ) -> SaveResult:
        """Save or unsave an item for later.

        Unlike votes, saves don't toggle: asking for the state the item is
        already in is rejected.

        Raises:
            InvalidArgumentError: If parent_type or desired_state is invalid
            NotFoundError: If saving an item that doesn't exist
            InvalidStateError: If already saved (SAVE) or not saved (UNSAVE)
        """
        parent_type = coerce_enum(ParentType, parent_type, "parent type")
        desired_state = coerce_enum(SaveAction, desired_state, "save action")

        with logfire.span(
            "engagement_service.set_save",
            user_id=user_id,
            parent_id=parent_id,
            parent_type=parent_type.value,
            action=desired_state.value,
        ):
            async with self.ledger_lock.hold(user_id, parent_type, parent_id):
                current = await self.save_repository.find_by_user_and_parent(
                    user_id, parent_type, parent_id
                )

                if desired_state is SaveAction.SAVE:
                    if current is not None:
                        logfire.warn(
                            "Item already saved", user_id=user_id, parent_id=parent_id
                        )
                        raise InvalidStateError("Invalid action")

                    repository = self._content_repository(parent_type)
                    if await repository.find_by_id(parent_id) is None:
                        raise NotFoundError(parent_type.value.capitalize(), parent_id)

                    await self.save_repository.create(
                        Save(
                            user_id=user_id,
                            parent_id=parent_id,
                            parent_type=parent_type,
                        )
                    )
                    result = SaveResult(
                        state=SaveState.SAVED, message="Saved successfully"
                    )
                else:
                    if current is None:
                        logfire.warn(
                            "Item not saved", user_id=user_id, parent_id=parent_id
                        )
                        raise InvalidStateError("Invalid action")

                    await self.save_repository.delete(current.id)
                    result = SaveResult(
                        state=SaveState.UNSAVED, message="Unsaved successfully"
                    )

            logfire.info(
                result.message,
                user_id=user_id,
                parent_id=parent_id,
                parent_type=parent_type.value,
            )
            return result

    async def get_save_state(
        self,
        user_id: UserId,
        parent_id: int,
        parent_type: ParentType | str,
    ) -> SaveState:
        """Read whether a user has saved an item."""
        parent_type = coerce_enum(ParentType, parent_type, "parent type")
        save = await self.save_repository.find_by_user_and_parent(
            user_id, parent_type, parent_id
        )
        return SaveState.SAVED if save else SaveState.UNSAVED

    async def get_save_states(
        self,
        user_id: UserId,
        parent_type: ParentType,
        parent_ids: Sequence[int],
    ) -> dict[int, SaveState]:
        """Batch variant of ``get_save_state`` for a page of items."""
        if not parent_ids:
            return {}

        saves = await self.save_repository.find_by_user_and_parents(
            user_id, parent_type, parent_ids
        )
        saved_ids = {save.parent_id for save in saves}
        return {
            parent_id: SaveState.SAVED if parent_id in saved_ids else SaveState.UNSAVED
            for parent_id in parent_ids
        }

    async def purge(self, parent_type: ParentType, parent_id: int) -> None:
        """Drop every vote and save on an item that is being deleted."""
        with logfire.span(
            "engagement_service.purge",
            parent_id=parent_id,
            parent_type=parent_type.value,
        ):
            votes = await self.vote_repository.delete_by_parent(parent_type, parent_id)
            saves = await self.save_repository.delete_by_parent(parent_type, parent_id)
            logfire.info(
                "Engagement purged",
                parent_id=parent_id,
                parent_type=parent_type.value,
                votes=votes,
                saves=saves,
            )
