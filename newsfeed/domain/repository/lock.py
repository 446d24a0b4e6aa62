"""Ledger lock interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager

from newsfeed.domain.value import ParentType, UserId


class LedgerLock(ABC):
    """Serializes engagement transitions per (user, parent_type, parent_id).

    Two transitions on the same triple never interleave; transitions on
    different triples proceed independently.
    """

    @abstractmethod
    def hold(
        self,
        user_id: UserId,
        parent_type: ParentType,
        parent_id: int,
    ) -> AbstractAsyncContextManager[None]:
        """Return a context manager holding the lock for one triple.

        Usage:
            async with ledger_lock.hold(user_id, ParentType.NEWS, news_id):
                ...
        """
        pass
