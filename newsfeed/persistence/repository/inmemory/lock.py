"""In-memory ledger lock for testing."""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Optional

from newsfeed.domain.repository import LedgerLock
from newsfeed.domain.value import ParentType, UserId

from .store import InMemoryStore


class InMemoryLedgerLock(LedgerLock):
    """One ``asyncio.Lock`` per (user, parent_type, parent_id).

    A key's lock is dropped once nobody holds or waits for it.
    """

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self.store = store or InMemoryStore()

    @asynccontextmanager
    async def hold(
        self,
        user_id: UserId,
        parent_type: ParentType,
        parent_id: int,
    ) -> AsyncIterator[None]:
        key = (user_id, parent_type, parent_id)
        lock = self.store.locks.setdefault(key, asyncio.Lock())
        self.store.lock_users[key] += 1
        try:
            async with lock:
                yield
        finally:
            self.store.lock_users[key] -= 1
            if not self.store.lock_users[key]:
                del self.store.lock_users[key]
                del self.store.locks[key]
