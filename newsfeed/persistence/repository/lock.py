"""PostgreSQL ledger lock based on transaction-scoped advisory locks."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from newsfeed.domain.repository import LedgerLock
from newsfeed.domain.value import ParentType, UserId


class PostgresLedgerLock(LedgerLock):
    """Serializes ledger transitions with ``pg_advisory_xact_lock``.

    The lock is keyed on a hash of (user, parent_type, parent_id) and is
    released when the request's transaction commits or rolls back, so it
    covers the counter update as well as the record change.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def hold(
        self,
        user_id: UserId,
        parent_type: ParentType,
        parent_id: int,
    ) -> AsyncIterator[None]:
        key = f"ledger:{user_id}:{parent_type.value}:{parent_id}"
        await self.session.execute(
            select(func.pg_advisory_xact_lock(func.hashtextextended(key, 0)))
        )
        yield
