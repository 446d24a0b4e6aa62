"""PostgreSQL implementation of User repository."""

from typing import List, Optional, Sequence

import logfire
from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from newsfeed.domain.model import User
from newsfeed.domain.repository import UserRepository
from newsfeed.domain.value import UserId
from newsfeed.persistence.mappers import model_to_dict, row_to_user
from newsfeed.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        if not user_ids:
            return []
        stmt = select(users_table).where(users_table.c.id.in_(list(user_ids)))
        result = await self.session.execute(stmt)
        return [row_to_user(row._asdict()) for row in result.fetchall()]

    async def create(self, user: User) -> User:
        """Insert a user mirrored from the identity service."""
        with logfire.span("user_repository.create", user_id=user.id):
            stmt = (
                insert(users_table)
                .values(**model_to_dict(user))
                .returning(users_table)
            )
            result = await self.session.execute(stmt)
            return row_to_user(result.one()._asdict())

    async def _adjust(self, user_id: UserId, column: str, delta: int) -> Optional[User]:
        counter = users_table.c[column]
        stmt = (
            update(users_table)
            .where(users_table.c.id == user_id)
            .values({column: func.greatest(counter + delta, 0)})
            .returning(users_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def adjust_followers(self, user_id: UserId, delta: int) -> Optional[User]:
        """Atomically adjust the follower count (never below zero)."""
        return await self._adjust(user_id, "followers", delta)

    async def adjust_written_news(
        self, user_id: UserId, delta: int
    ) -> Optional[User]:
        """Atomically adjust the written news count (never below zero)."""
        return await self._adjust(user_id, "written_news", delta)
