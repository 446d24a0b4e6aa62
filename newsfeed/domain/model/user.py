"""User entity.

Accounts are owned by the identity service; this is the slice of a user the
feed needs for authorship and follows.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from newsfeed.domain.model.common import DomainModel
from newsfeed.domain.model.content import utcnow
from newsfeed.domain.value import Handle, UserId, UserRole


class User(DomainModel):
    """User entity."""

    id: Optional[UserId] = None
    handle: Handle
    role: UserRole = UserRole.USER
    verified: bool = False
    followers: int = Field(default=0, ge=0)
    written_news: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utcnow)

    @property
    def is_author(self) -> bool:
        return self.role is UserRole.AUTHOR
