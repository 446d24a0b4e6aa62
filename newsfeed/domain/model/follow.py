"""Follow entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from newsfeed.domain.model.common import DomainModel
from newsfeed.domain.model.content import utcnow
from newsfeed.domain.value import FollowId, UserId


class Follow(DomainModel):
    """A user following an author."""

    id: Optional[FollowId] = None
    user_id: UserId
    author_id: UserId
    created_at: datetime = Field(default_factory=utcnow)
