"""Save entity (read-later bookmark)."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from newsfeed.domain.model.common import DomainModel
from newsfeed.domain.model.content import utcnow
from newsfeed.domain.value import ParentType, SaveId, UserId


class Save(DomainModel):
    """A user's bookmark on a news item or comment. Existence is the state."""

    id: Optional[SaveId] = None
    user_id: UserId
    parent_id: int
    parent_type: ParentType
    created_at: datetime = Field(default_factory=utcnow)
