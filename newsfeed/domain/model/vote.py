"""Vote entity.

A user either doesn't vote on an item, likes it, or dislikes it. There is at
most one vote per user per item; records are created and deleted by the
engagement ledger, never updated in place.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from newsfeed.domain.model.common import DomainModel
from newsfeed.domain.model.content import utcnow
from newsfeed.domain.value import ParentType, UserId, VoteId, VoteKind


class Vote(DomainModel):
    """A like or dislike on a news item or comment."""

    id: Optional[VoteId] = None
    user_id: UserId
    parent_id: int
    parent_type: ParentType
    kind: VoteKind
    created_at: datetime = Field(default_factory=utcnow)
