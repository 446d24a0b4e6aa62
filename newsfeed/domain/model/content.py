"""Shared shape of votable, saveable content items."""

from datetime import datetime, timezone
from typing import ClassVar, Optional

from pydantic import Field, computed_field

from newsfeed.domain.model.common import DomainModel
from newsfeed.domain.value import FeedPosition, ParentType, UserId


def utcnow() -> datetime:
    """Current time, timezone-aware."""
    return datetime.now(timezone.utc)


class ContentItem(DomainModel):
    """Fields common to news items and comments.

    ``score`` is always derived from the two counters, never stored on its
    own. ``id`` is None until the store assigns one.
    """

    kind: ClassVar[ParentType]

    id: Optional[int] = None
    author_id: Optional[UserId] = None
    likes: int = Field(default=0, ge=0)
    dislikes: int = Field(default=0, ge=0)
    reply_count: int = Field(default=0, ge=0)
    deleted: bool = False
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def score(self) -> int:
        return self.likes - self.dislikes

    @property
    def position(self) -> FeedPosition:
        """Sort key used as a pagination cursor."""
        if self.id is None:
            raise ValueError("Unsaved content has no feed position")
        return FeedPosition(score=self.score, created_at=self.created_at, id=self.id)
