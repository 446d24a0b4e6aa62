"""Value objects for ranked feed pagination.

Feeds are paginated by seeking past the last item the caller has seen rather
than by offset. A position is the sort key of that item, read straight from
the store, so it stays meaningful while items are inserted, removed or
re-scored between requests.
"""

from datetime import datetime
from typing import Optional

from pydantic import model_validator

from newsfeed.domain.value.common import ValueObject
from newsfeed.domain.value.identifiers import UserId
from newsfeed.domain.value.types import NewsOrigin, ParentType, UserRole


class FeedPosition(ValueObject):
    """Sort key of a content item: (score, created_at, id)."""

    score: int
    created_at: datetime
    id: int


class RecordPosition(ValueObject):
    """Sort key of a vote, save or follow record: (created_at, id)."""

    created_at: datetime
    id: int


class FeedFilter(ValueObject):
    """Which content items belong to a feed.

    - kind: news or comments
    - parent_id/parent_type: direct children of one item (threads, replies)
    - author_ids: restrict to these authors (author feed, followed authors)
    - origin: restrict news to those written on the site or ingested
    - include_deleted: whether tombstoned items are listed
    """

    kind: ParentType
    parent_id: Optional[int] = None
    parent_type: Optional[ParentType] = None
    author_ids: Optional[frozenset[UserId]] = None
    origin: Optional[NewsOrigin] = None
    include_deleted: bool = True

    @model_validator(mode="after")
    def validate_parent(self) -> "FeedFilter":
        """Parent id and type go together, and only comments have parents."""
        if (self.parent_id is None) != (self.parent_type is None):
            raise ValueError("parent_id and parent_type must be given together")
        if self.parent_id is not None and self.kind is not ParentType.COMMENT:
            raise ValueError("Only comments can be filtered by parent")
        if self.origin is not None and self.kind is not ParentType.NEWS:
            raise ValueError("Only news can be filtered by origin")
        return self

    @classmethod
    def news(
        cls,
        author_ids: Optional[frozenset[UserId]] = None,
        origin: Optional[NewsOrigin] = None,
    ) -> "FeedFilter":
        """Filter for live news, optionally restricted by author or origin."""
        return cls(
            kind=ParentType.NEWS,
            author_ids=author_ids,
            origin=origin,
            include_deleted=False,
        )

    @classmethod
    def children_of(cls, parent_id: int, parent_type: ParentType) -> "FeedFilter":
        """Filter for the direct comments under one news item or comment.

        Tombstones stay listed so their replies remain reachable.
        """
        return cls(
            kind=ParentType.COMMENT,
            parent_id=parent_id,
            parent_type=parent_type,
            include_deleted=True,
        )


class Viewer(ValueObject):
    """Identity of the caller, as vouched for by the identity service."""

    user_id: UserId
    role: UserRole = UserRole.USER
    verified: bool = False
    handle: Optional[str] = None
