"""Domain value objects for the news feed.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and the small amount of logic that
belongs to a single value.
"""

from enum import Enum
from typing import TypeVar

from pydantic import field_validator

from newsfeed.domain.error import InvalidArgumentError
from newsfeed.domain.value.common import RootValueObject

E = TypeVar("E", bound=Enum)


def coerce_enum(enum_type: type[E], value: object, name: str) -> E:
    """Turn a raw value into a member of ``enum_type``.

    Raises:
        InvalidArgumentError: If the value is not a member
    """
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(value)
    except ValueError:
        raise InvalidArgumentError(f"Invalid {name}: {value!r}")


class ParentType(str, Enum):
    """Kind of content item a vote, save or comment points at."""

    NEWS = "news"
    COMMENT = "comment"


class VoteKind(str, Enum):
    """Kind of vote a user can cast."""

    LIKE = "like"
    DISLIKE = "dislike"

    @property
    def opposite(self) -> "VoteKind":
        return VoteKind.DISLIKE if self is VoteKind.LIKE else VoteKind.LIKE


class VoteState(str, Enum):
    """A user's current vote on one item."""

    NONE = "none"
    LIKED = "like"
    DISLIKED = "dislike"

    @classmethod
    def from_kind(cls, kind: VoteKind | None) -> "VoteState":
        if kind is None:
            return cls.NONE
        return cls.LIKED if kind is VoteKind.LIKE else cls.DISLIKED


class VoteOutcome(str, Enum):
    """Whether a vote toggle ended with the requested vote in place."""

    ADDED = "added"
    REMOVED = "removed"


class SaveAction(str, Enum):
    """Requested save transition."""

    SAVE = "save"
    UNSAVE = "unsave"


class SaveState(str, Enum):
    """Whether a user has saved an item."""

    SAVED = "save"
    UNSAVED = "unsave"


class SortKey(str, Enum):
    """Feed ordering."""

    RECENCY = "recency"  # created_at DESC, id DESC
    SCORE = "score"  # score DESC, created_at DESC, id DESC


class UserRole(str, Enum):
    """Role assigned by the identity service."""

    USER = "user"
    AUTHOR = "author"


class NewsOrigin(str, Enum):
    """Where a news item came from."""

    CREATED = "created"  # Written by an author on the site
    INGESTED = "ingested"  # Pulled in from an external source


class Handle(RootValueObject[str]):
    """Display name of a user, as provided by the identity service."""

    @field_validator("root")
    @classmethod
    def validate_handle(cls, v: str) -> str:
        """Validate handle is not blank and within length limits."""
        if not v.strip() or len(v) > 255:
            raise ValueError("Handle must be 1-255 characters")
        return v
