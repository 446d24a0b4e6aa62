"""Domain value objects for the news feed."""

from newsfeed.domain.value.feed import (
    FeedFilter,
    FeedPosition,
    RecordPosition,
    Viewer,
)
from newsfeed.domain.value.identifiers import (
    CommentId,
    FollowId,
    NewsId,
    SaveId,
    UserId,
    VoteId,
)
from newsfeed.domain.value.types import (
    Handle,
    NewsOrigin,
    ParentType,
    SaveAction,
    SaveState,
    SortKey,
    UserRole,
    VoteKind,
    VoteOutcome,
    VoteState,
    coerce_enum,
)

__all__ = [
    # Identifiers
    "UserId",
    "NewsId",
    "CommentId",
    "VoteId",
    "SaveId",
    "FollowId",
    # Types
    "Handle",
    "NewsOrigin",
    "ParentType",
    "SaveAction",
    "SaveState",
    "SortKey",
    "UserRole",
    "VoteKind",
    "VoteOutcome",
    "VoteState",
    "coerce_enum",
    # Feed
    "FeedFilter",
    "FeedPosition",
    "RecordPosition",
    "Viewer",
]
