"""Domain models (entities and aggregates)."""

from newsfeed.domain.model.comment import Comment
from newsfeed.domain.model.common import DomainModel
from newsfeed.domain.model.content import ContentItem
from newsfeed.domain.model.follow import Follow
from newsfeed.domain.model.news import News
from newsfeed.domain.model.save import Save
from newsfeed.domain.model.user import User
from newsfeed.domain.model.vote import Vote

__all__ = [
    "DomainModel",
    "ContentItem",
    "News",
    "Comment",
    "Vote",
    "Save",
    "Follow",
    "User",
]
