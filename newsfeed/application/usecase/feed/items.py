"""Response items shared by every use case returning news or comments."""

from datetime import datetime
from typing import Optional, Sequence

from pydantic import BaseModel

from newsfeed.domain.model import Comment, ContentItem, News
from newsfeed.domain.service import EngagementService
from newsfeed.domain.value import NewsOrigin, ParentType, SaveState, Viewer, VoteState


class ContentItemView(BaseModel):
    """Fields common to news and comment items in responses.

    ``vote_state`` and ``save_state`` are only set for signed-in callers.
    """

    id: int
    kind: ParentType
    author_id: Optional[int]
    likes: int
    dislikes: int
    score: int
    reply_count: int
    deleted: bool
    created_at: datetime
    updated_at: datetime
    vote_state: Optional[VoteState] = None
    save_state: Optional[SaveState] = None


class NewsItem(ContentItemView):
    """News item in response."""

    title: str
    body: str
    sources: str
    tags: str
    thumbnail: Optional[str]
    link: Optional[str]
    origin: NewsOrigin


class CommentItem(ContentItemView):
    """Comment item in response."""

    parent_id: int
    parent_type: ParentType
    body: str


def to_item(item: ContentItem) -> NewsItem | CommentItem:
    """Build the response item for a news item or comment."""
    common = dict(
        id=item.id,
        kind=item.kind,
        author_id=item.author_id,
        likes=item.likes,
        dislikes=item.dislikes,
        score=item.score,
        reply_count=item.reply_count,
        deleted=item.deleted,
        created_at=item.created_at,
        updated_at=item.updated_at,
    )
    if isinstance(item, News):
        return NewsItem(
            **common,
            title=item.title,
            body=item.body,
            sources=item.sources,
            tags=item.tags,
            thumbnail=item.thumbnail,
            link=item.link,
            origin=item.origin,
        )
    if isinstance(item, Comment):
        return CommentItem(
            **common,
            parent_id=item.parent_id,
            parent_type=item.parent_type,
            body=item.body,
        )
    raise TypeError(f"Unsupported content item: {type(item).__name__}")


async def to_items(
    items: Sequence[ContentItem],
    engagement_service: EngagementService,
    viewer: Optional[Viewer],
) -> list[NewsItem | CommentItem]:
    """Build response items, with the viewer's vote and save states.

    States are looked up with one batch query per kind and per ledger.
    """
    views = [to_item(item) for item in items]
    if viewer is None or not views:
        return views

    for kind in ParentType:
        ids = [view.id for view in views if view.kind is kind]
        if not ids:
            continue

        votes = await engagement_service.get_vote_states(viewer.user_id, kind, ids)
        saves = await engagement_service.get_save_states(viewer.user_id, kind, ids)
        for view in views:
            if view.kind is kind:
                view.vote_state = votes[view.id]
                view.save_state = saves[view.id]

    return views
