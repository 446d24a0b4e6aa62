"""Test configuration and shared helpers."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from newsfeed.config import AuthSettings, Settings
from newsfeed.domain.model import Comment, News, User
from newsfeed.domain.repository import CommentRepository, NewsRepository
from newsfeed.domain.value import Handle, ParentType, UserId, UserRole, Viewer

EPOCH = datetime(2026, 1, 1, tzinfo=timezone.utc)


def at(minutes: int) -> datetime:
    """A fixed timestamp, ``minutes`` after a common epoch."""
    return EPOCH + timedelta(minutes=minutes)


def reader(user_id: int, handle: Optional[str] = None) -> Viewer:
    """A signed-in user without publishing rights."""
    return Viewer(user_id=UserId(user_id), handle=handle)


def author(
    user_id: int, verified: bool = True, handle: Optional[str] = None
) -> Viewer:
    """A signed-in author, verified unless told otherwise."""
    return Viewer(
        user_id=UserId(user_id),
        role=UserRole.AUTHOR,
        verified=verified,
        handle=handle,
    )


def author_user(user_id: int, handle: str = "ada") -> User:
    """Mirror record of a verified author."""
    return User(
        id=UserId(user_id),
        handle=Handle(handle),
        role=UserRole.AUTHOR,
        verified=True,
    )


async def seed_news(
    news_repo: NewsRepository,
    title: str = "Test News",
    author_id: Optional[int] = None,
    **fields,
) -> News:
    """Store a news item directly, bypassing the service rules."""
    return await news_repo.create(
        News(
            title=title,
            author_id=UserId(author_id) if author_id is not None else None,
            **fields,
        )
    )


async def seed_comment(
    comment_repo: CommentRepository,
    parent_id: int,
    parent_type: ParentType = ParentType.NEWS,
    body: str = "Test comment",
    author_id: Optional[int] = None,
    **fields,
) -> Comment:
    """Store a comment directly, without touching ancestor counters."""
    return await comment_repo.create(
        Comment(
            parent_id=parent_id,
            parent_type=parent_type,
            body=body,
            author_id=UserId(author_id) if author_id is not None else None,
            **fields,
        )
    )


def token_for(viewer: Viewer, settings: Optional[AuthSettings] = None) -> str:
    """JWT the identity service would issue for ``viewer``.

    The token expires ``jwt_expiry_days`` from now, so a negative setting
    gives an already expired token.
    """
    settings = settings or Settings().auth
    payload = {
        "user_id": viewer.user_id,
        "role": viewer.role.value,
        "verified": viewer.verified,
        "handle": viewer.handle,
        "exp": datetime.now(timezone.utc)
        + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)
