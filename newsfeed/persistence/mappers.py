"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel

from newsfeed.domain.model import Comment, Follow, News, Save, User, Vote
from newsfeed.domain.value import (
    CommentId,
    FeedPosition,
    FollowId,
    Handle,
    NewsId,
    NewsOrigin,
    ParentType,
    SaveId,
    UserId,
    UserRole,
    VoteId,
    VoteKind,
)


def model_to_dict(model: BaseModel, exclude: set[str] | None = None) -> Dict[str, Any]:
    """Dump a domain model into column values.

    Enums are stored by value; an unset ``id`` is left out so the database
    assigns one.
    """
    exclude = set(exclude or ())
    if getattr(model, "id", None) is None:
        exclude.add("id")

    return {
        key: value.value if isinstance(value, Enum) else value
        for key, value in model.model_dump(exclude=exclude).items()
    }


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        handle=Handle(row["handle"]),
        role=UserRole(row["role"]),
        verified=row["verified"],
        followers=row["followers"],
        written_news=row["written_news"],
        created_at=row["created_at"],
    )


def row_to_news(row: Dict[str, Any]) -> News:
    """Convert database row to News domain model.

    ``score`` is not read back: the model derives it from the counters.
    """
    return News(
        id=NewsId(row["id"]),
        author_id=UserId(row["author_id"]) if row["author_id"] is not None else None,
        title=row["title"],
        body=row["body"],
        sources=row["sources"],
        tags=row["tags"],
        thumbnail=row.get("thumbnail"),
        link=row.get("link"),
        origin=NewsOrigin(row["origin"]),
        external_id=row.get("external_id"),
        likes=row["likes"],
        dislikes=row["dislikes"],
        reply_count=row["reply_count"],
        deleted=row["deleted"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(row["id"]),
        author_id=UserId(row["author_id"]) if row["author_id"] is not None else None,
        parent_id=row["parent_id"],
        parent_type=ParentType(row["parent_type"]),
        body=row["body"],
        likes=row["likes"],
        dislikes=row["dislikes"],
        reply_count=row["reply_count"],
        deleted=row["deleted"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def row_to_position(row: Dict[str, Any]) -> FeedPosition:
    return FeedPosition(score=row["score"], created_at=row["created_at"], id=row["id"])


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(row["id"]),
        user_id=UserId(row["user_id"]),
        parent_id=row["parent_id"],
        parent_type=ParentType(row["parent_type"]),
        kind=VoteKind(row["kind"]),
        created_at=row["created_at"],
    )


def row_to_save(row: Dict[str, Any]) -> Save:
    """Convert database row to Save domain model."""
    return Save(
        id=SaveId(row["id"]),
        user_id=UserId(row["user_id"]),
        parent_id=row["parent_id"],
        parent_type=ParentType(row["parent_type"]),
        created_at=row["created_at"],
    )


def row_to_follow(row: Dict[str, Any]) -> Follow:
    """Convert database row to Follow domain model."""
    return Follow(
        id=FollowId(row["id"]),
        user_id=UserId(row["user_id"]),
        author_id=UserId(row["author_id"]),
        created_at=row["created_at"],
    )
