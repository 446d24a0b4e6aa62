"""Comment domain service."""

from typing import Optional

import logfire

from newsfeed.domain.error import (
    ContentDeletedError,
    NotAuthorizedError,
    NotFoundError,
)
from newsfeed.domain.model import Comment
from newsfeed.domain.model.content import utcnow
from newsfeed.domain.repository import CommentRepository, NewsRepository
from newsfeed.domain.value import CommentId, ParentType, Viewer, coerce_enum

from .base import Service
from .reply_counter_service import ReplyCounterService


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        news_repository: NewsRepository,
        reply_counter_service: ReplyCounterService,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            news_repository: News repository, to check thread roots
            reply_counter_service: Keeps ancestor reply counts up to date
        """
        self.comment_repository = comment_repository
        self.news_repository = news_repository
        self.reply_counter_service = reply_counter_service

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID, tombstones included.

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        with logfire.span("comment_service.get_comment", comment_id=comment_id):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=comment_id)
                raise NotFoundError("Comment", comment_id)
            return comment

    async def add_comment(
        self,
        viewer: Viewer,
        parent_id: int,
        parent_type: ParentType | str,
        body: str,
    ) -> Comment:
        """Comment on a news item or reply to a comment.

        Args:
            viewer: Author of the comment
            parent_id: ID of the news item or comment replied to
            parent_type: Kind of parent
            body: Comment text

        Returns:
            Created comment

        Raises:
            InvalidArgumentError: If parent_type is invalid
            NotFoundError: If the parent doesn't exist
            ContentDeletedError: If the parent was deleted
        """
        parent_type = coerce_enum(ParentType, parent_type, "parent type")

        with logfire.span(
            "comment_service.add_comment",
            author_id=viewer.user_id,
            parent_id=parent_id,
            parent_type=parent_type.value,
        ):
            if parent_type is ParentType.NEWS:
                parent = await self.news_repository.find_by_id(parent_id)
            else:
                parent = await self.comment_repository.find_by_id(parent_id)

            if parent is None:
                logfire.warn(
                    "Comment on non-existent parent",
                    parent_id=parent_id,
                    parent_type=parent_type.value,
                )
                raise NotFoundError(parent_type.value.capitalize(), parent_id)
            if parent.deleted:
                raise ContentDeletedError(parent_type.value, parent_id)

            comment = await self.comment_repository.create(
                Comment(
                    author_id=viewer.user_id,
                    parent_id=parent_id,
                    parent_type=parent_type,
                    body=body,
                )
            )
            news_id = await self.reply_counter_service.on_comment_added(comment)

            logfire.info(
                "Comment created",
                comment_id=comment.id,
                news_id=news_id,
                author_id=viewer.user_id,
            )
            return comment

    async def _owned_comment(self, viewer: Viewer, comment_id: CommentId) -> Comment:
        comment = await self.get_comment(comment_id)
        if comment.deleted:
            raise ContentDeletedError("comment", comment_id)
        if comment.author_id != viewer.user_id:
            logfire.warn(
                "Unauthorized comment change",
                comment_id=comment_id,
                user_id=viewer.user_id,
            )
            raise NotAuthorizedError("comment", comment_id, viewer.user_id)
        return comment

    async def edit_comment(
        self, viewer: Viewer, comment_id: CommentId, body: str
    ) -> Comment:
        """Replace the body of one's own comment.

        Raises:
            NotFoundError: If the comment doesn't exist
            ContentDeletedError: If it was removed
            NotAuthorizedError: If the caller isn't its author
        """
        with logfire.span(
            "comment_service.edit_comment",
            comment_id=comment_id,
            user_id=viewer.user_id,
        ):
            comment = await self._owned_comment(viewer, comment_id)

            updated = Comment.model_validate(
                {
                    **comment.model_dump(exclude={"score"}),
                    "body": body,
                    "updated_at": utcnow(),
                }
            )
            updated = await self.comment_repository.update(updated)
            logfire.info("Comment updated", comment_id=comment_id)
            return updated

    async def remove_comment(
        self, viewer: Viewer, comment_id: CommentId
    ) -> Optional[Comment]:
        """Remove one's own comment.

        Returns:
            The tombstone left in its place when it has replies, None if it
            was deleted outright

        Raises:
            NotFoundError: If the comment doesn't exist
            ContentDeletedError: If it was already removed
            NotAuthorizedError: If the caller isn't its author
        """
        with logfire.span(
            "comment_service.remove_comment",
            comment_id=comment_id,
            user_id=viewer.user_id,
        ):
            comment = await self._owned_comment(viewer, comment_id)
            return await self.reply_counter_service.on_comment_removed(comment)
