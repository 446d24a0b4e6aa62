"""Reply counter bookkeeping for comment threads."""

from typing import NoReturn, Optional

import logfire

from newsfeed.config import FeedSettings
from newsfeed.domain.error import InconsistentError, NotFoundError
from newsfeed.domain.model import Comment
from newsfeed.domain.model.content import utcnow
from newsfeed.domain.repository import CommentRepository, NewsRepository
from newsfeed.domain.value import NewsId, ParentType

from .base import Service
from .engagement_service import EngagementService


class ReplyCounterService(Service):
    """Keeps ``reply_count`` of ancestors in step with added comments.

    The walk up the parent chain is a series of independent single-row
    increments, not one transaction. A failure halfway leaves the ancestors
    above it one short; reply counts are presentation aggregates and that
    staleness is accepted.
    """

    def __init__(
        self,
        news_repository: NewsRepository,
        comment_repository: CommentRepository,
        engagement_service: EngagementService,
        feed_settings: FeedSettings,
    ) -> None:
        """Initialize reply counter service.

        Args:
            news_repository: News repository
            comment_repository: Comment repository
            engagement_service: Used to drop votes and saves of deleted comments
            feed_settings: Propagation mode, depth limit and tombstone text
        """
        self.news_repository = news_repository
        self.comment_repository = comment_repository
        self.engagement_service = engagement_service
        self.feed_settings = feed_settings

    def _broken_chain(
        self, comment: Comment, message: str, **attributes
    ) -> NoReturn:
        logfire.error(message, comment_id=comment.id, **attributes)
        raise InconsistentError(f"{message} (comment {comment.id})")

    async def on_comment_added(self, comment: Comment) -> NewsId:
        """Bump reply counters above a newly persisted comment.

        With ``parent_and_root`` propagation the direct parent comment and the
        root news item are incremented; with ``all_ancestors`` every comment on
        the way up is as well.

        Args:
            comment: The comment that was just created

        Returns:
            ID of the news item at the root of the thread

        Raises:
            InconsistentError: If a parent doesn't exist or the chain is
                longer than ``max_thread_depth``
        """
        all_ancestors = self.feed_settings.reply_propagation == "all_ancestors"

        with logfire.span(
            "reply_counter_service.on_comment_added",
            comment_id=comment.id,
            mode=self.feed_settings.reply_propagation,
        ):
            parent_type = comment.parent_type
            parent_id = comment.parent_id
            direct = True

            for _ in range(self.feed_settings.max_thread_depth):
                if parent_type is ParentType.NEWS:
                    news = await self.news_repository.increment_reply_count(parent_id)
                    if news is None:
                        self._broken_chain(
                            comment, "Thread root not found", news_id=parent_id
                        )
                    logfire.info(
                        "Reply counted",
                        comment_id=comment.id,
                        news_id=parent_id,
                        reply_count=news.reply_count,
                    )
                    return NewsId(parent_id)

                if direct or all_ancestors:
                    parent: Optional[Comment] = (
                        await self.comment_repository.increment_reply_count(parent_id)
                    )
                else:
                    parent = await self.comment_repository.find_by_id(parent_id)

                if parent is None:
                    self._broken_chain(
                        comment, "Parent comment not found", parent_id=parent_id
                    )

                parent_type = parent.parent_type
                parent_id = parent.parent_id
                direct = False

            self._broken_chain(
                comment,
                "Thread deeper than allowed",
                max_thread_depth=self.feed_settings.max_thread_depth,
            )

    async def on_comment_removed(self, comment: Comment) -> Optional[Comment]:
        """Remove a comment while keeping its replies reachable.

        A comment with replies becomes a tombstone: flagged deleted, body
        replaced and author dropped. A comment without replies is deleted
        along with its votes and saves. Ancestor counters are left as they are.

        Returns:
            The tombstone, or None if the comment was deleted outright

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        with logfire.span(
            "reply_counter_service.on_comment_removed", comment_id=comment.id
        ):
            current = await self.comment_repository.find_by_id(comment.id)
            if current is None:
                raise NotFoundError("Comment", comment.id)

            if current.reply_count == 0:
                if await self.comment_repository.delete(current.id):
                    await self.engagement_service.purge(
                        ParentType.COMMENT, current.id
                    )
                    logfire.info("Comment deleted", comment_id=comment.id)
                    return None

                # A reply was counted since the read above
                current = await self.comment_repository.find_by_id(comment.id)
                if current is None:
                    raise NotFoundError("Comment", comment.id)

            tombstone = current.model_copy(
                update={
                    "deleted": True,
                    "body": self.feed_settings.tombstone_body,
                    "author_id": None,
                    "updated_at": utcnow(),
                }
            )
            tombstone = await self.comment_repository.update(tombstone)
            logfire.info(
                "Comment tombstoned",
                comment_id=comment.id,
                reply_count=current.reply_count,
            )
            return tombstone
