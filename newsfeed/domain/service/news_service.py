"""News domain service."""

from typing import List, Optional, Sequence

import logfire

from newsfeed.config import FeedSettings
from newsfeed.domain.error import (
    ContentDeletedError,
    ForbiddenError,
    NotAuthorizedError,
    NotFoundError,
)
from newsfeed.domain.model import News
from newsfeed.domain.model.content import utcnow
from newsfeed.domain.repository import NewsRepository, UserRepository
from newsfeed.domain.value import NewsId, NewsOrigin, UserRole, Viewer

from .base import Service
from .user_service import UserService


class NewsService(Service):
    """Domain service for news operations."""

    def __init__(
        self,
        news_repository: NewsRepository,
        user_repository: UserRepository,
        user_service: UserService,
        feed_settings: FeedSettings,
    ) -> None:
        """Initialize news service.

        Args:
            news_repository: News repository
            user_repository: User repository, for the written news counter
            user_service: User domain service
            feed_settings: Provides the tombstone text
        """
        self.news_repository = news_repository
        self.user_repository = user_repository
        self.user_service = user_service
        self.feed_settings = feed_settings

    async def get_news(self, news_id: NewsId) -> News:
        """Get a news item by ID.

        Raises:
            NotFoundError: If the news item doesn't exist
        """
        with logfire.span("news_service.get_news", news_id=news_id):
            news = await self.news_repository.find_by_id(news_id)
            if not news:
                logfire.warn("News not found", news_id=news_id)
                raise NotFoundError("News", news_id)
            return news

    def _require_publisher(self, viewer: Viewer) -> None:
        if viewer.role is not UserRole.AUTHOR or not viewer.verified:
            logfire.warn(
                "News publishing refused",
                user_id=viewer.user_id,
                role=viewer.role.value,
                verified=viewer.verified,
            )
            raise ForbiddenError("Only verified authors can publish news")

    async def create_news(
        self,
        viewer: Viewer,
        title: str,
        body: str = "",
        sources: str = "",
        tags: str = "",
        thumbnail: Optional[str] = None,
        link: Optional[str] = None,
    ) -> News:
        """Publish a news item written on the site.

        Args:
            viewer: Author of the news item
            title: Headline
            body: Article text
            sources: Free-form sources line
            tags: Free-form tags line
            thumbnail: URL of an already uploaded image
            link: Link to the full article

        Returns:
            Created news item

        Raises:
            ForbiddenError: If the caller isn't a verified author
        """
        with logfire.span("news_service.create_news", author_id=viewer.user_id):
            self._require_publisher(viewer)
            await self.user_service.ensure_user(viewer)

            news = await self.news_repository.create(
                News(
                    author_id=viewer.user_id,
                    title=title,
                    body=body,
                    sources=sources,
                    tags=tags,
                    thumbnail=thumbnail,
                    link=link,
                    origin=NewsOrigin.CREATED,
                )
            )
            await self.user_repository.adjust_written_news(viewer.user_id, 1)

            logfire.info("News created", news_id=news.id, author_id=viewer.user_id)
            return news

    async def _owned_news(self, viewer: Viewer, news_id: NewsId) -> News:
        news = await self.get_news(news_id)
        if news.author_id != viewer.user_id:
            logfire.warn(
                "Unauthorized news change", news_id=news_id, user_id=viewer.user_id
            )
            raise NotAuthorizedError("news", news_id, viewer.user_id)
        if news.deleted:
            raise ContentDeletedError("news", news_id)
        return news

    async def update_news(
        self,
        viewer: Viewer,
        news_id: NewsId,
        title: Optional[str] = None,
        body: Optional[str] = None,
        sources: Optional[str] = None,
        tags: Optional[str] = None,
        thumbnail: Optional[str] = None,
        link: Optional[str] = None,
    ) -> News:
        """Edit a news item. Only given fields change.

        Raises:
            NotFoundError: If the news item doesn't exist
            NotAuthorizedError: If the caller isn't its author
            ContentDeletedError: If it was deleted
        """
        with logfire.span(
            "news_service.update_news", news_id=news_id, user_id=viewer.user_id
        ):
            news = await self._owned_news(viewer, news_id)

            changes = {
                field: value
                for field, value in {
                    "title": title,
                    "body": body,
                    "sources": sources,
                    "tags": tags,
                    "thumbnail": thumbnail,
                    "link": link,
                }.items()
                if value is not None
            }
            if not changes:
                return news

            # model_copy skips validation; rebuild to check the new values
            updated = News.model_validate(
                {
                    **news.model_dump(exclude={"score"}),
                    **changes,
                    "updated_at": utcnow(),
                }
            )
            updated = await self.news_repository.update(updated)
            logfire.info("News updated", news_id=news_id, fields=sorted(changes))
            return updated

    async def delete_news(self, viewer: Viewer, news_id: NewsId) -> News:
        """Tombstone a news item.

        The row stays so its comments remain reachable; title and body are
        replaced and it drops out of news feeds.

        Raises:
            NotFoundError: If the news item doesn't exist
            NotAuthorizedError: If the caller isn't its author
            ContentDeletedError: If it was already deleted
        """
        with logfire.span(
            "news_service.delete_news", news_id=news_id, user_id=viewer.user_id
        ):
            news = await self._owned_news(viewer, news_id)

            tombstone = news.model_copy(
                update={
                    "deleted": True,
                    "title": self.feed_settings.tombstone_body,
                    "body": self.feed_settings.tombstone_body,
                    "thumbnail": None,
                    "link": None,
                    "updated_at": utcnow(),
                }
            )
            tombstone = await self.news_repository.update(tombstone)
            await self.user_repository.adjust_written_news(viewer.user_id, -1)

            logfire.info("News deleted", news_id=news_id, user_id=viewer.user_id)
            return tombstone

    async def ingest_news(self, viewer: Viewer, items: Sequence[News]) -> List[News]:
        """Store externally sourced news items, skipping known ones.

        Ingesting the same ``external_id`` twice is a no-op, so a batch can
        safely be retried.

        Args:
            viewer: Caller running the import
            items: News items with ``origin`` INGESTED and ``external_id`` set

        Returns:
            The news items that were newly created

        Raises:
            ForbiddenError: If the caller isn't a verified author
        """
        with logfire.span("news_service.ingest_news", count=len(items)):
            self._require_publisher(viewer)

            known = {
                news.external_id
                for news in await self.news_repository.find_by_external_ids(
                    [item.external_id for item in items if item.external_id]
                )
            }

            created = []
            seen = set(known)
            for item in items:
                if item.external_id in seen:
                    continue
                seen.add(item.external_id)

                news = await self.news_repository.create_ingested(item)
                if news is not None:
                    created.append(news)

            logfire.info(
                "News ingested",
                received=len(items),
                created=len(created),
                skipped=len(items) - len(created),
            )
            return created
