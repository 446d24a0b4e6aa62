"""News aggregate root."""

from typing import ClassVar, Optional

from pydantic import Field, model_validator

from newsfeed.domain.model.content import ContentItem
from newsfeed.domain.value import NewsId, NewsOrigin, ParentType


class News(ContentItem):
    """A news item, either written on the site or ingested from outside.

    ``reply_count`` counts every comment in the thread, direct or nested.
    Removing a news item replaces its content instead of deleting the row, so
    the comments under it stay addressable.
    """

    kind: ClassVar[ParentType] = ParentType.NEWS

    id: Optional[NewsId] = None
    title: str = Field(min_length=1, max_length=300)
    body: str = ""
    sources: str = ""
    tags: str = ""
    thumbnail: Optional[str] = None
    link: Optional[str] = None
    origin: NewsOrigin = NewsOrigin.CREATED
    external_id: Optional[str] = Field(default=None, max_length=255)

    @model_validator(mode="after")
    def validate_origin(self) -> "News":
        """Ingested news must carry the id it has at its source."""
        if self.origin is NewsOrigin.INGESTED and not self.external_id:
            raise ValueError("external_id is required for ingested news")
        return self
