"""Comment entity.

Comments hang off a news item or off another comment, forming a tree rooted
at a news item. A comment may only point at a parent that already exists, so
the tree never contains a cycle.
"""

from typing import ClassVar, Optional

from pydantic import Field

from newsfeed.domain.model.content import ContentItem
from newsfeed.domain.value import CommentId, ParentType


class Comment(ContentItem):
    """Comment entity.

    ``reply_count`` counts replies below it: every descendant, or only direct
    replies when propagation is limited to parent and root. A removed comment
    that has replies is kept as a tombstone. Its ``deleted`` flag is set, the
    body is replaced and the author is dropped.
    """

    kind: ClassVar[ParentType] = ParentType.COMMENT

    id: Optional[CommentId] = None
    parent_id: int
    parent_type: ParentType
    body: str = Field(min_length=1, max_length=10000)
