"""In-memory comment repository for testing."""

from newsfeed.domain.model import Comment
from newsfeed.domain.repository.comment import CommentRepository
from newsfeed.domain.value import CommentId

from .content import InMemoryContentRepository


class InMemoryCommentRepository(InMemoryContentRepository[Comment], CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    table = "comments"

    async def create(self, comment: Comment) -> Comment:
        return self._insert(comment)

    async def update(self, comment: Comment) -> Comment:
        """Write back body, author, deleted flag and updated_at."""
        if comment.id is None:
            raise ValueError("Cannot update comment without an ID")

        current = self._items[comment.id]
        updated = current.model_copy(
            update={
                "body": comment.body,
                "author_id": comment.author_id,
                "deleted": comment.deleted,
                "updated_at": comment.updated_at,
            }
        )
        self._items[comment.id] = updated
        return updated

    async def delete(self, comment_id: CommentId) -> bool:
        comment = self._items.get(comment_id)
        if comment is None or comment.reply_count > 0:
            return False
        del self._items[comment_id]
        return True
