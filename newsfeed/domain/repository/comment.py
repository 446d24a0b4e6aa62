"""Comment repository interface."""

from abc import abstractmethod

from newsfeed.domain.model.comment import Comment
from newsfeed.domain.repository.content import ContentRepository
from newsfeed.domain.value import CommentId


class CommentRepository(ContentRepository[Comment]):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def create(self, comment: Comment) -> Comment:
        """Insert a comment.

        Args:
            comment: The comment to insert (``id`` is ignored)

        Returns:
            The stored comment, carrying its assigned ID
        """
        pass

    @abstractmethod
    async def update(self, comment: Comment) -> Comment:
        """Write back body, author and deleted flag of a comment.

        Counters are not touched.

        Raises:
            ValueError: If the comment has no ID
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Physically delete a comment that has no replies.

        The reply check and the delete are one statement, so a reply counted
        after the caller last read the comment keeps it in place.

        Returns:
            True if the comment was deleted, False if it doesn't exist or
            has replies
        """
        pass
