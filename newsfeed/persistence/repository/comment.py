"""PostgreSQL implementation of Comment repository."""

import logfire
from sqlalchemy import delete, insert, update

from newsfeed.domain.model import Comment
from newsfeed.domain.repository.comment import CommentRepository
from newsfeed.domain.value import CommentId
from newsfeed.persistence.mappers import model_to_dict, row_to_comment
from newsfeed.persistence.repository.content import PostgresContentRepository
from newsfeed.persistence.tables import comments_table


class PostgresCommentRepository(PostgresContentRepository[Comment], CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    table = comments_table
    row_to_item = staticmethod(row_to_comment)
    name = "comment"

    async def create(self, comment: Comment) -> Comment:
        with logfire.span(
            "comment_repository.create",
            parent_id=comment.parent_id,
            parent_type=comment.parent_type.value,
        ):
            stmt = (
                insert(comments_table)
                .values(**model_to_dict(comment, exclude={"id"}))
                .returning(comments_table)
            )
            result = await self.session.execute(stmt)
            return self._to_item(result.one())

    async def update(self, comment: Comment) -> Comment:
        """Write back body, author, deleted flag and updated_at."""
        if comment.id is None:
            raise ValueError("Cannot update comment without an ID")

        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment.id)
            .values(
                body=comment.body,
                author_id=comment.author_id,
                deleted=comment.deleted,
                updated_at=comment.updated_at,
            )
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        return self._to_item(result.one())

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment without replies (hard delete)."""
        stmt = delete(comments_table).where(
            comments_table.c.id == comment_id,
            comments_table.c.reply_count == 0,
        )
        result = await self.session.execute(stmt)
        return result.rowcount > 0
