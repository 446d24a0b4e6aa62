"""initial_schema

Create the schema for the news feed:
- Users (local mirror of the identity service)
- News (written on the site or ingested from external sources)
- Comments (threaded under news or other comments)
- Votes (one like or dislike per user and item)
- Saves (bookmarks)
- Follows (user -> author)

Revision ID: 3c1f9a7e52d0
Revises:
Create Date: 2026-10-12 09:14:03.481920

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1f9a7e52d0"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _counter(name: str) -> sa.Column:
    return sa.Column(name, sa.Integer(), nullable=False, server_default="0")


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def _desc(*columns: str) -> list:
    return [sa.text(f"{column} DESC") for column in columns]


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.BigInteger(), sa.Identity(), nullable=False),
        sa.Column("handle", sa.String(255), nullable=False),
        sa.Column("role", sa.String(20), nullable=False, server_default="user"),
        sa.Column("verified", sa.Boolean(), nullable=False, server_default="false"),
        _counter("followers"),
        _counter("written_news"),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("followers >= 0", name="check_users_followers"),
        sa.CheckConstraint("written_news >= 0", name="check_users_written_news"),
    )

    # ========================================================================
    # NEWS table
    # ========================================================================
    op.create_table(
        "news",
        sa.Column("id", sa.BigInteger(), sa.Identity(), nullable=False),
        sa.Column("author_id", sa.BigInteger(), nullable=True),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("body", sa.Text(), nullable=False, server_default=""),
        sa.Column("sources", sa.Text(), nullable=False, server_default=""),
        sa.Column("tags", sa.Text(), nullable=False, server_default=""),
        sa.Column("thumbnail", sa.Text(), nullable=True),
        sa.Column("link", sa.Text(), nullable=True),
        sa.Column("origin", sa.String(20), nullable=False),
        sa.Column("external_id", sa.String(255), nullable=True),
        _counter("likes"),
        _counter("dislikes"),
        _counter("score"),
        _counter("reply_count"),
        sa.Column("deleted", sa.Boolean(), nullable=False, server_default="false"),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("external_id", name="uq_news_external_id"),
        sa.CheckConstraint("likes >= 0", name="check_news_likes"),
        sa.CheckConstraint("dislikes >= 0", name="check_news_dislikes"),
        sa.CheckConstraint("reply_count >= 0", name="check_news_reply_count"),
        sa.CheckConstraint("score = likes - dislikes", name="check_news_score"),
    )
    op.create_index("idx_news_score", "news", _desc("score", "created_at", "id"))
    op.create_index("idx_news_recency", "news", _desc("created_at", "id"))
    op.create_index(
        "idx_news_author_score",
        "news",
        [sa.text("author_id"), *_desc("score", "created_at", "id")],
    )
    op.create_index(
        "idx_news_author_recency",
        "news",
        [sa.text("author_id"), *_desc("created_at", "id")],
    )

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column("id", sa.BigInteger(), sa.Identity(), nullable=False),
        sa.Column("author_id", sa.BigInteger(), nullable=True),
        sa.Column("parent_id", sa.BigInteger(), nullable=False),
        sa.Column("parent_type", sa.String(20), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        _counter("likes"),
        _counter("dislikes"),
        _counter("score"),
        _counter("reply_count"),
        sa.Column("deleted", sa.Boolean(), nullable=False, server_default="false"),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("likes >= 0", name="check_comments_likes"),
        sa.CheckConstraint("dislikes >= 0", name="check_comments_dislikes"),
        sa.CheckConstraint("reply_count >= 0", name="check_comments_reply_count"),
        sa.CheckConstraint("score = likes - dislikes", name="check_comments_score"),
        sa.CheckConstraint(
            "parent_type IN ('news', 'comment')", name="check_comments_parent_type"
        ),
    )
    op.create_index(
        "idx_comments_parent_score",
        "comments",
        [
            sa.text("parent_type"),
            sa.text("parent_id"),
            *_desc("score", "created_at", "id"),
        ],
    )
    op.create_index(
        "idx_comments_parent_recency",
        "comments",
        [sa.text("parent_type"), sa.text("parent_id"), *_desc("created_at", "id")],
    )
    op.create_index(
        "idx_comments_author_recency",
        "comments",
        [sa.text("author_id"), *_desc("created_at", "id")],
    )

    # ========================================================================
    # VOTES table
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column("id", sa.BigInteger(), sa.Identity(), nullable=False),
        sa.Column("user_id", sa.BigInteger(), nullable=False),
        sa.Column("parent_id", sa.BigInteger(), nullable=False),
        sa.Column("parent_type", sa.String(20), nullable=False),
        sa.Column("kind", sa.String(10), nullable=False),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "user_id", "parent_type", "parent_id", name="uq_user_vote"
        ),
        sa.CheckConstraint("kind IN ('like', 'dislike')", name="check_votes_kind"),
    )
    op.create_index(
        "idx_votes_user_recency",
        "votes",
        [sa.text("user_id"), sa.text("kind"), *_desc("created_at", "id")],
    )
    op.create_index("idx_votes_parent", "votes", ["parent_type", "parent_id"])

    # ========================================================================
    # SAVES table
    # ========================================================================
    op.create_table(
        "saves",
        sa.Column("id", sa.BigInteger(), sa.Identity(), nullable=False),
        sa.Column("user_id", sa.BigInteger(), nullable=False),
        sa.Column("parent_id", sa.BigInteger(), nullable=False),
        sa.Column("parent_type", sa.String(20), nullable=False),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "user_id", "parent_type", "parent_id", name="uq_user_save"
        ),
    )
    op.create_index(
        "idx_saves_user_recency",
        "saves",
        [sa.text("user_id"), *_desc("created_at", "id")],
    )
    op.create_index("idx_saves_parent", "saves", ["parent_type", "parent_id"])

    # ========================================================================
    # FOLLOWS table
    # ========================================================================
    op.create_table(
        "follows",
        sa.Column("id", sa.BigInteger(), sa.Identity(), nullable=False),
        sa.Column("user_id", sa.BigInteger(), nullable=False),
        sa.Column("author_id", sa.BigInteger(), nullable=False),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "author_id", name="uq_user_follow"),
        sa.CheckConstraint("user_id <> author_id", name="check_follows_not_self"),
    )
    op.create_index(
        "idx_follows_user_recency",
        "follows",
        [sa.text("user_id"), *_desc("created_at", "id")],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("follows")
    op.drop_table("saves")
    op.drop_table("votes")
    op.drop_table("comments")
    op.drop_table("news")
    op.drop_table("users")
