"""SQLAlchemy table definitions for the news feed.

They match the schema defined in Alembic migrations. Users are owned by the
identity service, so only news authors and followed authors (which are known
to be mirrored locally) reference the users table.

Content tables carry two composite indexes per filter dimension, one per
feed ordering: (score, created_at, id) and (created_at, id).
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Identity,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()


def _counter(name: str) -> Column:
    return Column(name, Integer, nullable=False, server_default="0")


def _timestamp(name: str) -> Column:
    return Column(
        name, TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    )


# ============================================================================
# USERS TABLE (mirror of the identity service)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", BigInteger, Identity(), primary_key=True),
    Column("handle", String(255), nullable=False),
    Column("role", String(20), nullable=False, server_default="user"),  # user, author
    Column("verified", Boolean, nullable=False, server_default="false"),
    _counter("followers"),
    _counter("written_news"),
    _timestamp("created_at"),
    CheckConstraint("followers >= 0", name="check_users_followers"),
    CheckConstraint("written_news >= 0", name="check_users_written_news"),
)

# ============================================================================
# NEWS TABLE
# ============================================================================
news_table = Table(
    "news",
    metadata,
    Column("id", BigInteger, Identity(), primary_key=True),
    Column(
        "author_id",
        BigInteger,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,  # Ingested news has no local author
    ),
    Column("title", String(300), nullable=False),
    Column("body", Text, nullable=False, server_default=""),
    Column("sources", Text, nullable=False, server_default=""),
    Column("tags", Text, nullable=False, server_default=""),
    Column("thumbnail", Text, nullable=True),
    Column("link", Text, nullable=True),
    Column("origin", String(20), nullable=False),  # created, ingested
    Column("external_id", String(255), nullable=True),
    _counter("likes"),
    _counter("dislikes"),
    _counter("score"),
    _counter("reply_count"),
    Column("deleted", Boolean, nullable=False, server_default="false"),
    _timestamp("created_at"),
    _timestamp("updated_at"),
    UniqueConstraint("external_id", name="uq_news_external_id"),
    CheckConstraint("likes >= 0", name="check_news_likes"),
    CheckConstraint("dislikes >= 0", name="check_news_dislikes"),
    CheckConstraint("reply_count >= 0", name="check_news_reply_count"),
    CheckConstraint("score = likes - dislikes", name="check_news_score"),
)

Index(
    "idx_news_score",
    news_table.c.score.desc(),
    news_table.c.created_at.desc(),
    news_table.c.id.desc(),
)
Index("idx_news_recency", news_table.c.created_at.desc(), news_table.c.id.desc())
Index(
    "idx_news_author_score",
    news_table.c.author_id,
    news_table.c.score.desc(),
    news_table.c.created_at.desc(),
    news_table.c.id.desc(),
)
Index(
    "idx_news_author_recency",
    news_table.c.author_id,
    news_table.c.created_at.desc(),
    news_table.c.id.desc(),
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", BigInteger, Identity(), primary_key=True),
    Column("author_id", BigInteger, nullable=True),  # NULL once tombstoned
    # Polymorphic parent: a news item or another comment
    Column("parent_id", BigInteger, nullable=False),
    Column("parent_type", String(20), nullable=False),  # news, comment
    Column("body", Text, nullable=False),
    _counter("likes"),
    _counter("dislikes"),
    _counter("score"),
    _counter("reply_count"),
    Column("deleted", Boolean, nullable=False, server_default="false"),
    _timestamp("created_at"),
    _timestamp("updated_at"),
    CheckConstraint("likes >= 0", name="check_comments_likes"),
    CheckConstraint("dislikes >= 0", name="check_comments_dislikes"),
    CheckConstraint("reply_count >= 0", name="check_comments_reply_count"),
    CheckConstraint("score = likes - dislikes", name="check_comments_score"),
    CheckConstraint(
        "parent_type IN ('news', 'comment')", name="check_comments_parent_type"
    ),
)

Index(
    "idx_comments_parent_score",
    comments_table.c.parent_type,
    comments_table.c.parent_id,
    comments_table.c.score.desc(),
    comments_table.c.created_at.desc(),
    comments_table.c.id.desc(),
)
Index(
    "idx_comments_parent_recency",
    comments_table.c.parent_type,
    comments_table.c.parent_id,
    comments_table.c.created_at.desc(),
    comments_table.c.id.desc(),
)
Index(
    "idx_comments_author_recency",
    comments_table.c.author_id,
    comments_table.c.created_at.desc(),
    comments_table.c.id.desc(),
)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", BigInteger, Identity(), primary_key=True),
    Column("user_id", BigInteger, nullable=False),
    Column("parent_id", BigInteger, nullable=False),
    Column("parent_type", String(20), nullable=False),  # news, comment
    Column("kind", String(10), nullable=False),  # like, dislike
    _timestamp("created_at"),
    UniqueConstraint("user_id", "parent_type", "parent_id", name="uq_user_vote"),
    CheckConstraint("kind IN ('like', 'dislike')", name="check_votes_kind"),
)

Index(
    "idx_votes_user_recency",
    votes_table.c.user_id,
    votes_table.c.kind,
    votes_table.c.created_at.desc(),
    votes_table.c.id.desc(),
)
Index("idx_votes_parent", votes_table.c.parent_type, votes_table.c.parent_id)

# ============================================================================
# SAVES TABLE
# ============================================================================
saves_table = Table(
    "saves",
    metadata,
    Column("id", BigInteger, Identity(), primary_key=True),
    Column("user_id", BigInteger, nullable=False),
    Column("parent_id", BigInteger, nullable=False),
    Column("parent_type", String(20), nullable=False),  # news, comment
    _timestamp("created_at"),
    UniqueConstraint("user_id", "parent_type", "parent_id", name="uq_user_save"),
)

Index(
    "idx_saves_user_recency",
    saves_table.c.user_id,
    saves_table.c.created_at.desc(),
    saves_table.c.id.desc(),
)
Index("idx_saves_parent", saves_table.c.parent_type, saves_table.c.parent_id)

# ============================================================================
# FOLLOWS TABLE
# ============================================================================
follows_table = Table(
    "follows",
    metadata,
    Column("id", BigInteger, Identity(), primary_key=True),
    Column("user_id", BigInteger, nullable=False),
    Column(
        "author_id",
        BigInteger,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    _timestamp("created_at"),
    UniqueConstraint("user_id", "author_id", name="uq_user_follow"),
    CheckConstraint("user_id <> author_id", name="check_follows_not_self"),
)

Index(
    "idx_follows_user_recency",
    follows_table.c.user_id,
    follows_table.c.created_at.desc(),
    follows_table.c.id.desc(),
)
