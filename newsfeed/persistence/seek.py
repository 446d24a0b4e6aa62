"""SQL building blocks for seek pagination.

Positions are compared as row values, ``(created_at, id) < (:created_at, :id)``,
which PostgreSQL answers straight from the composite indexes.
"""

from typing import Optional

from sqlalchemy import Select, Table, and_, tuple_
from sqlalchemy.sql.elements import ColumnElement

from newsfeed.domain.value import FeedFilter, FeedPosition, RecordPosition


def filter_clauses(table: Table, feed_filter: FeedFilter) -> list[ColumnElement[bool]]:
    """WHERE clauses selecting the rows of ``table`` that belong to a feed."""
    clauses: list[ColumnElement[bool]] = []
    if feed_filter.parent_id is not None and feed_filter.parent_type is not None:
        clauses.append(table.c.parent_type == feed_filter.parent_type.value)
        clauses.append(table.c.parent_id == feed_filter.parent_id)
    if feed_filter.author_ids is not None:
        clauses.append(table.c.author_id.in_(sorted(feed_filter.author_ids)))
    if feed_filter.origin is not None:
        clauses.append(table.c.origin == feed_filter.origin.value)
    if not feed_filter.include_deleted:
        clauses.append(table.c.deleted.is_(False))
    return clauses


def older_than(
    table: Table, position: FeedPosition | RecordPosition
) -> ColumnElement[bool]:
    """Rows strictly after ``position`` in (created_at DESC, id DESC) order."""
    return tuple_(table.c.created_at, table.c.id) < tuple_(
        position.created_at, position.id
    )


def by_recency(stmt: Select, table: Table) -> Select:
    return stmt.order_by(table.c.created_at.desc(), table.c.id.desc())


def by_score(stmt: Select, table: Table) -> Select:
    return stmt.order_by(
        table.c.score.desc(), table.c.created_at.desc(), table.c.id.desc()
    )


def recency_page(
    table: Table,
    feed_filter: FeedFilter,
    after: Optional[FeedPosition],
    limit: int,
) -> Select:
    stmt = table.select().where(*filter_clauses(table, feed_filter))
    if after is not None:
        stmt = stmt.where(older_than(table, after))
    return by_recency(stmt, table).limit(limit)


def score_band_page(
    table: Table,
    feed_filter: FeedFilter,
    cursor: FeedPosition,
    limit: int,
) -> Select:
    stmt = table.select().where(
        *filter_clauses(table, feed_filter),
        and_(table.c.score == cursor.score, older_than(table, cursor)),
    )
    return by_recency(stmt, table).limit(limit)


def below_score_page(
    table: Table,
    feed_filter: FeedFilter,
    score: Optional[int],
    limit: int,
) -> Select:
    stmt = table.select().where(*filter_clauses(table, feed_filter))
    if score is not None:
        stmt = stmt.where(table.c.score < score)
    return by_score(stmt, table).limit(limit)
