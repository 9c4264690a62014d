# =============================================================================
# core/query_builder.py - Review Listing Query Builder
# =============================================================================
# Builds the parameterized SELECT behind GET /api/reviews.
#
# Inputs come straight from the query string and are validated here:
# - sort_by  -> must name a SortColumn            (else INVALID_SORT_COLUMN)
# - order    -> must be asc/desc, any casing      (else INVALID_ORDER)
# - category -> must be one of the known slugs    (else INVALID_CATEGORY)
#
# ORDER BY text is taken from the catalog's fragment maps. The category value
# is bound as a %s parameter. Validation happens before any SQL is produced,
# so rejected input never reaches the store.
# =============================================================================

from __future__ import annotations

import logging
from collections.abc import Collection
from typing import Any, NamedTuple

from app.exceptions import InvalidQueryError
from core.catalog import (
    SORT_COLUMN_SQL,
    SORT_ORDER_SQL,
    resolve_sort_column,
    resolve_sort_order,
)

logger = logging.getLogger(__name__)


REVIEW_PROJECTION = """
    SELECT
        reviews.review_id,
        reviews.title,
        reviews.review_body,
        reviews.designer,
        reviews.review_img_url,
        reviews.votes,
        reviews.category,
        reviews.owner,
        reviews.created_at,
        COUNT(comments.comment_id) AS comment_count
    FROM reviews
    LEFT JOIN comments ON comments.review_id = reviews.review_id
"""

GROUP_BY_REVIEW = "GROUP BY reviews.review_id"


class ReviewQuery(NamedTuple):
    """A statement and the values bound to its placeholders."""
    sql: str
    params: list[Any]


def build_review_query(
    category: str | None = None,
    sort_by: str | None = None,
    order: str | None = None,
    known_categories: Collection[str] = (),
) -> ReviewQuery:
    """
    Build the review listing statement.

    Args:
        category: Optional category slug to filter on
        sort_by: Optional column name (default: created_at)
        order: Optional "asc" or "desc" (default: desc)
        known_categories: Slugs that exist in the categories table

    Returns:
        ReviewQuery with %s placeholders and their parameters

    Raises:
        InvalidQueryError: If any parameter fails validation

    Example:
        query = build_review_query(category="dexterity", sort_by="votes",
                                   known_categories={"dexterity", "euro game"})
        rows = database.execute(query.sql, query.params)
    """
    column = resolve_sort_column(sort_by)
    if column is None:
        raise InvalidQueryError("sort_by", sort_by)

    direction = resolve_sort_order(order)
    if direction is None:
        raise InvalidQueryError("order", order)

    if category is not None and category not in known_categories:
        raise InvalidQueryError("category", category)

    clauses = [REVIEW_PROJECTION.strip()]
    params: list[Any] = []

    if category is not None:
        clauses.append("WHERE reviews.category = %s")
        params.append(category)

    column_sql = SORT_COLUMN_SQL[column]
    direction_sql = SORT_ORDER_SQL[direction]

    clauses.append(GROUP_BY_REVIEW)
    # review_id breaks ties so equal sort keys come back in a stable order
    clauses.append(
        f"ORDER BY {column_sql} {direction_sql}, reviews.review_id {direction_sql};"
    )

    logger.debug(f"Built review query: sort={column.value} order={direction.value} category={category!r}")
    return ReviewQuery(sql="\n".join(clauses), params=params)


def build_single_review_query(review_id: int) -> ReviewQuery:
    """Build the statement for one review with its comment count."""
    sql = "\n".join([
        REVIEW_PROJECTION.strip(),
        "WHERE reviews.review_id = %s",
        GROUP_BY_REVIEW + ";",
    ])
    return ReviewQuery(sql=sql, params=[review_id])
