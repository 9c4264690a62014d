# =============================================================================
# core/catalog.py - Review Schema Catalog
# =============================================================================
# Static description of what the review listing may be sorted by.
#
# Each permitted sort column and order is an enum member mapped to a fixed
# SQL fragment. Query text is only ever assembled from these fragments;
# the raw query-string value is used as a lookup key and nothing more.
#
# Category filter values are NOT listed here. They are checked against the
# categories table at request time (see CatalogService.category_slugs).
# =============================================================================

from __future__ import annotations

from enum import Enum


class SortColumn(str, Enum):
    """Columns of the review projection that can be sorted on."""
    REVIEW_ID = "review_id"
    TITLE = "title"
    REVIEW_BODY = "review_body"
    DESIGNER = "designer"
    OWNER = "owner"
    REVIEW_IMG_URL = "review_img_url"
    CATEGORY = "category"
    CREATED_AT = "created_at"
    VOTES = "votes"
    COMMENT_COUNT = "comment_count"


class SortOrder(str, Enum):
    """Sort directions."""
    ASC = "asc"
    DESC = "desc"


# Safe SQL fragments, keyed by enum member
SORT_COLUMN_SQL: dict[SortColumn, str] = {
    SortColumn.REVIEW_ID: "reviews.review_id",
    SortColumn.TITLE: "reviews.title",
    SortColumn.REVIEW_BODY: "reviews.review_body",
    SortColumn.DESIGNER: "reviews.designer",
    SortColumn.OWNER: "reviews.owner",
    SortColumn.REVIEW_IMG_URL: "reviews.review_img_url",
    SortColumn.CATEGORY: "reviews.category",
    SortColumn.CREATED_AT: "reviews.created_at",
    SortColumn.VOTES: "reviews.votes",
    SortColumn.COMMENT_COUNT: "comment_count",
}

SORT_ORDER_SQL: dict[SortOrder, str] = {
    SortOrder.ASC: "ASC",
    SortOrder.DESC: "DESC",
}

DEFAULT_SORT_COLUMN = SortColumn.CREATED_AT
DEFAULT_SORT_ORDER = SortOrder.DESC


def resolve_sort_column(value: str | None) -> SortColumn | None:
    """
    Look up a sort column by its public name.

    Returns the default column when value is None, and None when the
    value is not a permitted column. Matching is exact.
    """
    if value is None:
        return DEFAULT_SORT_COLUMN
    try:
        return SortColumn(value)
    except ValueError:
        return None


def resolve_sort_order(value: str | None) -> SortOrder | None:
    """
    Look up a sort order, case-insensitively.

    Returns the default order when value is None, and None when the value
    is neither "asc" nor "desc" in any casing.
    """
    if value is None:
        return DEFAULT_SORT_ORDER
    try:
        return SortOrder(value.lower())
    except (ValueError, AttributeError):
        return None
