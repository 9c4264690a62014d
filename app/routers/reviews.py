# =============================================================================
# app/routers/reviews.py - Review Endpoints
# =============================================================================
# Listing with filter/sort, single review reads, and vote increments.
#
# Path IDs are declared as str and validated by the service layer so a
# malformed ID answers 400 "Bad path" rather than a framework 422.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path, Query

from app.dependencies import DatabaseDep
from core.models.review import (
    ReviewDetailResponse,
    ReviewList,
    ReviewResponse,
    VoteUpdate,
)
from core.services.review_service import ReviewService

router = APIRouter()


@router.get("", response_model=ReviewList)
def list_reviews(
    database: DatabaseDep,
    category: Annotated[str | None, Query(description="Filter by category slug")] = None,
    sort_by: Annotated[str | None, Query(description="Column to sort by (default: created_at)")] = None,
    order: Annotated[str | None, Query(description="asc or desc (default: desc)")] = None,
):
    """
    List reviews.

    Every review carries a comment_count. Unknown categories, sort columns
    or orders answer 400.
    """
    reviews = ReviewService(database).list_reviews(
        category=category,
        sort_by=sort_by,
        order=order,
    )
    return {"reviews": reviews}


@router.get("/{review_id}", response_model=ReviewDetailResponse)
def get_review(
    review_id: Annotated[str, Path(description="Review ID")],
    database: DatabaseDep,
):
    """Get a single review with its comment count."""
    return {"review": ReviewService(database).get_review(review_id)}


@router.patch("/{review_id}", response_model=ReviewResponse)
def update_review_votes(
    review_id: Annotated[str, Path(description="Review ID")],
    request: VoteUpdate,
    database: DatabaseDep,
):
    """
    Change a review's votes by a relative amount.

    Body: {"inc_votes": <integer>}
    """
    review = ReviewService(database).increment_votes(review_id, request.inc_votes)
    return {"review": review}
