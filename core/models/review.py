# =============================================================================
# core/models/review.py - Review Schemas
# =============================================================================
# These models define the API contract for review operations:
# - Review: A stored review row
# - ReviewWithCommentCount: Review plus the derived comment_count aggregate
# - VoteUpdate: Body of PATCH /api/reviews/{review_id}
#
# comment_count is never stored; it is computed by the listing query.
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class Review(BaseModel):
    """
    Schema for a review as stored.

    Returned by:
    - PATCH /api/reviews/{review_id} (after a vote increment)

    Example:
        {
            "review_id": 3,
            "title": "Ultimate Werewolf",
            "review_body": "We couldn't find the werewolf!",
            "designer": "Akihisa Okui",
            "review_img_url": "https://www.golenbock.com/wp-content/uploads/2015/01/placeholder-user.png",
            "votes": 5,
            "category": "social deduction",
            "owner": "bainesface",
            "created_at": "2021-01-18T10:01:41.251Z"
        }
    """

    model_config = ConfigDict(from_attributes=True)

    # Store-assigned primary key
    review_id: int = Field(..., description="Unique review identifier")

    title: str = Field(..., description="Title of the game being reviewed")

    review_body: str = Field(..., description="Full review text")

    designer: str | None = Field(
        default=None,
        description="Designer of the game"
    )

    review_img_url: str | None = Field(
        default=None,
        description="URL of the review image"
    )

    # Mutable through relative increments; may go negative
    votes: int = Field(
        default=0,
        description="Net votes on the review"
    )

    # Foreign key to categories.slug
    category: str = Field(..., description="Category slug")

    # Foreign key to users.username
    owner: str = Field(..., description="Username of the reviewer")

    created_at: datetime = Field(..., description="When the review was written")


class ReviewWithCommentCount(Review):
    """
    Review plus the number of comments referencing it.

    Returned by:
    - GET /api/reviews (every row)
    - GET /api/reviews/{review_id}
    """

    comment_count: int = Field(
        default=0,
        ge=0,
        description="Number of comments on this review"
    )


class ReviewList(BaseModel):
    """Returned by GET /api/reviews."""

    reviews: list[ReviewWithCommentCount] = Field(default_factory=list)


class ReviewResponse(BaseModel):
    """Returned by PATCH /api/reviews/{review_id}."""

    review: Review


class ReviewDetailResponse(BaseModel):
    """Returned by GET /api/reviews/{review_id}."""

    review: ReviewWithCommentCount


class VoteUpdate(BaseModel):
    """
    Body of PATCH /api/reviews/{review_id}.

    inc_votes is a relative change: {"inc_votes": 1} adds a vote,
    {"inc_votes": -100} removes a hundred. Strings, floats and booleans
    are rejected.
    """

    inc_votes: StrictInt = Field(
        ...,
        description="Amount to add to the current vote count"
    )
