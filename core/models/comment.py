# =============================================================================
# core/models/comment.py - Comment Schemas
# =============================================================================
# These models define the API contract for comment operations:
# - Comment: A stored comment row
# - CommentCreate: Body of POST /api/reviews/{review_id}/comments
# - CommentList / PostedCommentResponse: Response envelopes
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class Comment(BaseModel):
    """
    Schema for a comment as stored.

    Example:
        {
            "comment_id": 1,
            "body": "I loved this game too!",
            "votes": 16,
            "author": "bainesface",
            "review_id": 2,
            "created_at": "2017-11-22T12:43:33.389Z"
        }
    """

    model_config = ConfigDict(from_attributes=True)

    comment_id: int = Field(..., description="Unique comment identifier")

    # Foreign key to reviews.review_id
    review_id: int = Field(..., description="Review this comment belongs to")

    # Foreign key to users.username
    author: str = Field(..., description="Username of the commenter")

    body: str = Field(..., description="Comment text")

    votes: int = Field(default=0, description="Net votes on the comment")

    created_at: datetime = Field(..., description="When the comment was posted")


class CommentCreate(BaseModel):
    """
    Body of POST /api/reviews/{review_id}/comments.

    Example:
        {"username": "mallionaire", "body": "Great review!"}
    """

    username: StrictStr = Field(
        ...,
        min_length=1,
        description="Existing username posting the comment"
    )

    body: StrictStr = Field(
        ...,
        min_length=1,
        description="Comment text"
    )


class CommentList(BaseModel):
    """Returned by GET /api/reviews/{review_id}/comments."""

    comments: list[Comment] = Field(default_factory=list)


class PostedCommentResponse(BaseModel):
    """Returned by POST /api/reviews/{review_id}/comments."""

    postedComment: Comment
