# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - category.py: Category reference data
# - user.py: Users (review owners and comment authors)
# - review.py: Reviews, comment counts, vote updates
# - comment.py: Comments and the comment creation body
#
# These models define the "contract" between API and clients.
# =============================================================================

from .category import Category, CategoryList
from .comment import Comment, CommentCreate, CommentList, PostedCommentResponse
from .review import (
    Review,
    ReviewDetailResponse,
    ReviewList,
    ReviewResponse,
    ReviewWithCommentCount,
    VoteUpdate,
)
from .user import User, UserList, UserResponse

__all__ = [
    # Category
    "Category",
    "CategoryList",
    # Comment
    "Comment",
    "CommentCreate",
    "CommentList",
    "PostedCommentResponse",
    # Review
    "Review",
    "ReviewDetailResponse",
    "ReviewList",
    "ReviewResponse",
    "ReviewWithCommentCount",
    "VoteUpdate",
    # User
    "User",
    "UserList",
    "UserResponse",
]
