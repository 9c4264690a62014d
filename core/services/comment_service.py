# =============================================================================
# core/services/comment_service.py - Comment Business Logic
# =============================================================================
# Handles listing, creating and deleting comments on reviews.
# =============================================================================

import logging
from typing import Any

from app.exceptions import (
    CommentNotFoundError,
    InvalidInputError,
    InvalidUserError,
)
from core.models.comment import Comment
from core.services.catalog_service import CatalogService
from core.services.review_service import ReviewService
from lib.database import StoreClient
from lib.utils import parse_id

logger = logging.getLogger(__name__)

COMMENT_COLUMNS = "comment_id, review_id, author, body, votes, created_at"


class CommentService:
    """Service for comment operations."""

    def __init__(self, database: StoreClient):
        self.database = database
        self.reviews = ReviewService(database)
        self.catalog = CatalogService(database)

    def list_comments(self, review_id: Any) -> list[Comment]:
        """
        List comments on a review, newest first.

        Args:
            review_id: The review ID

        Returns:
            Comments for the review; empty list if it has none

        Raises:
            BadPathError: If review_id is malformed
            ReviewNotFoundError: If no review has that ID
        """
        parsed_id = ReviewService.parse_review_id(review_id)
        self.reviews.ensure_review_exists(parsed_id)

        rows = self.database.execute(
            f"""
            SELECT {COMMENT_COLUMNS}
            FROM comments
            WHERE review_id = %s
            ORDER BY created_at DESC, comment_id DESC;
            """,
            [parsed_id],
        )
        return [Comment(**row) for row in rows]

    def create_comment(self, review_id: Any, username: Any, body: Any) -> Comment:
        """
        Post a new comment on a review.

        Checks run in order: review ID shape, review existence, author
        existence. The store assigns comment_id and created_at; votes
        start at 0.

        Args:
            review_id: The review ID
            username: Existing username of the author
            body: Comment text

        Returns:
            The created comment

        Raises:
            BadPathError: If review_id is malformed
            ReviewNotFoundError: If no review has that ID
            InvalidUserError: If username is not a known user
            InvalidInputError: If body is empty or not a string
        """
        parsed_id = ReviewService.parse_review_id(review_id)
        self.reviews.ensure_review_exists(parsed_id)

        if not isinstance(username, str) or self.catalog.find_user(username) is None:
            raise InvalidUserError(username)

        if not isinstance(body, str) or not body.strip():
            raise InvalidInputError("body must be a non-empty string")

        rows = self.database.execute(
            f"""
            INSERT INTO comments (review_id, author, body, votes)
            VALUES (%s, %s, %s, 0)
            RETURNING {COMMENT_COLUMNS};
            """,
            [parsed_id, username, body],
        )

        comment = Comment(**rows[0])
        logger.info(f"Created comment {comment.comment_id} on review {parsed_id} by {username}")
        return comment

    def delete_comment(self, comment_id: Any) -> None:
        """
        Delete a comment by ID.

        Raises:
            InvalidInputError: If comment_id is malformed
            CommentNotFoundError: If no comment has that ID
        """
        parsed_id = parse_id(comment_id)
        if parsed_id is None:
            raise InvalidInputError("comment_id must be an integer")

        rows = self.database.execute(
            "DELETE FROM comments WHERE comment_id = %s RETURNING comment_id;",
            [parsed_id],
        )

        if not rows:
            raise CommentNotFoundError(parsed_id)

        logger.info(f"Deleted comment {parsed_id}")
