# =============================================================================
# core/services/review_service.py - Review Business Logic
# =============================================================================
# Handles review reads, listing with filter/sort, and vote increments.
# Separates HTTP concerns from database/business logic.
# =============================================================================

import logging
from typing import Any

from app.exceptions import BadPathError, InvalidInputError, ReviewNotFoundError
from core.models.review import Review, ReviewWithCommentCount
from core.query_builder import build_review_query, build_single_review_query
from core.services.catalog_service import CatalogService
from lib.database import StoreClient
from lib.utils import parse_id

logger = logging.getLogger(__name__)


class ReviewService:
    """
    Service for review operations.

    Every method validates its input before issuing any statement.
    """

    def __init__(self, database: StoreClient):
        self.database = database

    @staticmethod
    def parse_review_id(review_id: Any) -> int:
        """
        Validate the shape of a review ID.

        Raises:
            BadPathError: If the ID is not a decimal integer in INTEGER range
        """
        parsed = parse_id(review_id)
        if parsed is None:
            raise BadPathError(review_id)
        return parsed

    def get_review(self, review_id: Any) -> ReviewWithCommentCount:
        """
        Get a review by ID, including its comment count.

        Args:
            review_id: The review ID (int or digit string)

        Returns:
            The review with comment_count

        Raises:
            BadPathError: If review_id is malformed
            ReviewNotFoundError: If no review has that ID
        """
        parsed_id = self.parse_review_id(review_id)
        query = build_single_review_query(parsed_id)
        rows = self.database.execute(query.sql, query.params)

        if not rows:
            raise ReviewNotFoundError(parsed_id)

        return ReviewWithCommentCount(**rows[0])

    def ensure_review_exists(self, review_id: int) -> None:
        """
        Raise ReviewNotFoundError unless the review exists.

        review_id must already be validated.
        """
        rows = self.database.execute(
            "SELECT review_id FROM reviews WHERE review_id = %s;",
            [review_id],
        )
        if not rows:
            raise ReviewNotFoundError(review_id)

    def list_reviews(
        self,
        category: str | None = None,
        sort_by: str | None = None,
        order: str | None = None,
    ) -> list[ReviewWithCommentCount]:
        """
        List reviews with optional category filter and sorting.

        Args:
            category: Category slug to filter on (must exist)
            sort_by: Column to sort on (default: created_at)
            order: "asc" or "desc", any casing (default: desc)

        Returns:
            Matching reviews; empty list if none match

        Raises:
            InvalidQueryError: If a parameter fails validation
        """
        known_categories: set[str] = set()
        if category is not None:
            known_categories = CatalogService(self.database).category_slugs()

        query = build_review_query(
            category=category,
            sort_by=sort_by,
            order=order,
            known_categories=known_categories,
        )
        rows = self.database.execute(query.sql, query.params)

        logger.debug(f"Listed {len(rows)} reviews")
        return [ReviewWithCommentCount(**row) for row in rows]

    def increment_votes(self, review_id: Any, inc_votes: Any) -> Review:
        """
        Add inc_votes to a review's vote count.

        The increment runs as one UPDATE ... SET votes = votes + %s, so
        concurrent increments on the same review are all applied.

        Args:
            review_id: The review ID
            inc_votes: Integer to add (may be negative)

        Returns:
            The updated review

        Raises:
            InvalidInputError: If inc_votes is not an integer
            BadPathError: If review_id is malformed
            ReviewNotFoundError: If no review has that ID
        """
        if isinstance(inc_votes, bool) or not isinstance(inc_votes, int):
            raise InvalidInputError("inc_votes must be an integer")

        parsed_id = self.parse_review_id(review_id)

        rows = self.database.execute(
            """
            UPDATE reviews
            SET votes = votes + %s
            WHERE review_id = %s
            RETURNING review_id, title, review_body, designer, review_img_url,
                      votes, category, owner, created_at;
            """,
            [inc_votes, parsed_id],
        )

        if not rows:
            raise ReviewNotFoundError(parsed_id)

        review = Review(**rows[0])
        logger.info(f"Changed votes on review {parsed_id} by {inc_votes} (now {review.votes})")
        return review
