# =============================================================================
# tests/test_services.py - Service Layer Tests
# =============================================================================
# This module contains tests for:
# - Input validation that must happen before any statement runs (mock store)
# - Review, comment, category and user operations (seeded in-memory store)
# =============================================================================

import pytest

from app.exceptions import (
    BadPathError,
    CommentNotFoundError,
    InvalidInputError,
    InvalidQueryError,
    InvalidUserError,
    ReviewNotFoundError,
    UserNotFoundError,
)
from core.services import CatalogService, CommentService, ReviewService
from lib.utils import parse_id


# =============================================================================
# Identifier Parsing
# =============================================================================

class TestParseId:
    """Tests for lib.utils.parse_id."""

    @pytest.mark.parametrize("value,expected", [
        ("3", 3), (7, 7), ("2147483647", 2147483647), ("0", 0), (0, 0),
        ("-1", -1), ("03", 3), ("-2147483648", -2147483648),
    ])
    def test_valid(self, value, expected):
        assert parse_id(value) == expected

    @pytest.mark.parametrize(
        "value",
        [
            "banana", "3.5", " 3", "3\n", "-", "+3", "", None, True, 2.0,
            "2147483648", "-2147483649", "1; DROP TABLE",
        ],
    )
    def test_invalid(self, value):
        assert parse_id(value) is None


# =============================================================================
# Validation Before Store Access (mock store)
# =============================================================================

class TestValidationWithoutStore:
    """Malformed input must be rejected without touching the store."""

    def test_bad_review_id(self, mock_database):
        with pytest.raises(BadPathError):
            ReviewService(mock_database).get_review("invalid_path")
        mock_database.execute.assert_not_called()

    def test_invalid_sort_by(self, mock_database):
        with pytest.raises(InvalidQueryError):
            ReviewService(mock_database).list_reviews(sort_by="votes; DROP TABLE reviews;")
        mock_database.execute.assert_not_called()

    def test_invalid_order(self, mock_database):
        with pytest.raises(InvalidQueryError):
            ReviewService(mock_database).list_reviews(order="up")
        mock_database.execute.assert_not_called()

    def test_injected_category_only_triggers_slug_lookup(self, mock_database):
        """The category lookup runs, the listing statement never does."""
        mock_database.execute.return_value = [{"slug": "social deduction"}]

        with pytest.raises(InvalidQueryError) as exc_info:
            ReviewService(mock_database).list_reviews(category="social deduction; DROP TABLE reviews;")

        assert exc_info.value.field == "category"
        assert mock_database.execute.call_count == 1
        sql, = mock_database.execute.call_args.args
        assert "DROP" not in sql

    @pytest.mark.parametrize("inc_votes", ["10", 1.5, None, True, [1]])
    def test_non_integer_inc_votes(self, mock_database, inc_votes):
        with pytest.raises(InvalidInputError):
            ReviewService(mock_database).increment_votes(1, inc_votes)
        mock_database.execute.assert_not_called()

    def test_bad_comment_id(self, mock_database):
        with pytest.raises(InvalidInputError):
            CommentService(mock_database).delete_comment("four")
        mock_database.execute.assert_not_called()

    def test_create_comment_bad_review_id(self, mock_database):
        with pytest.raises(BadPathError):
            CommentService(mock_database).create_comment("one", "mallionaire", "Nice")
        mock_database.execute.assert_not_called()


# =============================================================================
# Review Service
# =============================================================================

class TestReviewService:
    """Tests for ReviewService against the seeded store."""

    def test_get_review(self, database):
        review = ReviewService(database).get_review(3)

        assert review.review_id == 3
        assert review.title == "Ultimate Werewolf"
        assert review.designer == "Akihisa Okui"
        assert review.votes == 5
        assert review.category == "social deduction"
        assert review.owner == "bainesface"
        assert review.comment_count == 3

    def test_get_review_accepts_digit_string(self, database):
        assert ReviewService(database).get_review("2").review_id == 2

    def test_get_review_without_comments(self, database):
        assert ReviewService(database).get_review(1).comment_count == 0

    def test_get_missing_review(self, database):
        with pytest.raises(ReviewNotFoundError) as exc_info:
            ReviewService(database).get_review(9999)

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "No review exists with that ID"

    @pytest.mark.parametrize("review_id", ["0", "-1", 0, -1])
    def test_get_review_zero_or_negative(self, database, review_id):
        with pytest.raises(ReviewNotFoundError):
            ReviewService(database).get_review(review_id)

    def test_list_reviews_default_sort(self, database):
        reviews = ReviewService(database).list_reviews()

        assert len(reviews) == 13
        created = [review.created_at for review in reviews]
        assert created == sorted(created, reverse=True)

    def test_list_reviews_ascending(self, database):
        reviews = ReviewService(database).list_reviews(order="asc")

        created = [review.created_at for review in reviews]
        assert created == sorted(created)
        assert reviews[0].review_id == 13

    def test_list_reviews_by_votes(self, database):
        reviews = ReviewService(database).list_reviews(sort_by="votes")

        votes = [review.votes for review in reviews]
        assert votes == sorted(votes, reverse=True)
        assert reviews[0].votes == 100

    def test_list_reviews_comment_counts(self, database):
        counts = {review.review_id: review.comment_count for review in ReviewService(database).list_reviews()}

        assert counts[2] == 3
        assert counts[3] == 3
        assert counts[1] == 0
        assert sum(counts.values()) == 6

    def test_list_reviews_by_category(self, database):
        reviews = ReviewService(database).list_reviews(category="dexterity")

        assert [review.review_id for review in reviews] == [2]

    def test_list_reviews_empty_category(self, database):
        assert ReviewService(database).list_reviews(category="children's games") == []

    def test_list_reviews_unknown_category(self, database):
        with pytest.raises(InvalidQueryError):
            ReviewService(database).list_reviews(category="not-a-category")

    def test_increment_votes(self, database):
        review = ReviewService(database).increment_votes(3, 10)

        assert review.review_id == 3
        assert review.votes == 15

    def test_increment_votes_is_additive(self, database):
        service = ReviewService(database)
        service.increment_votes(3, 10)
        review = service.increment_votes(3, 10)

        assert review.votes == 25

    def test_decrement_below_zero(self, database):
        """No floor is enforced on votes."""
        review = ReviewService(database).increment_votes(1, -100)

        assert review.votes == -99

    def test_increment_votes_missing_review(self, database):
        with pytest.raises(ReviewNotFoundError):
            ReviewService(database).increment_votes(9999, 1)


# =============================================================================
# Comment Service
# =============================================================================

class TestCommentService:
    """Tests for CommentService against the seeded store."""

    def test_list_comments(self, database):
        comments = CommentService(database).list_comments(3)

        assert [comment.comment_id for comment in comments] == [6, 3, 2]
        assert all(comment.review_id == 3 for comment in comments)

    def test_list_comments_empty(self, database):
        assert CommentService(database).list_comments(1) == []

    def test_list_comments_missing_review(self, database):
        with pytest.raises(ReviewNotFoundError):
            CommentService(database).list_comments(9999)

    def test_create_comment(self, database):
        before = database.count("comments")

        comment = CommentService(database).create_comment(1, "mallionaire", "Great farming game")

        assert comment.comment_id == 7
        assert comment.review_id == 1
        assert comment.author == "mallionaire"
        assert comment.body == "Great farming game"
        assert comment.votes == 0
        assert comment.created_at is not None
        assert database.count("comments") == before + 1

    def test_create_comment_unknown_user(self, database):
        before = database.count("comments")

        with pytest.raises(InvalidUserError) as exc_info:
            CommentService(database).create_comment(1, "nobody", "Hello")

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "Invalid user"
        assert database.count("comments") == before

    def test_create_comment_missing_review(self, database):
        """Review existence is checked before the author."""
        with pytest.raises(ReviewNotFoundError):
            CommentService(database).create_comment(9999, "nobody", "Hello")

    def test_create_comment_empty_body(self, database):
        with pytest.raises(InvalidInputError):
            CommentService(database).create_comment(1, "mallionaire", "   ")

    def test_delete_comment(self, database):
        CommentService(database).delete_comment(4)

        remaining = [row["comment_id"] for row in database.execute("SELECT comment_id FROM comments ORDER BY comment_id;")]
        assert remaining == [1, 2, 3, 5, 6]

    def test_delete_missing_comment(self, database):
        with pytest.raises(CommentNotFoundError) as exc_info:
            CommentService(database).delete_comment(9999)

        assert exc_info.value.message == "No comment exists with that ID"

    def test_delete_comment_zero_id(self, database):
        with pytest.raises(CommentNotFoundError):
            CommentService(database).delete_comment("0")

        assert database.count("comments") == 6


# =============================================================================
# Catalog Service
# =============================================================================

class TestCatalogService:
    """Tests for CatalogService against the seeded store."""

    def test_list_categories(self, database):
        categories = CatalogService(database).list_categories()

        assert len(categories) == 4
        assert {category.slug for category in categories} == {
            "euro game", "social deduction", "dexterity", "children's games",
        }

    def test_category_slugs(self, database):
        assert "dexterity" in CatalogService(database).category_slugs()

    def test_list_users(self, database):
        users = CatalogService(database).list_users()

        assert len(users) == 4
        assert all(user.avatar_url for user in users)

    def test_get_user(self, database):
        user = CatalogService(database).get_user("bainesface")

        assert user.name == "sarah"

    def test_get_missing_user(self, database):
        with pytest.raises(UserNotFoundError):
            CatalogService(database).get_user("nobody")
