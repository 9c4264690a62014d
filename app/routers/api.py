# =============================================================================
# app/routers/api.py - Endpoint Catalog
# =============================================================================
# GET /api describes every endpoint the API serves, with the queries it
# accepts and an example response.
# =============================================================================

from typing import Any

from fastapi import APIRouter

from core.catalog import SortColumn, SortOrder

router = APIRouter()


EXAMPLE_REVIEW = {
    "review_id": 3,
    "title": "Ultimate Werewolf",
    "review_body": "We couldn't find the werewolf!",
    "designer": "Akihisa Okui",
    "review_img_url": "https://www.golenbock.com/wp-content/uploads/2015/01/placeholder-user.png",
    "votes": 5,
    "category": "social deduction",
    "owner": "bainesface",
    "created_at": "2021-01-18T10:01:41.251Z",
}

EXAMPLE_COMMENT = {
    "comment_id": 2,
    "body": "My dog loved this game too!",
    "votes": 13,
    "author": "mallionaire",
    "review_id": 3,
    "created_at": "2021-01-18T10:09:05.410Z",
}

ENDPOINTS: dict[str, dict[str, Any]] = {
    "GET /api": {
        "description": "serves a json representation of all the available endpoints of the api",
    },
    "GET /api/categories": {
        "description": "serves an array of all categories",
        "queries": [],
        "exampleResponse": {
            "categories": [
                {"slug": "social deduction", "description": "Players attempt to uncover each other's hidden role"},
            ]
        },
    },
    "GET /api/reviews": {
        "description": "serves an array of all reviews, each with a comment_count",
        "queries": ["category", "sort_by", "order"],
        "sort_by": [column.value for column in SortColumn],
        "order": [direction.value for direction in SortOrder],
        "exampleResponse": {
            "reviews": [{**EXAMPLE_REVIEW, "comment_count": 3}],
        },
    },
    "GET /api/reviews/:review_id": {
        "description": "serves the review with the given id, with its comment_count",
        "queries": [],
        "exampleResponse": {"review": {**EXAMPLE_REVIEW, "comment_count": 3}},
    },
    "PATCH /api/reviews/:review_id": {
        "description": "changes the review's votes by inc_votes and serves the updated review",
        "exampleRequest": {"inc_votes": 1},
        "exampleResponse": {"review": {**EXAMPLE_REVIEW, "votes": 6}},
    },
    "GET /api/reviews/:review_id/comments": {
        "description": "serves an array of comments on the review, newest first",
        "queries": [],
        "exampleResponse": {"comments": [EXAMPLE_COMMENT]},
    },
    "POST /api/reviews/:review_id/comments": {
        "description": "adds a comment by an existing user to the review and serves it",
        "exampleRequest": {"username": "mallionaire", "body": "My dog loved this game too!"},
        "exampleResponse": {"postedComment": {**EXAMPLE_COMMENT, "votes": 0}},
    },
    "DELETE /api/comments/:comment_id": {
        "description": "deletes the comment with the given id and responds with no content",
    },
    "GET /api/users": {
        "description": "serves an array of all users",
        "queries": [],
        "exampleResponse": {
            "users": [
                {
                    "username": "bainesface",
                    "name": "sarah",
                    "avatar_url": "https://avatars2.githubusercontent.com/u/24394918?s=400&v=4",
                }
            ]
        },
    },
    "GET /api/users/:username": {
        "description": "serves the user with the given username",
        "queries": [],
        "exampleResponse": {
            "user": {
                "username": "bainesface",
                "name": "sarah",
                "avatar_url": "https://avatars2.githubusercontent.com/u/24394918?s=400&v=4",
            }
        },
    },
}


@router.get("")
async def list_endpoints():
    """Describe every available endpoint."""
    return {"endpoints": ENDPOINTS}
