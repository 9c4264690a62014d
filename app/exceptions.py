# =============================================================================
# app/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error leaves the API as {"msg": "<human readable message>"}.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ReviewsApiException(Exception):
    """
    Base exception for the reviews API.

    All custom exceptions inherit from this class. `code` is machine-readable
    and only used for logging; clients see `message` and `status_code`.
    """

    def __init__(
        self,
        message: str,
        code: str = "REVIEWS_API_ERROR",
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        return {"msg": self.message}


# =============================================================================
# Validation Exceptions (raised before the store is touched)
# =============================================================================

class BadPathError(ReviewsApiException):
    """Raised when a path segment is not a valid identifier."""

    def __init__(self, value: Any = None):
        super().__init__(
            message="Bad path",
            code="BAD_PATH",
            status_code=400,
            details={"value": value},
        )


class InvalidQueryError(ReviewsApiException):
    """Raised when a listing query parameter fails the whitelist."""

    CODES = {
        "sort_by": "INVALID_SORT_COLUMN",
        "order": "INVALID_ORDER",
        "category": "INVALID_CATEGORY",
    }

    def __init__(self, field: str, value: Any = None):
        super().__init__(
            message=f"Invalid {field} query",
            code=self.CODES.get(field, "INVALID_QUERY"),
            status_code=400,
            details={"field": field, "value": value},
        )
        self.field = field


class InvalidInputError(ReviewsApiException):
    """Raised when a request body or identifier has the wrong shape."""

    def __init__(self, reason: str | None = None):
        super().__init__(
            message="Bad request",
            code="INVALID_INPUT",
            status_code=400,
            details={"reason": reason} if reason else None,
        )


class InvalidUserError(ReviewsApiException):
    """Raised when a comment author is not a known user."""

    def __init__(self, username: Any):
        super().__init__(
            message="Invalid user",
            code="INVALID_USER",
            status_code=400,
            details={"username": username},
        )


# =============================================================================
# Not Found Exceptions
# =============================================================================

class ReviewNotFoundError(ReviewsApiException):
    """Raised when a review ID doesn't exist."""

    def __init__(self, review_id: int):
        super().__init__(
            message="No review exists with that ID",
            code="NOT_FOUND",
            status_code=404,
            details={"review_id": review_id},
        )


class CommentNotFoundError(ReviewsApiException):
    """Raised when a comment ID doesn't exist."""

    def __init__(self, comment_id: int):
        super().__init__(
            message="No comment exists with that ID",
            code="NOT_FOUND",
            status_code=404,
            details={"comment_id": comment_id},
        )


class UserNotFoundError(ReviewsApiException):
    """Raised when a username doesn't exist."""

    def __init__(self, username: str):
        super().__init__(
            message="No user exists with that username",
            code="NOT_FOUND",
            status_code=404,
            details={"username": username},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def reviews_api_exception_handler(
    request: Request,
    exc: ReviewsApiException
) -> JSONResponse:
    """Convert ReviewsApiException to JSON response."""
    logger.debug(f"{exc.code} on {request.method} {request.url.path}: {exc.details}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle request validation errors.

    Malformed bodies (missing fields, wrong types, invalid JSON) are a
    client error with the same message as other bad input.
    """
    logger.debug(f"Request validation failed on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=400,
        content={"msg": "Bad request"}
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """
    Handle routing errors raised by Starlette.

    Unknown paths and unsupported methods both answer 400 "Bad path".
    """
    if exc.status_code in (404, 405):
        return JSONResponse(status_code=400, content={"msg": "Bad path"})
    return JSONResponse(
        status_code=exc.status_code,
        content={"msg": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )
