# =============================================================================
# app/routers/comments.py - Comment Endpoints
# =============================================================================
# Mounted at /api so review-scoped and comment-scoped paths live together:
# - GET    /api/reviews/{review_id}/comments
# - POST   /api/reviews/{review_id}/comments
# - DELETE /api/comments/{comment_id}
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path, Response, status

from app.dependencies import DatabaseDep
from core.models.comment import CommentCreate, CommentList, PostedCommentResponse
from core.services.comment_service import CommentService

router = APIRouter()


@router.get("/reviews/{review_id}/comments", response_model=CommentList)
def list_comments(
    review_id: Annotated[str, Path(description="Review ID")],
    database: DatabaseDep,
):
    """
    List comments on a review, newest first.

    A review with no comments returns an empty list.
    """
    return {"comments": CommentService(database).list_comments(review_id)}


@router.post(
    "/reviews/{review_id}/comments",
    response_model=PostedCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_comment(
    review_id: Annotated[str, Path(description="Review ID")],
    request: CommentCreate,
    database: DatabaseDep,
):
    """
    Post a comment on a review.

    Body: {"username": <existing username>, "body": <text>}
    """
    comment = CommentService(database).create_comment(
        review_id,
        username=request.username,
        body=request.body,
    )
    return {"postedComment": comment}


@router.delete(
    "/comments/{comment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_comment(
    comment_id: Annotated[str, Path(description="Comment ID")],
    database: DatabaseDep,
):
    """Delete a comment. Responds 204 with an empty body."""
    CommentService(database).delete_comment(comment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
