# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .catalog_service import CatalogService
from .comment_service import CommentService
from .review_service import ReviewService

__all__ = [
    "CatalogService",
    "CommentService",
    "ReviewService",
]
