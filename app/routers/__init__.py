# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - api.py: Endpoint catalog served at GET /api
# - categories.py: Category listing
# - reviews.py: Review listing, reads and vote updates
# - comments.py: Comment listing, creation and deletion
# - users.py: User listing and lookup
# - health.py: Health check endpoints
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import api
from . import categories
from . import comments
from . import health
from . import reviews
from . import users

__all__ = [
    "api",
    "categories",
    "comments",
    "health",
    "reviews",
    "users",
]
