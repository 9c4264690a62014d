# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the review/comment logic:
# - catalog.py: Whitelist of sortable columns and sort orders
# - query_builder.py: Parameterized review listing statements
# - models/: Pydantic schemas for records and request bodies
# - services/: Reads and mutations against the injected store client
#
# Code in this package should NOT import from FastAPI routers.
# =============================================================================
