# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - database.py: Pooled PostgreSQL client exposing execute(sql, params)
# - utils.py: Shared utilities (identifier parsing)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.database import Database, DatabaseClientError, StoreClient
from lib.utils import parse_id

__all__ = [
    # Database
    "Database",
    "DatabaseClientError",
    "StoreClient",
    # Utils
    "parse_id",
]
