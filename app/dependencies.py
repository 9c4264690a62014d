# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# Tests swap the store for a seeded one with:
#   app.dependency_overrides[get_database] = lambda: test_database
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from lib.database import StoreClient


def get_database(request: Request) -> StoreClient:
    """
    Get the store client created at application startup.

    Returns the instance stored on app.state by the lifespan handler.
    """
    return request.app.state.database


# Type alias for dependency injection
DatabaseDep = Annotated[StoreClient, Depends(get_database)]
