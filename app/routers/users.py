# =============================================================================
# app/routers/users.py - User Endpoints
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path

from app.dependencies import DatabaseDep
from core.models.user import UserList, UserResponse
from core.services.catalog_service import CatalogService

router = APIRouter()


@router.get("", response_model=UserList)
def list_users(database: DatabaseDep):
    """List every user."""
    return {"users": CatalogService(database).list_users()}


@router.get("/{username}", response_model=UserResponse)
def get_user(
    username: Annotated[str, Path(description="Username")],
    database: DatabaseDep,
):
    """
    Get a single user.

    Responds 404 if the username doesn't exist.
    """
    return {"user": CatalogService(database).get_user(username)}
