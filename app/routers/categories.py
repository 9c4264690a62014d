# =============================================================================
# app/routers/categories.py - Category Endpoints
# =============================================================================

from fastapi import APIRouter

from app.dependencies import DatabaseDep
from core.models.category import CategoryList
from core.services.catalog_service import CatalogService

router = APIRouter()


@router.get("", response_model=CategoryList)
def list_categories(database: DatabaseDep):
    """List every board game category."""
    return {"categories": CatalogService(database).list_categories()}
