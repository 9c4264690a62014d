# =============================================================================
# core/models/category.py - Category Schemas
# =============================================================================
# Categories are reference data: seeded externally, never written by the API.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


class Category(BaseModel):
    """A board game category, e.g. {"slug": "dexterity", "description": "..."}"""

    model_config = ConfigDict(from_attributes=True)

    slug: str = Field(..., description="Unique short identifier of the category")
    description: str = Field(..., description="Human readable description")


class CategoryList(BaseModel):
    """Returned by GET /api/categories."""

    categories: list[Category] = Field(default_factory=list)
