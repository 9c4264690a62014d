# =============================================================================
# core/models/user.py - User Schemas
# =============================================================================
# Users own reviews and author comments. They are seeded externally.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """
    A registered user.

    Example:
        {
            "username": "bainesface",
            "name": "sarah",
            "avatar_url": "https://avatars2.githubusercontent.com/u/24394918?s=400&v=4"
        }
    """

    model_config = ConfigDict(from_attributes=True)

    username: str = Field(..., description="Unique username")
    name: str = Field(..., description="Display name")
    avatar_url: str = Field(..., description="URL of the user's avatar image")


class UserList(BaseModel):
    """Returned by GET /api/users."""

    users: list[User] = Field(default_factory=list)


class UserResponse(BaseModel):
    """Returned by GET /api/users/{username}."""

    user: User
