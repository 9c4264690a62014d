# =============================================================================
# core/services/catalog_service.py - Category and User Lookups
# =============================================================================
# Read-only access to the reference tables that reviews and comments point at.
# =============================================================================

import logging

from app.exceptions import UserNotFoundError
from core.models.category import Category
from core.models.user import User
from lib.database import StoreClient

logger = logging.getLogger(__name__)


class CatalogService:
    """Service for category and user reads."""

    def __init__(self, database: StoreClient):
        self.database = database

    def list_categories(self) -> list[Category]:
        """Return every category."""
        rows = self.database.execute(
            "SELECT slug, description FROM categories ORDER BY slug;"
        )
        return [Category(**row) for row in rows]

    def category_slugs(self) -> set[str]:
        """Return the set of valid category slugs for filter validation."""
        rows = self.database.execute("SELECT slug FROM categories;")
        return {row["slug"] for row in rows}

    def list_users(self) -> list[User]:
        """Return every user."""
        rows = self.database.execute(
            "SELECT username, name, avatar_url FROM users ORDER BY username;"
        )
        return [User(**row) for row in rows]

    def find_user(self, username: str) -> User | None:
        """
        Look up a user by username.

        Returns:
            The User, or None if no such username exists
        """
        rows = self.database.execute(
            "SELECT username, name, avatar_url FROM users WHERE username = %s;",
            [username],
        )
        return User(**rows[0]) if rows else None

    def get_user(self, username: str) -> User:
        """
        Get a user by username.

        Raises:
            UserNotFoundError: If the username doesn't exist
        """
        user = self.find_user(username)
        if user is None:
            raise UserNotFoundError(username)
        logger.debug(f"Fetched user: {username}")
        return user
