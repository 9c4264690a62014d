# =============================================================================
# lib/database.py - PostgreSQL Store Client
# =============================================================================
# This module wraps a psycopg2 connection pool behind a single capability:
#
#   rows = database.execute(sql, params)
#
# Statements use %s placeholders and every scalar value travels as a bound
# parameter. Each call borrows a connection, runs one statement, commits,
# and returns the connection to the pool. Rows come back as plain dicts.
#
# Usage:
#   from lib.database import Database
#   database = Database(settings.DATABASE_URL, min_conn=1, max_conn=10)
#   rows = database.execute("SELECT * FROM users WHERE username = %s;", ["bainesface"])
# =============================================================================

from __future__ import annotations

import logging
import threading
from typing import Any, Protocol, Sequence

import psycopg2
from psycopg2 import extras, pool

# Set up logging for this module
logger = logging.getLogger(__name__)


class DatabaseClientError(Exception):
    """
    Error during store operations.

    The message is for logs only. The API never forwards it to clients.
    """

    def __init__(
        self,
        message: str,
        code: str = "DATABASE_ERROR",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class StoreClient(Protocol):
    """Anything that can run a parameterized statement and return rows."""

    def execute(self, sql: str, params: Sequence[Any] = ()) -> list[dict[str, Any]]:
        ...

    def ping(self) -> bool:
        ...


class Database:
    """
    Pooled PostgreSQL client.

    One instance is created per application (see app.main lifespan) and
    handed to services through dependency injection.
    """

    def __init__(self, dsn: str, min_conn: int = 1, max_conn: int = 10):
        """
        Initialize the connection pool.

        Args:
            dsn: PostgreSQL connection string
            min_conn: Connections opened immediately
            max_conn: Maximum number of connections allowed

        Raises:
            DatabaseClientError: If the database is unreachable
        """
        # ThreadedConnectionPool raises PoolError when exhausted; callers
        # wait on this instead.
        self._slots = threading.BoundedSemaphore(max_conn)
        try:
            self._pool = pool.ThreadedConnectionPool(min_conn, max_conn, dsn)
            logger.info("Database connection pool initialized successfully")
        except psycopg2.OperationalError as e:
            raise DatabaseClientError(
                message=f"Failed to initialize database pool: {e}",
                code="POOL_INIT_FAILED",
            )

    def execute(self, sql: str, params: Sequence[Any] = ()) -> list[dict[str, Any]]:
        """
        Run one statement and return its rows.

        Args:
            sql: Statement text with %s placeholders
            params: Values bound to the placeholders, in order

        Returns:
            List of row dicts (empty for statements without a result set)

        Raises:
            DatabaseClientError: If no connection can be borrowed, or the
                statement fails (after rollback)
        """
        with self._slots:
            try:
                conn = self._pool.getconn()
            except pool.PoolError as e:
                logger.error(f"Could not borrow a connection: {e}")
                raise DatabaseClientError(
                    message=f"Could not borrow a connection: {e}",
                    code="POOL_UNAVAILABLE",
                )

            try:
                with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                    cur.execute(sql, list(params))
                    rows = [dict(row) for row in cur.fetchall()] if cur.description else []
                conn.commit()
                return rows
            except psycopg2.Error as e:
                conn.rollback()
                logger.error(f"Statement failed: {e}")
                raise DatabaseClientError(
                    message=f"Statement failed: {e}",
                    code="STATEMENT_FAILED",
                    details={"pgcode": e.pgcode},
                )
            finally:
                self._pool.putconn(conn)

    def ping(self) -> bool:
        """Check that a connection can be borrowed and used."""
        try:
            self.execute("SELECT 1 AS ok;")
            return True
        except DatabaseClientError:
            return False

    def close(self) -> None:
        """Close all connections in the pool."""
        self._pool.closeall()
        logger.info("Database connection pool closed")
