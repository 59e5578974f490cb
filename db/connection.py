"""
db/connection.py
----------------
Supplies PostgreSQL connections to the repositories.
Uses psycopg2's SimpleConnectionPool for connection reuse.

Repositories receive a `ConnectionProvider` instead of reaching for a
global, so tests (or a second database) can hand them a different one.
The module-level helpers operate on a default provider built from config.
"""

from contextlib import contextmanager
from typing import Iterator

import psycopg2
from psycopg2 import pool

from config import DATABASE_URL, DB_POOL_MAX, DB_POOL_MIN
from utils.logger import get_logger

logger = get_logger(__name__)


class ConnectionProvider:
    """Hands out and takes back psycopg2 connections for one database."""

    def __init__(self, dsn: str, min_conn: int = 1, max_conn: int = 5):
        self.dsn = dsn
        self.min_conn = min_conn
        self.max_conn = max_conn
        self._pool: pool.SimpleConnectionPool | None = None

    def open(self) -> None:
        """
        Create the underlying pool. Calling it twice is a no-op.

        Raises:
            psycopg2.OperationalError: If the database is unreachable.
        """
        if self._pool is not None:
            return
        try:
            self._pool = pool.SimpleConnectionPool(self.min_conn, self.max_conn, self.dsn)
            logger.info("Database connection pool initialized successfully.")
        except psycopg2.OperationalError as e:
            logger.error(f"Failed to initialize database pool: {e}")
            raise

    def get_connection(self):
        """
        Get a connection from the pool.

        Raises:
            RuntimeError: If the pool has not been opened.
        """
        if self._pool is None:
            raise RuntimeError("Database pool not initialized. Call open() first.")
        return self._pool.getconn()

    def release_connection(self, conn) -> None:
        """Return a connection back to the pool."""
        if self._pool is not None:
            self._pool.putconn(conn)

    @contextmanager
    def connection(self) -> Iterator:
        """Yield a connection and always give it back afterwards."""
        conn = self.get_connection()
        try:
            yield conn
        finally:
            self.release_connection(conn)

    def close(self) -> None:
        """Close all connections in the pool."""
        if self._pool is not None:
            self._pool.closeall()
            self._pool = None
            logger.info("Database connection pool closed.")


_default = ConnectionProvider(DATABASE_URL, DB_POOL_MIN, DB_POOL_MAX)


def default_provider() -> ConnectionProvider:
    """The provider configured from environment settings."""
    return _default


def init_pool() -> None:
    _default.open()


def get_connection():
    return _default.get_connection()


def release_connection(conn) -> None:
    _default.release_connection(conn)


def close_pool() -> None:
    _default.close()
