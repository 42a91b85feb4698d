"""
db/connection.py
----------------
Manages the PostgreSQL connection pool.
Uses psycopg2's ThreadedConnectionPool, since FastAPI runs sync
endpoints on a worker threadpool.

One `Database` is constructed at startup and handed to every repository.
Repositories take a connection per statement and give it back right
after; no connection is held across round trips.
"""

from typing import Optional

import psycopg2
from psycopg2 import pool

from config import DATABASE_URL, DB_POOL_MAX, DB_POOL_MIN
from utils.logger import get_logger

logger = get_logger(__name__)


class Database:
    """Process-wide handle around a psycopg2 connection pool."""

    def __init__(
        self,
        dsn: str = DATABASE_URL,
        min_conn: int = DB_POOL_MIN,
        max_conn: int = DB_POOL_MAX,
    ):
        self.dsn = dsn
        self.min_conn = min_conn
        self.max_conn = max_conn
        self._pool: Optional[pool.ThreadedConnectionPool] = None

    def open(self) -> None:
        """
        Initialize the connection pool.

        Raises:
            psycopg2.OperationalError: If the database is unreachable.
        """
        if self._pool is not None:
            return
        try:
            self._pool = pool.ThreadedConnectionPool(self.min_conn, self.max_conn, self.dsn)
            logger.info("Database connection pool initialized successfully.")
        except psycopg2.OperationalError as e:
            logger.error(f"Failed to initialize database pool: {e}")
            raise

    @property
    def is_open(self) -> bool:
        return self._pool is not None

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

    def close(self) -> None:
        """Close all connections in the pool."""
        if self._pool is not None:
            self._pool.closeall()
            self._pool = None
            logger.info("Database connection pool closed.")
