"""
repositories/base.py
--------------------
Connection handling shared by all repositories.

Every statement takes its own connection from the pool and returns it
before the method moves on, so a repository operation that issues
several statements runs them as separate round trips.
"""

from typing import Any, Optional, Sequence

from psycopg2 import extras

from db.connection import Database
from utils.logger import get_logger

logger = get_logger(__name__)


class BaseRepository:
    """Holds the injected Database and runs single statements on it."""

    def __init__(self, db: Database):
        self.db = db

    def _fetch_one(self, sql: str, params: Sequence[Any] = ()) -> Optional[dict]:
        """Run a read and return its first row as a dict, or None."""
        conn = self.db.get_connection()
        try:
            with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                cur.execute(sql, params)
                row = cur.fetchone()
                return dict(row) if row else None
        finally:
            self.db.release_connection(conn)

    def _fetch_all(self, sql: str, params: Sequence[Any] = ()) -> list[dict]:
        """Run a read and return all rows as dicts."""
        conn = self.db.get_connection()
        try:
            with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                cur.execute(sql, params)
                return [dict(r) for r in cur.fetchall()]
        finally:
            self.db.release_connection(conn)

    def _write(
        self, sql: str, params: Sequence[Any] = (), returning: bool = True
    ) -> Optional[dict]:
        """
        Run a write in its own transaction.

        Args:
            sql: INSERT/UPDATE/DELETE statement.
            params: Values for the `%s` placeholders, in order.
            returning: Whether the statement has a RETURNING clause.

        Returns:
            The first returned row as a dict, or None when no row came back
            (or `returning` is False).

        Raises:
            psycopg2.Error: Re-raised after rolling back.
        """
        conn = self.db.get_connection()
        try:
            with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                cur.execute(sql, params)
                row = cur.fetchone() if returning else None
            conn.commit()
            return dict(row) if row else None
        except Exception as e:
            conn.rollback()
            logger.error(f"Write failed ({type(self).__name__}): {e}")
            raise
        finally:
            self.db.release_connection(conn)


def equity_to_text(row: Optional[dict]) -> Optional[dict]:
    """Render a NUMERIC equity column as a decimal string, in place."""
    if row is not None and row.get("equity") is not None:
        row["equity"] = str(row["equity"])
    return row
