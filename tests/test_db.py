"""
Tests for db/ - the pool handle and schema setup.
"""

from unittest.mock import MagicMock

import psycopg2
import pytest

from db import connection as connection_module
from db.connection import Database
from db.init_db import SCHEMA_SQL, create_tables


class TestDatabase:

    @pytest.fixture
    def fake_pool(self, monkeypatch):
        pool_cls = MagicMock()
        monkeypatch.setattr(connection_module.pool, "ThreadedConnectionPool", pool_cls)
        return pool_cls

    def test_connection_before_open(self):
        with pytest.raises(RuntimeError):
            Database("postgresql://unused").get_connection()

    def test_open_get_release_close(self, fake_pool):
        database = Database("postgresql://x/y", min_conn=2, max_conn=4)

        database.open()
        database.open()
        conn = database.get_connection()
        database.release_connection(conn)
        database.close()

        fake_pool.assert_called_once_with(2, 4, "postgresql://x/y")
        instance = fake_pool.return_value
        instance.putconn.assert_called_once_with(instance.getconn.return_value)
        instance.closeall.assert_called_once()
        assert not database.is_open

    def test_unreachable_database(self, fake_pool):
        fake_pool.side_effect = psycopg2.OperationalError("no route")
        with pytest.raises(psycopg2.OperationalError):
            Database("postgresql://x/y").open()


class TestCreateTables:

    def test_runs_schema_and_commits(self, db):
        create_tables(db)
        db.cursor.execute.assert_called_once_with(SCHEMA_SQL)
        db.conn.commit.assert_called_once()
        db.release_connection.assert_called_once_with(db.conn)

    def test_rolls_back_on_failure(self, db):
        db.conn.cursor.return_value.__enter__.return_value.execute.side_effect = psycopg2.ProgrammingError("bad")
        with pytest.raises(psycopg2.ProgrammingError):
            create_tables(db)
        db.conn.rollback.assert_called_once()
        db.release_connection.assert_called_once_with(db.conn)

    def test_schema_covers_all_tables(self):
        for table in ("organizations", "postings", "accounts", "applications"):
            assert f"CREATE TABLE IF NOT EXISTS {table}" in SCHEMA_SQL
