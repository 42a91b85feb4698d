"""
Pytest configuration and shared fixtures.

Repository tests run against a mocked connection pool: `db.cursor` is the
cursor every statement goes through, so tests script its fetch results
and read back the SQL and parameters it was given.
"""

import os

os.environ.setdefault("BCRYPT_WORK_FACTOR", "4")
os.environ.setdefault("SECRET_KEY", "secret-test-key-0123456789abcdef0123")

from unittest.mock import MagicMock  # noqa: E402

import pytest  # noqa: E402

from security.tokens import create_token  # noqa: E402


def statements(db) -> list[tuple[str, list]]:
    """Every (sql, params) executed on the fake cursor, whitespace collapsed."""
    return [
        (" ".join(c.args[0].split()), list(c.args[1]) if len(c.args) > 1 else [])
        for c in db.cursor.execute.call_args_list
    ]


@pytest.fixture
def db() -> MagicMock:
    """A stand-in Database whose connections all share one scripted cursor."""
    database = MagicMock()
    conn = database.get_connection.return_value
    cursor = MagicMock()
    conn.cursor.return_value.__enter__.return_value = cursor
    cursor.fetchone.return_value = None
    cursor.fetchall.return_value = []
    database.conn = conn
    database.cursor = cursor
    return database


@pytest.fixture
def acme_row() -> dict:
    return {
        "handle": "acme",
        "name": "Acme",
        "description": "Anvils",
        "numEmployees": 10,
        "logoUrl": None,
    }


@pytest.fixture
def admin_token() -> str:
    return create_token({"username": "admin", "isAdmin": True})


@pytest.fixture
def bob_token() -> str:
    return create_token({"username": "bob", "isAdmin": False})


def auth_header(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}
