"""
End-to-end repository scenarios against a real PostgreSQL server.

Skipped unless TEST_DATABASE_URL points at a database the tests may wipe.
"""

import os
from concurrent.futures import ThreadPoolExecutor

import pytest

from db.connection import Database
from db.init_db import create_tables
from models.filters import PostingFilters
from repositories.account_repo import AccountRepository
from repositories.organization_repo import OrganizationRepository
from repositories.posting_repo import PostingRepository
from utils.errors import ConflictError, NotFoundError

TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL")

pytestmark = [
    pytest.mark.postgres,
    pytest.mark.skipif(not TEST_DATABASE_URL, reason="TEST_DATABASE_URL not set"),
]


@pytest.fixture
def pg():
    database = Database(TEST_DATABASE_URL, min_conn=1, max_conn=4)
    database.open()
    create_tables(database)
    conn = database.get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute("TRUNCATE applications, postings, accounts, organizations RESTART IDENTITY CASCADE")
        conn.commit()
    finally:
        database.release_connection(conn)
    yield database
    database.close()


@pytest.fixture
def acme(pg) -> dict:
    return OrganizationRepository(pg).create({
        "handle": "acme", "name": "Acme", "description": "Anvils", "numEmployees": 10,
    })


@pytest.fixture
def clerk(pg, acme) -> dict:
    return PostingRepository(pg).create({
        "title": "Clerk", "salary": 40000, "equity": "0", "companyHandle": "acme",
    })


def test_organization_round_trip(pg, acme):
    found = OrganizationRepository(pg).get("acme")
    assert found == {**acme, "jobs": []}


def test_removed_organization_is_gone(pg, acme):
    repo = OrganizationRepository(pg)
    repo.remove("acme")
    with pytest.raises(NotFoundError):
        repo.get("acme")


def test_taken_name_is_reported_as_name_conflict(pg, acme):
    with pytest.raises(ConflictError, match="Duplicate organization name: Acme"):
        OrganizationRepository(pg).create({"handle": "acme-2", "name": "Acme"})


def test_partial_update_leaves_other_columns(pg, clerk):
    updated = PostingRepository(pg).update(clerk["id"], {"title": "Senior Clerk"})
    assert updated["title"] == "Senior Clerk"
    assert updated["salary"] == 40000
    assert updated["equity"] == clerk["equity"]


def test_posting_filters(pg, clerk):
    repo = PostingRepository(pg)

    assert repo.find_all(PostingFilters(min_salary=50000)) == []

    jobs = repo.find_all(PostingFilters(min_salary=30000))
    assert [j["title"] for j in jobs] == ["Clerk"]
    assert jobs[0]["companyName"] == "Acme"

    # zero equity does not count as having equity
    assert repo.find_all(PostingFilters(has_equity=True)) == []


def test_apply_to_missing_posting_writes_nothing(pg):
    accounts = AccountRepository(pg)
    accounts.create({
        "username": "bob", "password": "password1", "firstName": "Bob",
        "lastName": "Smith", "email": "bob@example.com",
    })

    with pytest.raises(NotFoundError):
        accounts.apply_to_job("bob", 999)

    assert accounts.get("bob")["jobs"] == []


def test_concurrent_creates_conflict(pg):
    repo = OrganizationRepository(pg)

    def create():
        try:
            return repo.create({"handle": "race", "name": "Race"})
        except ConflictError as e:
            return e

    with ThreadPoolExecutor(max_workers=2) as pool:
        results = list(pool.map(lambda _: create(), range(2)))

    assert sum(isinstance(r, ConflictError) for r in results) == 1
    assert sum(isinstance(r, dict) for r in results) == 1
