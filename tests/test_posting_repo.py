"""
Tests for repositories/posting_repo.py against a scripted cursor.
"""

from decimal import Decimal

import pytest

from models.filters import PostingFilters
from repositories.posting_repo import PostingRepository
from tests.conftest import statements
from utils.errors import BadRequestError, NotFoundError


@pytest.fixture
def repo(db) -> PostingRepository:
    return PostingRepository(db)


@pytest.fixture
def clerk_row() -> dict:
    return {
        "id": 7,
        "title": "Clerk",
        "salary": 40000,
        "equity": Decimal("0.05"),
        "companyHandle": "acme",
    }


class TestCreate:

    def test_checks_organization_then_inserts(self, repo, db, clerk_row):
        db.cursor.fetchone.side_effect = [{"handle": "acme"}, clerk_row]

        posting = repo.create({"title": "Clerk", "salary": 40000, "equity": "0.05", "companyHandle": "acme"})

        assert posting == {**clerk_row, "equity": "0.05"}
        (probe_sql, probe_params), (insert_sql, insert_params) = statements(db)
        assert probe_sql == "SELECT handle FROM organizations WHERE handle = %s"
        assert probe_params == ["acme"]
        assert insert_sql.startswith("INSERT INTO postings (title, salary, equity, company_handle)")
        assert insert_params == ["Clerk", 40000, "0.05", "acme"]

    def test_unknown_organization(self, repo, db):
        with pytest.raises(NotFoundError, match="No organization: ghost"):
            repo.create({"title": "Clerk", "companyHandle": "ghost"})
        assert len(statements(db)) == 1
        db.conn.commit.assert_not_called()


class TestFindAll:

    def test_joins_organization_name(self, repo, db):
        db.cursor.fetchall.return_value = [
            {"id": 7, "title": "Clerk", "salary": 40000, "equity": Decimal("0"),
             "companyHandle": "acme", "companyName": "Acme"},
        ]

        jobs = repo.find_all()

        assert jobs[0]["companyName"] == "Acme"
        assert jobs[0]["equity"] == "0"
        [(sql, params)] = statements(db)
        assert "LEFT JOIN organizations ON organizations.handle = postings.company_handle" in sql
        assert "WHERE" not in sql
        assert sql.endswith("ORDER BY postings.id")
        assert params == []

    def test_filters(self, repo, db):
        repo.find_all(PostingFilters(min_salary=30000, has_equity=True, title_like="cl"))

        [(sql, params)] = statements(db)
        assert sql.endswith(
            "postings.company_handle WHERE salary >= %s AND equity > 0 AND title ILIKE %s "
            "ORDER BY postings.id"
        )
        assert params == [30000, "%cl%"]


class TestGet:

    def test_replaces_handle_with_company(self, repo, db, clerk_row, acme_row):
        db.cursor.fetchone.side_effect = [dict(clerk_row), acme_row]

        posting = repo.get(7)

        assert "companyHandle" not in posting
        assert posting["company"] == acme_row
        assert posting["equity"] == "0.05"
        (_, first_params), (_, company_params) = statements(db)
        assert first_params == [7]
        assert company_params == ["acme"]

    def test_missing(self, repo, db):
        with pytest.raises(NotFoundError, match="No posting: 99"):
            repo.get(99)


class TestUpdate:

    def test_only_named_fields_are_set(self, repo, db, clerk_row):
        db.cursor.fetchone.return_value = {**clerk_row, "title": "Senior Clerk"}

        posting = repo.update(7, {"title": "Senior Clerk"})

        assert posting["title"] == "Senior Clerk"
        assert posting["salary"] == 40000
        [(sql, params)] = statements(db)
        assert sql.startswith('UPDATE postings SET "title"=%s WHERE id = %s RETURNING')
        assert "salary" not in sql.split("RETURNING")[0]
        assert params == ["Senior Clerk", 7]

    def test_id_is_immutable(self, repo, db):
        with pytest.raises(BadRequestError):
            repo.update(7, {"id": 8})

    def test_organization_is_fixed(self, repo, db):
        with pytest.raises(BadRequestError):
            repo.update(7, {"companyHandle": "missing"})
        db.get_connection.assert_not_called()

    def test_empty_data(self, repo, db):
        with pytest.raises(BadRequestError):
            repo.update(7, {})
        db.get_connection.assert_not_called()

    def test_missing(self, repo, db):
        with pytest.raises(NotFoundError):
            repo.update(99, {"salary": 1})


class TestRemove:

    def test_deletes(self, repo, db):
        db.cursor.fetchone.return_value = {"id": 7}
        repo.remove(7)
        assert statements(db) == [("DELETE FROM postings WHERE id = %s RETURNING id", [7])]

    def test_missing(self, repo, db):
        with pytest.raises(NotFoundError):
            repo.remove(99)
