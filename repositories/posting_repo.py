"""
repositories/posting_repo.py
----------------------------
Data access layer for job postings.
All SQL queries related to the `postings` table live here.
"""

from typing import Optional

from helpers.sql import sql_for_partial_update, with_where
from models.filters import PostingFilters
from repositories.base import BaseRepository, equity_to_text
from utils.errors import BadRequestError, NotFoundError
from utils.logger import get_logger

logger = get_logger(__name__)

COLUMNS = 'id, title, salary, equity, company_handle AS "companyHandle"'

# updatable posting columns share their API names
JS_TO_SQL: dict[str, str] = {}


class PostingRepository(BaseRepository):
    """Repository for CRUD operations on the postings table."""

    # ── CREATE ────────────────────────────────────────────

    def create(self, data: dict) -> dict:
        """
        Insert a new posting; the id is generated.

        Args:
            data: {title, salary, equity, companyHandle}.

        Returns:
            {id, title, salary, equity, companyHandle}

        Raises:
            NotFoundError: If companyHandle names no organization.
        """
        company_handle = data["companyHandle"]
        company = self._fetch_one(
            "SELECT handle FROM organizations WHERE handle = %s", (company_handle,)
        )
        if not company:
            raise NotFoundError(f"No organization: {company_handle}")

        sql = f"""
            INSERT INTO postings (title, salary, equity, company_handle)
            VALUES (%s, %s, %s, %s)
            RETURNING {COLUMNS}
        """
        posting = self._write(sql, (
            data["title"],
            data.get("salary"),
            data.get("equity"),
            company_handle,
        ))
        logger.info(f"Created posting #{posting['id']} for {company_handle}")
        return equity_to_text(posting)

    # ── READ ──────────────────────────────────────────────

    def find_all(self, filters: Optional[PostingFilters] = None) -> list[dict]:
        """
        List postings ordered by id, each with its organization's name.

        Returns:
            [{id, title, salary, equity, companyHandle, companyName}, ...]
        """
        where_sql, values = (filters or PostingFilters()).to_sql()
        sql = with_where(
            """
            SELECT postings.id,
                   postings.title,
                   postings.salary,
                   postings.equity,
                   postings.company_handle AS "companyHandle",
                   organizations.name AS "companyName"
            FROM postings
            LEFT JOIN organizations ON organizations.handle = postings.company_handle
            """.rstrip(),
            where_sql,
        )
        rows = self._fetch_all(sql + " ORDER BY postings.id", values)
        return [equity_to_text(r) for r in rows]

    def get(self, posting_id: int) -> dict:
        """
        Fetch one posting with its organization.

        Returns:
            {id, title, salary, equity, company}
            where company is {handle, name, description, numEmployees, logoUrl}

        Raises:
            NotFoundError: If no posting has this id.
        """
        posting = self._fetch_one(
            f"SELECT {COLUMNS} FROM postings WHERE id = %s", (posting_id,)
        )
        if not posting:
            raise NotFoundError(f"No posting: {posting_id}")

        company_handle = posting.pop("companyHandle")
        posting["company"] = self._fetch_one(
            """
            SELECT handle,
                   name,
                   description,
                   num_employees AS "numEmployees",
                   logo_url AS "logoUrl"
            FROM organizations
            WHERE handle = %s
            """,
            (company_handle,),
        )
        return equity_to_text(posting)

    # ── UPDATE ────────────────────────────────────────────

    def update(self, posting_id: int, data: dict) -> dict:
        """
        Partially update a posting; only the given fields change.

        Args:
            posting_id: Posting to update.
            data: Any of {title, salary, equity}.

        Raises:
            BadRequestError: If data is empty or tries to change the id or
                the organization.
            NotFoundError: If no posting has this id.
        """
        if "id" in data:
            raise BadRequestError("Posting id cannot be changed")
        if "companyHandle" in data:
            raise BadRequestError("Posting cannot move to another organization")

        set_cols, values = sql_for_partial_update(data, JS_TO_SQL)
        sql = f"""
            UPDATE postings
            SET {set_cols}
            WHERE id = %s
            RETURNING {COLUMNS}
        """
        posting = self._write(sql, [*values, posting_id])
        if not posting:
            raise NotFoundError(f"No posting: {posting_id}")
        return equity_to_text(posting)

    # ── DELETE ────────────────────────────────────────────

    def remove(self, posting_id: int) -> None:
        """
        Delete a posting.

        Raises:
            NotFoundError: If no posting has this id.
        """
        deleted = self._write(
            "DELETE FROM postings WHERE id = %s RETURNING id", (posting_id,)
        )
        if not deleted:
            raise NotFoundError(f"No posting: {posting_id}")
        logger.info(f"Deleted posting #{posting_id}")
