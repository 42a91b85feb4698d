"""
repositories/organization_repo.py
---------------------------------
Data access layer for organizations.
All SQL queries related to the `organizations` table live here.
"""

from typing import Optional

from psycopg2 import errors

from helpers.sql import sql_for_partial_update, with_where
from models.filters import OrganizationFilters
from repositories.base import BaseRepository, equity_to_text
from utils.errors import BadRequestError, ConflictError, NotFoundError
from utils.logger import get_logger

logger = get_logger(__name__)

COLUMNS = (
    'handle, name, description, '
    'num_employees AS "numEmployees", logo_url AS "logoUrl"'
)

JS_TO_SQL = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}

NAME_CONSTRAINT = "organizations_name_key"


def _conflict(e: errors.UniqueViolation, handle: str, name: str) -> ConflictError:
    """Word a unique violation after the constraint that raised it."""
    if e.diag.constraint_name == NAME_CONSTRAINT:
        return ConflictError(f"Duplicate organization name: {name}")
    return ConflictError(f"Duplicate organization: {handle}")


class OrganizationRepository(BaseRepository):
    """Repository for CRUD operations on the organizations table."""

    # ── CREATE ────────────────────────────────────────────

    def create(self, data: dict) -> dict:
        """
        Insert a new organization.

        Args:
            data: {handle, name, description, numEmployees, logoUrl}.

        Returns:
            {handle, name, description, numEmployees, logoUrl}

        Raises:
            ConflictError: If the handle (or name) is already taken.
        """
        handle = data["handle"]
        duplicate = self._fetch_one(
            "SELECT handle FROM organizations WHERE handle = %s", (handle,)
        )
        if duplicate:
            raise ConflictError(f"Duplicate organization: {handle}")

        sql = f"""
            INSERT INTO organizations (handle, name, description, num_employees, logo_url)
            VALUES (%s, %s, %s, %s, %s)
            RETURNING {COLUMNS}
        """
        try:
            organization = self._write(sql, (
                handle,
                data["name"],
                data.get("description", ""),
                data.get("numEmployees"),
                data.get("logoUrl"),
            ))
        except errors.UniqueViolation as e:
            # name taken, or a concurrent create won the race after our probe
            raise _conflict(e, handle, data["name"]) from e

        logger.info(f"Created organization {handle}")
        return organization

    # ── READ ──────────────────────────────────────────────

    def find_all(self, filters: Optional[OrganizationFilters] = None) -> list[dict]:
        """
        List organizations ordered by name, optionally filtered.

        Raises:
            BadRequestError: If the filters carry an inverted employee range.
        """
        where_sql, values = (filters or OrganizationFilters()).to_sql()
        sql = with_where(f"SELECT {COLUMNS} FROM organizations", where_sql)
        return self._fetch_all(sql + " ORDER BY name", values)

    def get(self, handle: str) -> dict:
        """
        Fetch one organization with its postings.

        Returns:
            {handle, name, description, numEmployees, logoUrl, jobs}
            where jobs is [{id, title, salary, equity}, ...]

        Raises:
            NotFoundError: If no organization has this handle.
        """
        organization = self._fetch_one(
            f"SELECT {COLUMNS} FROM organizations WHERE handle = %s", (handle,)
        )
        if not organization:
            raise NotFoundError(f"No organization: {handle}")

        jobs = self._fetch_all(
            """
            SELECT id, title, salary, equity
            FROM postings
            WHERE company_handle = %s
            ORDER BY id
            """,
            (handle,),
        )
        organization["jobs"] = [equity_to_text(j) for j in jobs]
        return organization

    # ── UPDATE ────────────────────────────────────────────

    def update(self, handle: str, data: dict) -> dict:
        """
        Partially update an organization; only the given fields change.

        Args:
            handle: Organization to update.
            data: Any of {name, description, numEmployees, logoUrl}.

        Raises:
            BadRequestError: If data is empty or tries to change the handle.
            NotFoundError: If no organization has this handle.
            ConflictError: If the new name belongs to another organization.
        """
        if "handle" in data:
            raise BadRequestError("Organization handle cannot be changed")

        set_cols, values = sql_for_partial_update(data, JS_TO_SQL)
        sql = f"""
            UPDATE organizations
            SET {set_cols}
            WHERE handle = %s
            RETURNING {COLUMNS}
        """
        try:
            organization = self._write(sql, [*values, handle])
        except errors.UniqueViolation as e:
            raise ConflictError(f"Duplicate organization name: {data.get('name')}") from e

        if not organization:
            raise NotFoundError(f"No organization: {handle}")
        return organization

    # ── DELETE ────────────────────────────────────────────

    def remove(self, handle: str) -> None:
        """
        Delete an organization (its postings cascade).

        Raises:
            NotFoundError: If no organization has this handle.
        """
        deleted = self._write(
            "DELETE FROM organizations WHERE handle = %s RETURNING handle", (handle,)
        )
        if not deleted:
            raise NotFoundError(f"No organization: {handle}")
        logger.info(f"Deleted organization {handle}")
