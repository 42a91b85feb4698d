"""
models/filters.py
-----------------
Search criteria for the organization and posting list queries.

Each class owns a fixed evaluation order for its criteria. Parameter
positions follow that order, not the order the caller passed them in.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from helpers.sql import WhereClause
from utils.errors import BadRequestError


@dataclass
class OrganizationFilters:
    """
    Optional criteria for listing organizations.

    Attributes:
        min_employees: Keep organizations with at least this many employees.
        max_employees: Keep organizations with at most this many employees.
        name_like: Case-insensitive substring of the organization name.
    """
    min_employees: Optional[int] = None
    max_employees: Optional[int] = None
    name_like: Optional[str] = None

    @classmethod
    def from_query(cls, query: Mapping[str, Any]) -> "OrganizationFilters":
        """Build from validated query-string data (camelCase keys)."""
        return cls(
            min_employees=query.get("minEmployees"),
            max_employees=query.get("maxEmployees"),
            name_like=query.get("nameLike"),
        )

    def to_sql(self) -> tuple[str, list]:
        """
        Returns:
            (where_fragment, values); the fragment is "" when no criteria are set.

        Raises:
            BadRequestError: If min_employees > max_employees.
        """
        if (
            self.min_employees is not None
            and self.max_employees is not None
            and self.min_employees > self.max_employees
        ):
            raise BadRequestError("Min employees cannot be greater than max")

        where = WhereClause()
        if self.min_employees is not None:
            where.add("num_employees >= %s", self.min_employees)
        if self.max_employees is not None:
            where.add("num_employees <= %s", self.max_employees)
        if self.name_like is not None:
            where.add_pattern("name ILIKE %s", self.name_like)
        return where.render()


@dataclass
class PostingFilters:
    """
    Optional criteria for listing postings.

    Attributes:
        min_salary: Keep postings paying at least this much.
        has_equity: When True, keep only postings with non-zero equity.
            False and None both leave equity unfiltered.
        title_like: Case-insensitive substring of the title.
    """
    min_salary: Optional[int] = None
    has_equity: Optional[bool] = None
    title_like: Optional[str] = None

    @classmethod
    def from_query(cls, query: Mapping[str, Any]) -> "PostingFilters":
        """Build from validated query-string data (camelCase keys)."""
        return cls(
            min_salary=query.get("minSalary"),
            has_equity=query.get("hasEquity"),
            title_like=query.get("titleLike"),
        )

    def to_sql(self) -> tuple[str, list]:
        """Returns (where_fragment, values) over the `postings` columns."""
        where = WhereClause()
        if self.min_salary is not None:
            where.add("salary >= %s", self.min_salary)
        if self.has_equity is True:
            where.add_flag("equity > 0")
        if self.title_like is not None:
            where.add_pattern("title ILIKE %s", self.title_like)
        return where.render()
