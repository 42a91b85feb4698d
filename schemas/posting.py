"""
schemas/posting.py
------------------
Request shapes for /jobs.

Equity travels as a decimal string in [0, 1), e.g. "0", "0.05".
"""

from typing import Optional

from pydantic import Field

from schemas.base import RequestSchema

EQUITY_PATTERN = r"^0(\.\d+)?$"


class PostingNew(RequestSchema):
    title: str = Field(min_length=1)
    salary: Optional[int] = Field(default=None, ge=0)
    equity: Optional[str] = Field(default=None, pattern=EQUITY_PATTERN)
    company_handle: str = Field(alias="companyHandle", min_length=1, max_length=25)


class PostingUpdate(RequestSchema):
    title: str = Field(default=None, min_length=1)
    salary: Optional[int] = Field(default=None, ge=0)
    equity: Optional[str] = Field(default=None, pattern=EQUITY_PATTERN)


class PostingSearch(RequestSchema):
    """Query string for GET /jobs."""

    min_salary: Optional[int] = Field(default=None, alias="minSalary", ge=0)
    has_equity: Optional[bool] = Field(default=None, alias="hasEquity")
    title_like: Optional[str] = Field(default=None, alias="titleLike", min_length=1)
