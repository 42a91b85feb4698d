"""
schemas/organization.py
-----------------------
Request shapes for /companies.
"""

from typing import Optional

from pydantic import Field

from schemas.base import RequestSchema


class OrganizationNew(RequestSchema):
    handle: str = Field(min_length=1, max_length=25, pattern=r"^[a-z0-9-]+$")
    name: str = Field(min_length=1)
    description: str = Field(default="")
    num_employees: Optional[int] = Field(default=None, alias="numEmployees", ge=0)
    logo_url: Optional[str] = Field(default=None, alias="logoUrl")


class OrganizationUpdate(RequestSchema):
    name: str = Field(default=None, min_length=1)
    description: str = Field(default=None)
    num_employees: Optional[int] = Field(default=None, alias="numEmployees", ge=0)
    logo_url: Optional[str] = Field(default=None, alias="logoUrl")


class OrganizationSearch(RequestSchema):
    """Query string for GET /companies."""

    min_employees: Optional[int] = Field(default=None, alias="minEmployees", ge=0)
    max_employees: Optional[int] = Field(default=None, alias="maxEmployees", ge=0)
    name_like: Optional[str] = Field(default=None, alias="nameLike", min_length=1)
