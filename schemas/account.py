"""
schemas/account.py
------------------
Request shapes for /users and /auth.
"""

from pydantic import Field

from schemas.base import RequestSchema

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class AccountAuth(RequestSchema):
    username: str = Field(min_length=1, max_length=25)
    password: str = Field(min_length=1)


class AccountRegister(RequestSchema):
    """Self-service signup; never grants admin."""

    username: str = Field(min_length=1, max_length=25)
    password: str = Field(min_length=5, max_length=20)
    first_name: str = Field(alias="firstName", min_length=1, max_length=30)
    last_name: str = Field(alias="lastName", min_length=1, max_length=30)
    email: str = Field(min_length=6, max_length=60, pattern=EMAIL_PATTERN)


class AccountNew(AccountRegister):
    """Admin-created account; may be an admin itself."""

    is_admin: bool = Field(default=False, alias="isAdmin")


class AccountUpdate(RequestSchema):
    password: str = Field(default=None, min_length=5, max_length=20)
    first_name: str = Field(default=None, alias="firstName", min_length=1, max_length=30)
    last_name: str = Field(default=None, alias="lastName", min_length=1, max_length=30)
    email: str = Field(default=None, min_length=6, max_length=60, pattern=EMAIL_PATTERN)
