"""
repositories/account_repo.py
----------------------------
Data access layer for accounts and their job applications.
All SQL queries related to the `accounts` and `applications` tables live here.

The password column is write-only: no method returns it.
"""

from psycopg2 import errors

from helpers.sql import sql_for_partial_update
from repositories.base import BaseRepository
from security.passwords import hash_password, verify_password
from utils.errors import BadRequestError, ConflictError, NotFoundError, UnauthorizedError
from utils.logger import get_logger

logger = get_logger(__name__)

COLUMNS = (
    'username, first_name AS "firstName", last_name AS "lastName", '
    'email, is_admin AS "isAdmin"'
)

JS_TO_SQL = {
    "firstName": "first_name",
    "lastName": "last_name",
    "isAdmin": "is_admin",
}


class AccountRepository(BaseRepository):
    """Repository for CRUD operations on the accounts table."""

    def authenticate(self, username: str, password: str) -> dict:
        """
        Check a username/password pair.

        Returns:
            {username, firstName, lastName, email, isAdmin}

        Raises:
            UnauthorizedError: If the account is missing or the password is wrong.
        """
        account = self._fetch_one(
            f"SELECT {COLUMNS}, password FROM accounts WHERE username = %s", (username,)
        )
        if account and verify_password(password, account.pop("password")):
            return account
        raise UnauthorizedError("Invalid username/password")

    # ── CREATE ────────────────────────────────────────────

    def create(self, data: dict) -> dict:
        """
        Register a new account, storing a bcrypt hash of the password.

        Args:
            data: {username, password, firstName, lastName, email, isAdmin}.

        Returns:
            {username, firstName, lastName, email, isAdmin}

        Raises:
            ConflictError: If the username is already taken.
        """
        username = data["username"]
        duplicate = self._fetch_one(
            "SELECT username FROM accounts WHERE username = %s", (username,)
        )
        if duplicate:
            raise ConflictError(f"Duplicate username: {username}")

        sql = f"""
            INSERT INTO accounts (username, password, first_name, last_name, email, is_admin)
            VALUES (%s, %s, %s, %s, %s, %s)
            RETURNING {COLUMNS}
        """
        try:
            account = self._write(sql, (
                username,
                hash_password(data["password"]),
                data["firstName"],
                data["lastName"],
                data["email"],
                data.get("isAdmin", False),
            ))
        except errors.UniqueViolation as e:
            raise ConflictError(f"Duplicate username: {username}") from e

        logger.info(f"Registered account {username}")
        return account

    # ── READ ──────────────────────────────────────────────

    def find_all(self) -> list[dict]:
        """List all accounts ordered by username."""
        return self._fetch_all(f"SELECT {COLUMNS} FROM accounts ORDER BY username")

    def get(self, username: str) -> dict:
        """
        Fetch one account with the ids of the postings it applied to.

        Returns:
            {username, firstName, lastName, email, isAdmin, jobs: [id, ...]}

        Raises:
            NotFoundError: If no account has this username.
        """
        account = self._fetch_one(
            f"SELECT {COLUMNS} FROM accounts WHERE username = %s", (username,)
        )
        if not account:
            raise NotFoundError(f"No user: {username}")

        applications = self._fetch_all(
            "SELECT posting_id FROM applications WHERE username = %s ORDER BY posting_id",
            (username,),
        )
        account["jobs"] = [a["posting_id"] for a in applications]
        return account

    # ── UPDATE ────────────────────────────────────────────

    def update(self, username: str, data: dict) -> dict:
        """
        Partially update an account; only the given fields change.

        A new password is hashed before it is stored. The result never
        contains the password.

        Args:
            username: Account to update.
            data: Any of {password, firstName, lastName, email, isAdmin}.

        Raises:
            BadRequestError: If data is empty or tries to change the username.
            NotFoundError: If no account has this username.
        """
        if "username" in data:
            raise BadRequestError("Username cannot be changed")

        data = dict(data)
        if "password" in data:
            data["password"] = hash_password(data["password"])

        set_cols, values = sql_for_partial_update(data, JS_TO_SQL)
        sql = f"""
            UPDATE accounts
            SET {set_cols}
            WHERE username = %s
            RETURNING {COLUMNS}
        """
        account = self._write(sql, [*values, username])
        if not account:
            raise NotFoundError(f"No user: {username}")
        return account

    # ── DELETE ────────────────────────────────────────────

    def remove(self, username: str) -> None:
        """
        Delete an account (its applications cascade).

        Raises:
            NotFoundError: If no account has this username.
        """
        deleted = self._write(
            "DELETE FROM accounts WHERE username = %s RETURNING username", (username,)
        )
        if not deleted:
            raise NotFoundError(f"No user: {username}")
        logger.info(f"Deleted account {username}")

    # ── APPLICATIONS ──────────────────────────────────────

    def apply_to_job(self, username: str, posting_id: int) -> None:
        """
        Record that an account applied to a posting.

        Both rows are probed first, posting then account. A repeated
        application is refused by the table's primary key.

        Raises:
            NotFoundError: If the posting or the account does not exist.
            psycopg2.errors.UniqueViolation: If the account already applied.
        """
        posting = self._fetch_one("SELECT id FROM postings WHERE id = %s", (posting_id,))
        if not posting:
            raise NotFoundError(f"No posting: {posting_id}")

        account = self._fetch_one(
            "SELECT username FROM accounts WHERE username = %s", (username,)
        )
        if not account:
            raise NotFoundError(f"No user: {username}")

        self._write(
            "INSERT INTO applications (posting_id, username) VALUES (%s, %s)",
            (posting_id, username),
            returning=False,
        )
        logger.info(f"{username} applied to posting #{posting_id}")
