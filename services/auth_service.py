"""
services/auth_service.py
------------------------
Login and self-service registration.
Orchestrates between the AccountRepository and the token issuer.
"""

from repositories.account_repo import AccountRepository
from security.tokens import create_token
from utils.logger import get_logger

logger = get_logger(__name__)


class AuthService:
    """
    Turns credentials into identity tokens.

    Workflow:
        1. Check or create the account via the repository.
        2. Sign a token from the account record (never the password).
    """

    def __init__(self, accounts: AccountRepository):
        self.accounts = accounts

    def login(self, username: str, password: str) -> str:
        """
        Returns:
            A signed token for the account.

        Raises:
            UnauthorizedError: On unknown username or wrong password.
        """
        account = self.accounts.authenticate(username, password)
        logger.info(f"User {username} logged in.")
        return create_token(account)

    def register(self, data: dict) -> str:
        """
        Create a non-admin account and log it in.

        Raises:
            ConflictError: If the username is taken.
        """
        account = self.accounts.create({**data, "isAdmin": False})
        return create_token(account)
