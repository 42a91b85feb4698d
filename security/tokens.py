"""
security/tokens.py
------------------
Signed identity tokens for logged-in accounts.

Payload:
    {"username": "bob", "isAdmin": false, "iat": 1700000000}
"""

from datetime import datetime, timezone
from typing import Any

import jwt

from config import JWT_ALGORITHM, SECRET_KEY


def create_token(account: dict[str, Any]) -> str:
    """
    Sign a token for an account record.

    Args:
        account: Account dict as returned by the repository (no password).

    Returns:
        Encoded JWT string.
    """
    payload = {
        "username": account["username"],
        "isAdmin": bool(account.get("isAdmin", False)),
        "iat": datetime.now(timezone.utc),
    }
    return jwt.encode(payload, SECRET_KEY, algorithm=JWT_ALGORITHM)


def decode_token(token: str) -> dict[str, Any]:
    """
    Verify and decode a token.

    Raises:
        jwt.InvalidTokenError: If the signature or format is invalid.
    """
    return jwt.decode(token, SECRET_KEY, algorithms=[JWT_ALGORITHM])
