"""
security/auth.py
-----------------
Authentication and authorization dependencies for the HTTP handlers.

A valid bearer token identifies the caller; a missing or invalid one
leaves the caller anonymous. Handlers then require a level of access:

    @router.patch("/{handle}", dependencies=[Depends(ensure_admin)])
    def update_organization(...):
        ...
"""

from typing import Optional

import jwt
from fastapi import Depends, Header

from security.tokens import decode_token
from utils.errors import ForbiddenError, UnauthorizedError
from utils.logger import get_logger

logger = get_logger(__name__)


def get_current_user(authorization: Optional[str] = Header(default=None)) -> Optional[dict]:
    """Return the token payload for the caller, or None when anonymous."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    try:
        return decode_token(token.strip())
    except jwt.InvalidTokenError as e:
        logger.warning(f"Rejected token: {e}")
        return None


def ensure_logged_in(user: Optional[dict] = Depends(get_current_user)) -> dict:
    """Require any logged-in caller."""
    if not user:
        raise UnauthorizedError()
    return user


def ensure_admin(user: dict = Depends(ensure_logged_in)) -> dict:
    """Require a logged-in admin."""
    if not user.get("isAdmin"):
        logger.warning(f"Non-admin {user.get('username')} tried an admin-only route")
        raise ForbiddenError()
    return user


def ensure_correct_user_or_admin(username: str, user: dict = Depends(ensure_logged_in)) -> dict:
    """Require the account named in the path, or an admin."""
    if not (user.get("isAdmin") or user.get("username") == username):
        raise ForbiddenError()
    return user
