"""
security/passwords.py
---------------------
One-way password hashing with bcrypt.
The cost factor comes from BCRYPT_WORK_FACTOR.
"""

import bcrypt

from config import BCRYPT_WORK_FACTOR


def hash_password(password: str, rounds: int = BCRYPT_WORK_FACTOR) -> str:
    """Hash a plain text password; each call uses a fresh salt."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plain text password against a stored bcrypt hash."""
    return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
