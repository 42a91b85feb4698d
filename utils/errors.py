"""
utils/errors.py
---------------
Application error taxonomy.

Repositories and services raise these; the HTTP layer turns them into
JSON error responses using `status_code`. Nothing below the HTTP layer
catches them.
"""

from typing import Optional


class AppError(Exception):
    """Base class for errors that carry an HTTP status."""

    status_code: int = 500

    def __init__(self, message: str = "Internal Server Error"):
        super().__init__(message)
        self.message = message


class BadRequestError(AppError):
    """
    400 Bad Request.

    Raised for an empty update payload, an inconsistent numeric range,
    or a payload that failed shape validation. `errors` holds the
    individual violation messages when there is more than one.
    """

    status_code = 400

    def __init__(self, message: str = "Bad Request", errors: Optional[list[str]] = None):
        super().__init__(message)
        self.errors = errors or []


class UnauthorizedError(AppError):
    """401 Unauthorized: missing token, bad credentials."""

    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class ForbiddenError(AppError):
    """403 Forbidden: logged in, but not allowed."""

    status_code = 403

    def __init__(self, message: str = "Forbidden"):
        super().__init__(message)


class NotFoundError(AppError):
    """404 Not Found: an identity key did not resolve to a row."""

    status_code = 404

    def __init__(self, message: str = "Not Found"):
        super().__init__(message)


class ConflictError(AppError):
    """409 Conflict: duplicate identity on create."""

    status_code = 409

    def __init__(self, message: str = "Conflict"):
        super().__init__(message)
