"""
schemas/ - Request Validation
=============================
Pydantic models describing the accepted shape of each request body and
query string. Handlers run every payload through `validate()` before it
reaches a service or repository.
"""

from schemas.base import validate

__all__ = ["validate"]
