"""
schemas/base.py
---------------
Shared base model and the validate() entry point used by the handlers.
"""

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, ValidationError

from utils.errors import BadRequestError


class RequestSchema(BaseModel):
    """Base for request payloads: unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


def _describe(error: dict) -> str:
    loc = ".".join(str(part) for part in error["loc"])
    return f"{loc}: {error['msg']}" if loc else error["msg"]


def validate(schema: type[RequestSchema], payload: Mapping[str, Any]) -> dict:
    """
    Validate a payload against a schema.

    Returns:
        The fields the caller actually sent, keyed by their API (alias)
        names, in schema field order.

    Raises:
        BadRequestError: With one message per violation in `errors`.
    """
    try:
        model = schema.model_validate(dict(payload))
    except ValidationError as e:
        messages = [_describe(err) for err in e.errors()]
        raise BadRequestError("; ".join(messages), errors=messages) from e
    return model.model_dump(by_alias=True, exclude_unset=True)
