"""Error Schemas — OpenAPI-facing mirror of core/outcomes.ErrorResponse."""

from pydantic import BaseModel


class FieldErrorBody(BaseModel):
    """A single field path and every message reported for it."""
    field: str
    field_errors: list[str]


class ErrorResponseBody(BaseModel):
    """Error envelope returned for all 4xx/5xx responses."""
    message: str
    errors: list[FieldErrorBody] | None = None
