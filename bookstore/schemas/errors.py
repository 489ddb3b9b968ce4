"""
Error Response Schemas

Shapes of the error bodies returned by the API:

- 400 Bad Request -> ValidationErrorResponse (detail + field errors)
- 404 Not Found / 500 Internal Server Error -> ErrorResponse (detail only)

Internal error bodies never carry exception text.
"""

from pydantic import BaseModel, Field


class FieldError(BaseModel):
    """A single validation problem, keyed by the wire name of the field."""

    field: str = Field(..., description="Field name as sent by the client", examples=["firstName"])
    message: str = Field(..., description="What is wrong with the field", examples=["firstName is required"])


class ErrorResponse(BaseModel):
    """Error body with a human-readable message only."""

    detail: str = Field(..., description="Error message")


class ValidationErrorResponse(ErrorResponse):
    """Error body for rejected requests, listing every offending field."""

    errors: list[FieldError] = Field(
        default_factory=list,
        description="Field-level validation errors",
    )
