"""
Service Results

Every resource service operation returns a ServiceResult instead of
raising. The routers translate the Outcome into an HTTP status:

    OK             -> 200 with payload
    CREATED        -> 201 with payload
    NO_CONTENT     -> 204
    BAD_REQUEST    -> 400 with field errors
    NOT_FOUND      -> 404
    INTERNAL_ERROR -> 500 with a generic message
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from bookstore.schemas import FieldError

# The only message callers ever see for a server-side failure
INTERNAL_ERROR_MESSAGE = "Something went wrong. Please contact the Administrator"


class Outcome(str, Enum):
    """Result kinds of a resource service operation."""

    OK = "ok"
    CREATED = "created"
    NO_CONTENT = "no_content"
    BAD_REQUEST = "bad_request"
    NOT_FOUND = "not_found"
    INTERNAL_ERROR = "internal_error"


@dataclass
class ServiceResult:
    """
    Outcome of a service call plus whatever goes with it.

    Attributes:
        outcome: Which of the result kinds this is
        payload: Response DTO (or list of them) for OK and CREATED
        errors: Field errors for BAD_REQUEST
        message: Caller-facing message for INTERNAL_ERROR
    """

    outcome: Outcome
    payload: Any = None
    errors: list[FieldError] = field(default_factory=list)
    message: str | None = None

    @classmethod
    def ok(cls, payload: Any) -> "ServiceResult":
        return cls(Outcome.OK, payload=payload)

    @classmethod
    def created(cls, payload: Any) -> "ServiceResult":
        return cls(Outcome.CREATED, payload=payload)

    @classmethod
    def no_content(cls) -> "ServiceResult":
        return cls(Outcome.NO_CONTENT)

    @classmethod
    def bad_request(cls, errors: list[FieldError]) -> "ServiceResult":
        return cls(Outcome.BAD_REQUEST, errors=list(errors))

    @classmethod
    def not_found(cls) -> "ServiceResult":
        return cls(Outcome.NOT_FOUND)

    @classmethod
    def internal_error(cls) -> "ServiceResult":
        return cls(Outcome.INTERNAL_ERROR, message=INTERNAL_ERROR_MESSAGE)
