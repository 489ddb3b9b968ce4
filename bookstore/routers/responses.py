"""
Service Result -> HTTP Response

The routers hand every ServiceResult to unwrap(). Successful results give
back their payload (FastAPI serializes it with the route's response_model);
error results are raised as HTTPException and rendered by the handler in
main.py.
"""

from typing import Any

from fastapi import HTTPException, status

from bookstore.schemas import ErrorResponse, ValidationErrorResponse
from bookstore.services import Outcome, ServiceResult

BAD_REQUEST_MESSAGE = "The request is invalid"
NOT_FOUND_MESSAGE = "Not found"

# OpenAPI documentation for the error statuses every resource route can return
ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ValidationErrorResponse, "description": "Invalid request"},
    404: {"model": ErrorResponse, "description": "Record not found"},
    500: {"model": ErrorResponse, "description": "Unexpected server error"},
}


class ValidationHTTPException(HTTPException):
    """400 response that carries the list of field errors."""

    def __init__(self, errors: list):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=BAD_REQUEST_MESSAGE)
        self.errors = errors


def unwrap(result: ServiceResult) -> Any:
    """
    Return the payload of a successful result or raise the matching error.

    Raises:
        ValidationHTTPException: BAD_REQUEST
        HTTPException: NOT_FOUND (404) or INTERNAL_ERROR (500)
    """
    if result.outcome == Outcome.BAD_REQUEST:
        raise ValidationHTTPException(result.errors)
    if result.outcome == Outcome.NOT_FOUND:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)
    if result.outcome == Outcome.INTERNAL_ERROR:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=result.message,
        )
    return result.payload
