"""
Pydantic Schemas Package

Schemas are the wire-level shapes (DTOs) of the API, distinct from the
SQLAlchemy models:

- *Create: request body for creating a resource
- *Update: request body for replacing a resource (carries the id)
- *Response: what the API returns

Request schemas only declare field types. Presence and length rules are
checked by bookstore.services.validation so that they are reported as
400 Bad Request with a list of field errors.

All schemas use camelCase on the wire (firstName, authorId) and
snake_case in Python.
"""

from bookstore.schemas.author import (
    AuthorCreate,
    AuthorResponse,
    AuthorUpdate,
)
from bookstore.schemas.book import (
    BookCreate,
    BookResponse,
    BookUpdate,
)
from bookstore.schemas.errors import (
    ErrorResponse,
    FieldError,
    ValidationErrorResponse,
)

__all__ = [
    # Author
    "AuthorCreate",
    "AuthorUpdate",
    "AuthorResponse",
    # Book
    "BookCreate",
    "BookUpdate",
    "BookResponse",
    # Errors
    "FieldError",
    "ErrorResponse",
    "ValidationErrorResponse",
]
