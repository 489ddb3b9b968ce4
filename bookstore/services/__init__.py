"""
Services Package

Business logic that sits between the HTTP routers and the repositories:

- results.py: ServiceResult / Outcome, the five-way result of every operation
- validation.py: explicit field validation returning FieldError lists
- resource.py: ResourceService, the validate -> check -> mutate -> respond flow
- authors.py: AuthorService
- books.py: BookService (adds the author reference check)

Services never raise to their callers; every failure becomes a
ServiceResult.
"""

from bookstore.services.authors import AuthorService
from bookstore.services.books import BookService
from bookstore.services.resource import ResourceService
from bookstore.services.results import (
    INTERNAL_ERROR_MESSAGE,
    Outcome,
    ServiceResult,
)

__all__ = [
    "AuthorService",
    "BookService",
    "ResourceService",
    "Outcome",
    "ServiceResult",
    "INTERNAL_ERROR_MESSAGE",
]
