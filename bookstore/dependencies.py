"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI's Depends() function manages their lifecycle.

Dependency chain for one request:

    get_db -> AuthorRepository / BookRepository -> AuthorService / BookService

All repositories of a request share the same session. Each service gets
its own named logger and the behaviour switches from the settings.
"""

import logging
from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from bookstore.config import Settings, get_settings
from bookstore.database import get_db
from bookstore.repositories import AuthorRepository, BookRepository
from bookstore.services import AuthorService, BookService

# =============================================================================
# Type Aliases with Annotated
# =============================================================================
# Instead of writing:
#   def get_books(db: Session = Depends(get_db)):
#
# You can write:
#   def get_books(db: DbSession):

DbSession = Annotated[Session, Depends(get_db)]
AppSettings = Annotated[Settings, Depends(get_settings)]


# =============================================================================
# Repositories
# =============================================================================
def get_author_repository(db: DbSession) -> AuthorRepository:
    return AuthorRepository(db)


def get_book_repository(db: DbSession) -> BookRepository:
    return BookRepository(db)


AuthorRepositoryDep = Annotated[AuthorRepository, Depends(get_author_repository)]
BookRepositoryDep = Annotated[BookRepository, Depends(get_book_repository)]


# =============================================================================
# Services
# =============================================================================
def get_author_service(
    repository: AuthorRepositoryDep,
    settings: AppSettings,
) -> AuthorService:
    """Build the author service for the current request."""
    return AuthorService(
        repository=repository,
        logger=logging.getLogger("bookstore.services.authors"),
        report_mutation_failures=settings.report_mutation_failures,
    )


def get_book_service(
    repository: BookRepositoryDep,
    author_repository: AuthorRepositoryDep,
    settings: AppSettings,
) -> BookService:
    """
    Build the book service for the current request.

    The author repository is used for the authorId reference check.
    """
    return BookService(
        repository=repository,
        author_repository=author_repository,
        logger=logging.getLogger("bookstore.services.books"),
        enforce_author_reference=settings.enforce_author_reference,
        report_mutation_failures=settings.report_mutation_failures,
    )


AuthorServiceDep = Annotated[AuthorService, Depends(get_author_service)]
BookServiceDep = Annotated[BookService, Depends(get_book_service)]
