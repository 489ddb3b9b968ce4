"""
Book Service

Books reference exactly one author. With enforce_author_reference on
(the default), create and update reject an authorId that does not match
an existing author with 400 Bad Request. On update the check runs after
the book's own existence check, so an unknown book is still a 404.

Turning enforce_author_reference off skips the lookup entirely and leaves
the foreign key to the database.
"""

import logging

from pydantic import BaseModel

from bookstore.mappers import EntityMapper, book_mapper
from bookstore.models import Book
from bookstore.repositories import AuthorRepository, BookRepository
from bookstore.schemas import BookResponse, FieldError
from bookstore.services.resource import ResourceService
from bookstore.services.validation import (
    validate_book_create,
    validate_book_update,
)


class BookService(ResourceService[Book, BookResponse]):
    """List, fetch, create, update and delete books."""

    resource_name = "Books"

    def __init__(
        self,
        repository: BookRepository,
        author_repository: AuthorRepository,
        logger: logging.Logger,
        mapper: EntityMapper[Book, BookResponse] = book_mapper,
        enforce_author_reference: bool = True,
        report_mutation_failures: bool = False,
    ):
        super().__init__(
            repository=repository,
            mapper=mapper,
            logger=logger,
            validate_create=validate_book_create,
            validate_update=validate_book_update,
            report_mutation_failures=report_mutation_failures,
        )
        self.author_repository = author_repository
        self.enforce_author_reference = enforce_author_reference

    def check_references(self, dto: BaseModel) -> list[FieldError]:
        """The payload's authorId must belong to an existing author."""
        if not self.enforce_author_reference:
            return []
        if not self.author_repository.exists(dto.author_id):
            return [
                FieldError(
                    field="authorId",
                    message=f"Author with id {dto.author_id} does not exist",
                )
            ]
        return []
