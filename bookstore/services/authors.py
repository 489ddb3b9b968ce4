"""
Author Service

Authors have no outgoing references, so the generic flow applies as is.
"""

import logging

from bookstore.mappers import EntityMapper, author_mapper
from bookstore.models import Author
from bookstore.repositories import AuthorRepository
from bookstore.schemas import AuthorResponse
from bookstore.services.resource import ResourceService
from bookstore.services.validation import (
    validate_author_create,
    validate_author_update,
)


class AuthorService(ResourceService[Author, AuthorResponse]):
    """List, fetch, create, update and delete authors."""

    resource_name = "Authors"

    def __init__(
        self,
        repository: AuthorRepository,
        logger: logging.Logger,
        mapper: EntityMapper[Author, AuthorResponse] = author_mapper,
        report_mutation_failures: bool = False,
    ):
        super().__init__(
            repository=repository,
            mapper=mapper,
            logger=logger,
            validate_create=validate_author_create,
            validate_update=validate_author_update,
            report_mutation_failures=report_mutation_failures,
        )
