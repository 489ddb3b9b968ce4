"""
DTO <-> Entity Mapping

Pure translation between the Pydantic wire schemas and the SQLAlchemy
entities. The mapper never validates and never touches the database:
invalid payloads are rejected by the resource services before mapping.

One EntityMapper is declared per resource:

    author_mapper.to_domain(AuthorCreate(...))   # -> Author (transient)
    author_mapper.to_dto(author)                 # -> AuthorResponse
    author_mapper.to_dto([a1, a2])               # -> [AuthorResponse, ...]
"""

from collections.abc import Sequence
from typing import Generic, Type, TypeVar

from pydantic import BaseModel

from bookstore.database import Base
from bookstore.models import Author, Book
from bookstore.schemas import AuthorResponse, BookResponse

EntityT = TypeVar("EntityT", bound=Base)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class EntityMapper(Generic[EntityT, ResponseT]):
    """
    Maps request DTOs to entities and entities to response DTOs.

    Attributes:
        entity_type: SQLAlchemy model class built by to_domain()
        response_type: Pydantic schema built by to_dto()
    """

    def __init__(self, entity_type: Type[EntityT], response_type: Type[ResponseT]):
        self.entity_type = entity_type
        self.response_type = response_type

    def to_domain(self, dto: BaseModel) -> EntityT:
        """
        Copy the DTO's scalar fields onto a new entity, field for field.

        Works for both create DTOs (no id, storage assigns it) and update
        DTOs (id carried over so the repository can target the row).
        """
        return self.entity_type(**dto.model_dump())

    def to_dto(self, source: EntityT | Sequence[EntityT]) -> ResponseT | list[ResponseT]:
        """Build the response DTO for one entity, or a list for many."""
        if isinstance(source, Sequence):
            return [self.response_type.model_validate(entity) for entity in source]
        return self.response_type.model_validate(source)


author_mapper: EntityMapper[Author, AuthorResponse] = EntityMapper(Author, AuthorResponse)
book_mapper: EntityMapper[Book, BookResponse] = EntityMapper(Book, BookResponse)
