"""
Generic repository with the CRUD operations shared by every entity.

The Repository pattern separates data access from the request
orchestration in the resource services. Each repository operates on a
single model type and a session shared for the whole request.

Writes come in two flavours:

- create() only stages the new row in the session; save() commits it.
  The id is assigned by the database when the row is flushed.
- update() and delete() run a single statement against the row's id and
  commit immediately, reporting whether a row was affected.

Example:
    ```python
    repo = Repository(session, Author)
    author = Author(first_name="Frank", last_name="Herbert")
    if repo.create(author):
        repo.save()
    print(author.id)
    ```
"""

import logging
from collections.abc import Sequence
from typing import Any, Generic, Type, TypeVar

from sqlalchemy import delete, inspect, select, update
from sqlalchemy.orm import Session

from bookstore.database import Base

T = TypeVar("T", bound=Base)

logger = logging.getLogger(__name__)


class Repository(Generic[T]):
    """
    Base repository providing the common CRUD operations.

    Type Parameters:
        T: The SQLAlchemy model this repository manages.

    Attributes:
        session: The database session for executing queries.
        model: The SQLAlchemy model class this repository manages.
    """

    def __init__(self, session: Session, model: Type[T]):
        self.session = session
        self.model = model

    @property
    def model_name(self) -> str:
        return self.model.__name__

    def find_all(self) -> Sequence[T]:
        """
        Get every row of the table.

        No ordering is imposed; the order is whatever the database returns.
        """
        return self.session.execute(select(self.model)).scalars().all()

    def find_by_id(self, id: int) -> T | None:
        """
        Get entity by primary key.

        Returns:
            Entity if found, None otherwise.
        """
        return self.session.get(self.model, id)

    def exists(self, id: int) -> bool:
        """Check whether a row with this primary key exists."""
        stmt = select(select(self.model).where(self.model.id == id).exists())
        return bool(self.session.execute(stmt).scalar())

    def create(self, entity: T) -> bool:
        """
        Stage a new entity for insertion.

        Nothing is written until save() is called.

        Returns:
            True if the entity is now pending in the session.
        """
        self.session.add(entity)
        return entity in self.session.new

    def save(self) -> bool:
        """
        Commit all staged changes.

        Returns:
            True if there was anything to write.
        """
        has_changes = bool(self.session.new or self.session.dirty or self.session.deleted)
        self.session.commit()
        logger.debug(f"{self.model_name} changes committed (changes={has_changes})")
        return has_changes

    def update(self, entity: T) -> bool:
        """
        Replace every mutable column of the row matching entity.id.

        Does not check existence first; callers verify it beforehand.

        Returns:
            True if a row was updated.
        """
        stmt = (
            update(self.model)
            .where(self.model.id == entity.id)
            .values(**self._mutable_values(entity))
        )
        result = self.session.execute(stmt)
        self.session.commit()
        return result.rowcount > 0

    def delete(self, entity: T) -> bool:
        """
        Delete the row matching entity.id.

        Returns:
            True if a row was removed.
        """
        stmt = delete(self.model).where(self.model.id == entity.id)
        result = self.session.execute(stmt)
        self.session.commit()
        return result.rowcount > 0

    def rollback(self) -> None:
        """Discard anything staged in the current transaction."""
        self.session.rollback()

    def _mutable_values(self, entity: T) -> dict[str, Any]:
        """Column values of the entity, without the primary key."""
        mapper = inspect(self.model)
        primary_keys = {column.key for column in mapper.primary_key}
        return {
            attr.key: getattr(entity, attr.key)
            for attr in mapper.column_attrs
            if attr.key not in primary_keys
        }
