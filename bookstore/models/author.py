"""
Author Model

Represents an author in the bookstore database.

SQLAlchemy 2.0 Features Used:
- mapped_column(): New way to define columns with full type support
- Mapped[]: Type hint wrapper for SQLAlchemy columns
- relationship(): Define relationships between models
"""

from typing import TYPE_CHECKING

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookstore.database import Base

# Prevents circular imports at runtime while enabling type hints
if TYPE_CHECKING:
    from bookstore.models.book import Book


class Author(Base):
    """
    Author model representing writers in the system.

    Table: authors

    Relationships:
    - books: One-to-Many, the "one" side of Book.author

    Example:
        author = Author(
            first_name="Frank",
            last_name="Herbert",
            bio="American science fiction author.",
        )
    """

    __tablename__ = "authors"

    # Assigned by the database on insert, never changed afterwards
    id: Mapped[int] = mapped_column(primary_key=True)

    first_name: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Author's first name"
    )

    last_name: Mapped[str] = mapped_column(
        Text,
        index=True,
        nullable=False,
        comment="Author's last name"
    )

    bio: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="Author biography"
    )

    # passive_deletes leaves removing the books to ON DELETE CASCADE
    books: Mapped[list["Book"]] = relationship(
        "Book",
        back_populates="author",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return (
            f"Author(id={self.id}, first_name='{self.first_name}', "
            f"last_name='{self.last_name}')"
        )
