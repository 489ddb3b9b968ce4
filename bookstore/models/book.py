"""
Book Model

Every book references exactly one author through author_id. The foreign
key cascades on delete, so removing an author removes their books.
"""

from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookstore.database import Base

if TYPE_CHECKING:
    from bookstore.models.author import Author


class Book(Base):
    """
    Book model representing books in the catalog.

    Table: books

    Fields:
    - title: Book title (required)
    - isbn: International Standard Book Number (format unchecked)
    - year: Publication year (32-bit integer)
    - summary: Short summary, at most 500 characters
    - image: Path or URL of the cover image
    - price: Decimal price, no currency or sign constraint
    - author_id: Foreign key to authors.id (required)

    Example:
        book = Book(
            title="Dune",
            isbn="9780441013593",
            year=1965,
            price=Decimal("9.99"),
            author_id=1,
        )
    """

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(primary_key=True)

    title: Mapped[str] = mapped_column(
        Text,
        index=True,
        nullable=False,
        comment="Book title"
    )

    # Non-empty on create; the update payload may omit it
    isbn: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="International Standard Book Number"
    )

    year: Mapped[int | None] = mapped_column(
        Integer,
        nullable=True,
        comment="Year of publication"
    )

    summary: Mapped[str | None] = mapped_column(
        String(500),
        nullable=True,
        comment="Book summary"
    )

    image: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="Cover image path"
    )

    # Numeric(18, 2): Decimal (not float) for precise money values.
    # The validators reject prices that would be rounded to fit.
    price: Mapped[Decimal | None] = mapped_column(
        Numeric(18, 2),
        nullable=True,
        comment="Book price"
    )

    author_id: Mapped[int] = mapped_column(
        ForeignKey("authors.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
        comment="Author who wrote the book"
    )

    author: Mapped["Author"] = relationship(
        "Author",
        back_populates="books",
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title='{self.title}', isbn='{self.isbn}')"
