"""
Repository for the Book entity.
"""

from sqlalchemy.orm import Session

from bookstore.models import Book
from bookstore.repositories.base import Repository


class BookRepository(Repository[Book]):
    """CRUD operations for books, inherited from Repository."""

    def __init__(self, session: Session):
        super().__init__(session, Book)
