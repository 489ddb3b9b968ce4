"""
Repository for the Author entity.
"""

from sqlalchemy.orm import Session

from bookstore.models import Author
from bookstore.repositories.base import Repository


class AuthorRepository(Repository[Author]):
    """CRUD operations for authors, inherited from Repository."""

    def __init__(self, session: Session):
        super().__init__(session, Author)
