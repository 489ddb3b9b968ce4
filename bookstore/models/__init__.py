"""
SQLAlchemy Models Package

Model Relationships:
- Author -> Book: One-to-Many (an author writes many books,
                  every book references exactly one author)

Import all models here so Alembic discovers them for migrations and the
rest of the application can do: from bookstore.models import Author, Book
"""

# The order matters for SQLAlchemy to resolve relationships
from bookstore.models.author import Author
from bookstore.models.book import Book

__all__ = [
    "Author",
    "Book",
]
