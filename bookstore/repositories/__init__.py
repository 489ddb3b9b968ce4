"""
Repositories Package

Repositories own all reads and writes of one entity type. They report
failed writes with a False result and missing rows with None; database
exceptions propagate to the caller untouched.
"""

from bookstore.repositories.author_repository import AuthorRepository
from bookstore.repositories.base import Repository
from bookstore.repositories.book_repository import BookRepository

__all__ = [
    "Repository",
    "AuthorRepository",
    "BookRepository",
]
