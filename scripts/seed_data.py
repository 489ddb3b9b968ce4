#!/usr/bin/env python3
"""
Database Seed Script

Populates the database with sample authors and books for development.

USAGE:
    # From the project root with the virtualenv activated
    python scripts/seed_data.py

This script:
1. Connects to the database using app settings
2. Clears existing data (optional)
3. Creates sample authors, then books referencing them
"""

import sys
from decimal import Decimal
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import delete
from sqlalchemy.orm import Session

from bookstore.database import SessionLocal, create_tables
from bookstore.models import Author, Book
from bookstore.repositories import AuthorRepository, BookRepository


def clear_data(db: Session) -> None:
    """Clear all existing data from the database."""
    print("Clearing existing data...")
    db.execute(delete(Book))
    db.execute(delete(Author))
    db.commit()
    print("Data cleared.")


def create_authors(db: Session) -> dict[str, Author]:
    """Create sample authors."""
    print("Creating authors...")
    authors_data = [
        {
            "first_name": "Frank",
            "last_name": "Herbert",
            "bio": "American science fiction author best known for 'Dune'.",
        },
        {
            "first_name": "Ursula",
            "last_name": "Le Guin",
            "bio": "American author of speculative fiction, including the "
                   "Earthsea books and 'The Left Hand of Darkness'.",
        },
        {
            "first_name": "George",
            "last_name": "Orwell",
            "bio": "English novelist and essayist, journalist and critic.",
        },
        {
            "first_name": "Jane",
            "last_name": "Austen",
            "bio": None,
        },
    ]

    repository = AuthorRepository(db)
    authors = {}
    for data in authors_data:
        author = Author(**data)
        repository.create(author)
        authors[data["last_name"]] = author

    repository.save()
    print(f"Created {len(authors)} authors.")
    return authors


def create_books(db: Session, authors: dict[str, Author]) -> list[Book]:
    """Create sample books for the given authors."""
    print("Creating books...")
    books_data = [
        {
            "title": "Dune",
            "isbn": "9780441013593",
            "year": 1965,
            "summary": "A noble family takes control of the desert planet Arrakis.",
            "image": "covers/dune.jpg",
            "price": Decimal("9.99"),
            "author": "Herbert",
        },
        {
            "title": "Dune Messiah",
            "isbn": "9780593098233",
            "year": 1969,
            "price": Decimal("8.99"),
            "author": "Herbert",
        },
        {
            "title": "A Wizard of Earthsea",
            "isbn": "9780547773742",
            "year": 1968,
            "summary": "A young wizard confronts the shadow he released.",
            "price": Decimal("7.50"),
            "author": "Le Guin",
        },
        {
            "title": "The Left Hand of Darkness",
            "isbn": "9780441478125",
            "year": 1969,
            "author": "Le Guin",
        },
        {
            "title": "1984",
            "isbn": "9780451524935",
            "year": 1949,
            "summary": "A dystopian novel set in a totalitarian society.",
            "price": Decimal("12.99"),
            "author": "Orwell",
        },
        {
            "title": "Animal Farm",
            "isbn": "9780451526342",
            "year": 1945,
            "price": Decimal("6.99"),
            "author": "Orwell",
        },
        {
            "title": "Pride and Prejudice",
            "isbn": "9780141439518",
            "year": 1813,
            "author": "Austen",
        },
    ]

    repository = BookRepository(db)
    books = []
    for data in books_data:
        author = authors[data.pop("author")]
        book = Book(author_id=author.id, **data)
        repository.create(book)
        books.append(book)

    repository.save()
    print(f"Created {len(books)} books.")
    return books


def seed_database(clear_existing: bool = True) -> None:
    """
    Main function to seed the database.

    Args:
        clear_existing: If True, clears existing data before seeding.
    """
    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    create_tables()

    db = SessionLocal()

    try:
        if clear_existing:
            clear_data(db)

        authors = create_authors(db)
        books = create_books(db, authors)

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print(f"\nSummary:")
        print(f"  - Authors: {len(authors)}")
        print(f"  - Books: {len(books)}")
        print(f"\nYou can now access the API at http://localhost:8001")
        print(f"API documentation at http://localhost:8001/docs")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_database()
