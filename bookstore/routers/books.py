"""
Books Router

CRUD endpoints for books. Each book references one author through
authorId; see BookService for how that reference is checked.
"""

from typing import List

from fastapi import APIRouter, status

from bookstore.dependencies import BookServiceDep
from bookstore.routers.responses import ERROR_RESPONSES, unwrap
from bookstore.schemas import BookCreate, BookResponse, BookUpdate

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses=ERROR_RESPONSES,
)


@router.get(
    "/",
    response_model=List[BookResponse],
    summary="List all books",
    description="Get a list of all books in the catalog.",
)
def list_books(service: BookServiceDep) -> List[BookResponse]:
    """List all books."""
    return unwrap(service.get_all())


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    summary="Get a book by ID",
    description="Retrieve a specific book.",
)
def get_book(book_id: int, service: BookServiceDep) -> BookResponse:
    """Get a single book by ID."""
    return unwrap(service.get_by_id(book_id))


@router.post(
    "/",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    description=(
        "Create a new book. title, isbn and authorId are required; "
        "summary is limited to 500 characters."
    ),
)
def create_book(
    service: BookServiceDep,
    book_data: BookCreate | None = None,
) -> BookResponse:
    """Create a new book."""
    return unwrap(service.create(book_data))


@router.put(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Update a book",
    description="Replace a book's fields. The body id must match the path id.",
)
def update_book(
    book_id: int,
    service: BookServiceDep,
    book_data: BookUpdate | None = None,
) -> None:
    """Update an existing book."""
    unwrap(service.update(book_id, book_data))


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a book",
    description="Permanently delete a book.",
)
def delete_book(book_id: int, service: BookServiceDep) -> None:
    """Delete a book."""
    unwrap(service.delete(book_id))
