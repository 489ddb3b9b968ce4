"""
Authors Router

CRUD endpoints for authors. The handlers only bind the request to the
service call; validation, lookups and error handling live in AuthorService.
"""

from typing import List

from fastapi import APIRouter, status

from bookstore.dependencies import AuthorServiceDep
from bookstore.routers.responses import ERROR_RESPONSES, unwrap
from bookstore.schemas import AuthorCreate, AuthorResponse, AuthorUpdate

router = APIRouter(
    prefix="/authors",
    tags=["Authors"],
    responses=ERROR_RESPONSES,
)


@router.get(
    "/",
    response_model=List[AuthorResponse],
    summary="List all authors",
    description="Get a list of all authors in the system.",
)
def list_authors(service: AuthorServiceDep) -> List[AuthorResponse]:
    """List all authors."""
    return unwrap(service.get_all())


@router.get(
    "/{author_id}",
    response_model=AuthorResponse,
    summary="Get an author by ID",
    description="Retrieve a specific author.",
)
def get_author(author_id: int, service: AuthorServiceDep) -> AuthorResponse:
    """Get a single author by ID."""
    return unwrap(service.get_by_id(author_id))


@router.post(
    "/",
    response_model=AuthorResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new author",
    description="Create a new author. firstName and lastName are required.",
)
def create_author(
    service: AuthorServiceDep,
    author_data: AuthorCreate | None = None,
) -> AuthorResponse:
    """Create a new author."""
    return unwrap(service.create(author_data))


@router.put(
    "/{author_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Update an author",
    description="Replace an author's fields. The body id must match the path id.",
)
def update_author(
    author_id: int,
    service: AuthorServiceDep,
    author_data: AuthorUpdate | None = None,
) -> None:
    """Update an existing author."""
    unwrap(service.update(author_id, author_data))


@router.delete(
    "/{author_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an author",
    description="Permanently delete an author and their books.",
)
def delete_author(author_id: int, service: AuthorServiceDep) -> None:
    """Delete an author."""
    unwrap(service.delete(author_id))
