"""
Book Pydantic Schemas

Handles the book request/response shapes. The price is a Decimal and is
serialized as a string to keep its precision.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from bookstore.schemas.author import CAMEL_CASE_CONFIG

# Limits checked by the book validators, matching the books table columns
SUMMARY_MAX_LENGTH = 500
YEAR_MIN = -(2**31)
YEAR_MAX = 2**31 - 1
PRICE_PRECISION = 18
PRICE_SCALE = 2


class BookCreate(BaseModel):
    """
    Schema for creating a new book.

    Example request body:
    {
        "title": "Dune",
        "isbn": "9780441013593",
        "year": 1965,
        "price": "9.99",
        "authorId": 1
    }
    """

    model_config = CAMEL_CASE_CONFIG

    title: str | None = Field(
        default=None,
        description="Book title (required)",
        examples=["Dune"],
    )

    isbn: str | None = Field(
        default=None,
        description="ISBN (required on create, format unchecked)",
        examples=["9780441013593"],
    )

    year: int | None = Field(
        default=None,
        description="Year of publication",
        examples=[1965],
    )

    summary: str | None = Field(
        default=None,
        description=f"Book summary, at most {SUMMARY_MAX_LENGTH} characters",
    )

    image: str | None = Field(
        default=None,
        description="Cover image path or URL",
        examples=["covers/dune.jpg"],
    )

    price: Decimal | None = Field(
        default=None,
        description="Book price",
        examples=["9.99"],
    )

    author_id: int | None = Field(
        default=None,
        description="Identifier of the book's author (required)",
        examples=[1],
    )


class BookUpdate(BookCreate):
    """
    Schema for replacing an existing book.

    Unlike creation, the ISBN may be omitted. The id must match the id in
    the URL path.
    """

    id: int | None = Field(
        default=None,
        description="Identifier of the book being updated",
        examples=[1],
    )


class BookResponse(BaseModel):
    """Schema for book responses."""

    id: int = Field(..., description="Unique identifier")
    title: str = Field(..., description="Book title")
    isbn: str | None = Field(default=None, description="ISBN")
    year: int | None = Field(default=None, description="Year of publication")
    summary: str | None = Field(default=None, description="Book summary")
    image: str | None = Field(default=None, description="Cover image path")
    price: Decimal | None = Field(default=None, description="Book price")
    author_id: int = Field(..., description="Identifier of the book's author")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "Dune",
                "isbn": "9780441013593",
                "year": 1965,
                "summary": "A desert planet and its spice.",
                "image": "covers/dune.jpg",
                "price": "9.99",
                "authorId": 1,
            }
        },
    )
