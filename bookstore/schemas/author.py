"""
Author Pydantic Schemas

These schemas define the shape of data for Author-related API operations.

Pydantic v2 Features Used:
- model_config / ConfigDict: alias generation and ORM attribute loading
- Field(): metadata and OpenAPI examples
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Shared by every author schema: camelCase JSON, snake_case attributes
CAMEL_CASE_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
)


class AuthorCreate(BaseModel):
    """
    Schema for creating a new author.

    Example request body:
    {
        "firstName": "Frank",
        "lastName": "Herbert",
        "bio": "American science fiction author."
    }
    """

    model_config = CAMEL_CASE_CONFIG

    first_name: str | None = Field(
        default=None,
        description="Author's first name (required)",
        examples=["Frank"],
    )

    last_name: str | None = Field(
        default=None,
        description="Author's last name (required)",
        examples=["Herbert"],
    )

    bio: str | None = Field(
        default=None,
        description="Author biography",
        examples=["American science fiction author."],
    )


class AuthorUpdate(AuthorCreate):
    """
    Schema for replacing an existing author.

    The id must match the id in the URL path; every mutable field is
    replaced with the submitted value.
    """

    id: int | None = Field(
        default=None,
        description="Identifier of the author being updated",
        examples=[1],
    )


class AuthorResponse(BaseModel):
    """
    Schema for author responses (what the API returns).

    from_attributes=True allows building the schema from an Author entity:
        AuthorResponse.model_validate(author)
    """

    id: int = Field(..., description="Unique identifier", examples=[1, 42])
    first_name: str = Field(..., description="Author's first name")
    last_name: str = Field(..., description="Author's last name")
    bio: str | None = Field(default=None, description="Author biography")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "firstName": "Frank",
                "lastName": "Herbert",
                "bio": "American science fiction author.",
            }
        },
    )
