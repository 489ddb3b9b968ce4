"""
Request Validation

Explicit validation for the request DTOs. Each function returns the list
of problems it found; an empty list means the payload is valid.

Field names in the errors are the camelCase names the client sent, so
they can be shown next to the offending input.
"""

from decimal import Decimal

from bookstore.schemas import (
    AuthorCreate,
    AuthorUpdate,
    BookCreate,
    BookUpdate,
    FieldError,
)
from bookstore.schemas.book import (
    PRICE_PRECISION,
    PRICE_SCALE,
    SUMMARY_MAX_LENGTH,
    YEAR_MAX,
    YEAR_MIN,
)


def _require_text(errors: list[FieldError], field: str, value: str | None) -> None:
    """Reject a missing, empty, or whitespace-only string."""
    if value is None or not value.strip():
        errors.append(FieldError(field=field, message=f"{field} is required"))


def _reject_blank(errors: list[FieldError], field: str, value: str | None) -> None:
    """Optional string: fine when absent, rejected when blank."""
    if value is not None and not value.strip():
        errors.append(FieldError(field=field, message=f"{field} cannot be empty"))


def _require_value(errors: list[FieldError], field: str, value: object) -> None:
    if value is None:
        errors.append(FieldError(field=field, message=f"{field} is required"))


def _max_length(errors: list[FieldError], field: str, value: str | None, limit: int) -> None:
    if value is not None and len(value) > limit:
        errors.append(
            FieldError(
                field=field,
                message=f"{field} must be at most {limit} characters",
            )
        )


def _year_in_range(errors: list[FieldError], value: int | None) -> None:
    if value is not None and not YEAR_MIN <= value <= YEAR_MAX:
        errors.append(
            FieldError(
                field="year",
                message=f"year must be between {YEAR_MIN} and {YEAR_MAX}",
            )
        )


def _price_fits(errors: list[FieldError], value: Decimal | None) -> None:
    """The price must be stored exactly: no rounding, no overflow."""
    if value is None:
        return
    if not value.is_finite():
        errors.append(FieldError(field="price", message="price must be a finite number"))
        return

    integer_digits = PRICE_PRECISION - PRICE_SCALE
    if value != 0 and value.adjusted() >= integer_digits:
        errors.append(
            FieldError(
                field="price",
                message=f"price must have at most {integer_digits} digits before the decimal point",
            )
        )
    # 9.990 is fine, 9.999 is not
    elif value % Decimal(1).scaleb(-PRICE_SCALE) != 0:
        errors.append(
            FieldError(
                field="price",
                message=f"price must have at most {PRICE_SCALE} decimal places",
            )
        )


def validate_author_create(dto: AuthorCreate) -> list[FieldError]:
    """firstName and lastName are required."""
    errors: list[FieldError] = []
    _require_text(errors, "firstName", dto.first_name)
    _require_text(errors, "lastName", dto.last_name)
    return errors


def validate_author_update(dto: AuthorUpdate) -> list[FieldError]:
    """Same rules as creation; the id is checked against the path separately."""
    return validate_author_create(dto)


def validate_book_create(dto: BookCreate) -> list[FieldError]:
    """
    Validate a new book.

    - title and isbn are required
    - authorId is required
    - summary is at most 500 characters
    - year and price must fit their columns without being changed
    """
    errors: list[FieldError] = []
    _require_text(errors, "title", dto.title)
    _require_text(errors, "isbn", dto.isbn)
    _max_length(errors, "summary", dto.summary, SUMMARY_MAX_LENGTH)
    _year_in_range(errors, dto.year)
    _price_fits(errors, dto.price)
    _require_value(errors, "authorId", dto.author_id)
    return errors


def validate_book_update(dto: BookUpdate) -> list[FieldError]:
    """
    Validate a book replacement.

    The title and authorId are required; an isbn may be left out but not
    sent blank.
    """
    errors: list[FieldError] = []
    _require_text(errors, "title", dto.title)
    _reject_blank(errors, "isbn", dto.isbn)
    _max_length(errors, "summary", dto.summary, SUMMARY_MAX_LENGTH)
    _year_in_range(errors, dto.year)
    _price_fits(errors, dto.price)
    _require_value(errors, "authorId", dto.author_id)
    return errors
