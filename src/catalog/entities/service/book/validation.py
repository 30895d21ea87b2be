"""Field validation for book candidates."""

from src.catalog.core.exceptions import FieldError
from src.catalog.entities.service.book.entity import BookCandidate

TITLE_MAX_LENGTH = 200
AUTHOR_MAX_LENGTH = 100
ISBN_MIN_LENGTH = 10
ISBN_MAX_LENGTH = 13
GENRE_MAX_LENGTH = 50
DESCRIPTION_MAX_LENGTH = 1000


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _check_required_text(
    value: str | None, field: str, label: str, min_length: int, max_length: int
) -> FieldError | None:
    if _is_blank(value):
        return FieldError(field, f"{label} is required")
    if not min_length <= len(value) <= max_length:
        return FieldError(
            field, f"{label} must be between {min_length} and {max_length} characters"
        )
    return None


def _check_max_length(
    value: str | None, field: str, label: str, max_length: int
) -> FieldError | None:
    if value is not None and len(value) > max_length:
        return FieldError(field, f"{label} must not exceed {max_length} characters")
    return None


def validate_candidate(candidate: BookCandidate) -> list[FieldError]:
    """Return the field errors of ``candidate``; an empty list means it is valid.

    Field names in the returned errors use the wire (camelCase) spelling.
    """
    checks = [
        _check_required_text(candidate.title, "title", "Title", 1, TITLE_MAX_LENGTH),
        _check_required_text(
            candidate.author, "author", "Author", 1, AUTHOR_MAX_LENGTH
        ),
        _check_required_text(
            candidate.isbn, "isbn", "ISBN", ISBN_MIN_LENGTH, ISBN_MAX_LENGTH
        ),
        None
        if candidate.publication_date is not None
        else FieldError("publicationDate", "Publication date is required"),
        _check_max_length(candidate.genre, "genre", "Genre", GENRE_MAX_LENGTH),
        _check_max_length(
            candidate.description,
            "description",
            "Description",
            DESCRIPTION_MAX_LENGTH,
        ),
    ]
    return [error for error in checks if error is not None]
