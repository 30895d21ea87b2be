"""Catalog business exceptions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldError:
    """A validation failure on a single wire field."""

    field: str
    message: str


class CatalogError(Exception):
    """Base class for catalog errors."""


class BookValidationError(CatalogError):
    """Raised when a book candidate fails field validation."""

    def __init__(self, errors: list[FieldError]):
        self.errors = errors
        super().__init__("Validation failed")

    def as_dict(self) -> dict[str, str]:
        """Map each failing field to its first message."""
        result: dict[str, str] = {}
        for error in self.errors:
            result.setdefault(error.field, error.message)
        return result


class BookNotFoundError(CatalogError):
    """Raised when no book matches the given id or ISBN."""

    @classmethod
    def with_id(cls, book_id: str) -> "BookNotFoundError":
        return cls(f"Book not found with id: {book_id}")

    @classmethod
    def with_isbn(cls, isbn: str) -> "BookNotFoundError":
        return cls(f"Book not found with ISBN: {isbn}")


class DuplicateIsbnError(CatalogError):
    """Raised when a write would give two books the same ISBN."""

    def __init__(self, isbn: str):
        self.isbn = isbn
        super().__init__(f"Book with ISBN {isbn} already exists")
