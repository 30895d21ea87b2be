"""Catalog business rules over a book store."""

from loguru import logger

from src.catalog.core.exceptions import (
    BookNotFoundError,
    BookValidationError,
    DuplicateIsbnError,
)
from src.catalog.entities.service.book import (
    Book,
    BookCandidate,
    BookStore,
    validate_candidate,
)


class CatalogService:
    """Orchestrates book operations and enforces catalog invariants.

    - At most one book per ISBN.
    - Mutations require the target book to exist.
    - ``available`` defaults to ``True`` on create and is only overwritten on
      update when the caller supplied it.

    The ISBN check and the following write are separate steps; the store's
    unique constraint backs them up and surfaces as ``DuplicateIsbnError``.
    """

    def __init__(self, store: BookStore) -> None:
        self._store = store

    def list_all(self) -> list[Book]:
        return self._store.list_all()

    def get_by_id(self, book_id: str) -> Book:
        book = self._store.get(book_id)
        if book is None:
            raise BookNotFoundError.with_id(book_id)
        return book

    def get_by_isbn(self, isbn: str) -> Book:
        book = self._store.get_by_isbn(isbn)
        if book is None:
            raise BookNotFoundError.with_isbn(isbn)
        return book

    def find_by_author(self, author: str) -> list[Book]:
        return self._store.find_by_author_containing(author)

    def find_by_title(self, title: str) -> list[Book]:
        return self._store.find_by_title_containing(title)

    def find_by_genre(self, genre: str) -> list[Book]:
        return self._store.find_by_genre(genre)

    def list_available(self) -> list[Book]:
        return self._store.find_by_available(True)

    def create(self, candidate: BookCandidate) -> Book:
        self._validate(candidate)

        if self._store.exists_by_isbn(candidate.isbn):
            raise DuplicateIsbnError(candidate.isbn)

        if candidate.available is None:
            candidate = candidate.model_copy(update={"available": True})

        book = self._store.create(candidate)
        logger.info("Created book {} with ISBN {}", book.id, book.isbn)
        return book

    def update(self, book_id: str, candidate: BookCandidate) -> Book:
        self._validate(candidate)
        existing = self.get_by_id(book_id)

        if candidate.isbn != existing.isbn and self._store.exists_by_isbn(
            candidate.isbn
        ):
            raise DuplicateIsbnError(candidate.isbn)

        changes = {
            "title": candidate.title,
            "author": candidate.author,
            "isbn": candidate.isbn,
            "publication_date": candidate.publication_date,
            "genre": candidate.genre,
            "description": candidate.description,
        }
        if candidate.available is not None:
            changes["available"] = candidate.available

        book = self._store.update(existing.model_copy(update=changes))
        logger.info("Updated book {}", book.id)
        return book

    def delete(self, book_id: str) -> None:
        self.get_by_id(book_id)
        if not self._store.delete(book_id):
            raise BookNotFoundError.with_id(book_id)
        logger.info("Deleted book {}", book_id)

    def set_availability(self, book_id: str, available: bool) -> Book:
        existing = self.get_by_id(book_id)
        book = self._store.update(existing.model_copy(update={"available": available}))
        logger.info("Set availability of book {} to {}", book.id, available)
        return book

    def _validate(self, candidate: BookCandidate) -> None:
        errors = validate_candidate(candidate)
        if errors:
            raise BookValidationError(errors)
