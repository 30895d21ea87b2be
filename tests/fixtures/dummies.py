from __future__ import annotations

import uuid

from src.catalog.core.exceptions import BookNotFoundError, DuplicateIsbnError
from src.catalog.entities.service.book import Book, BookCandidate, BookStore


class InMemoryBookStore(BookStore):
    """Dict-backed store honouring the same ISBN uniqueness as the database.

    With ``stale_isbn_checks`` set, ``exists_by_isbn`` always answers ``False``,
    imitating a concurrent writer that slipped in between check and write.
    """

    def __init__(self, stale_isbn_checks: bool = False) -> None:
        self._books: dict[str, Book] = {}
        self.stale_isbn_checks = stale_isbn_checks
        self.writes = 0

    def _isbn_taken(self, isbn: str, exclude_id: str | None = None) -> bool:
        return any(
            book.isbn == isbn and book.id != exclude_id for book in self._books.values()
        )

    def list_all(self) -> list[Book]:
        return list(self._books.values())

    def get(self, book_id: str) -> Book | None:
        return self._books.get(book_id)

    def get_by_isbn(self, isbn: str) -> Book | None:
        return next((b for b in self._books.values() if b.isbn == isbn), None)

    def exists_by_isbn(self, isbn: str) -> bool:
        if self.stale_isbn_checks:
            return False
        return self._isbn_taken(isbn)

    def find_by_author_containing(self, author: str) -> list[Book]:
        return [b for b in self._books.values() if author.lower() in b.author.lower()]

    def find_by_title_containing(self, title: str) -> list[Book]:
        return [b for b in self._books.values() if title.lower() in b.title.lower()]

    def find_by_genre(self, genre: str) -> list[Book]:
        return [
            b
            for b in self._books.values()
            if b.genre is not None and b.genre.lower() == genre.lower()
        ]

    def find_by_available(self, available: bool) -> list[Book]:
        return [b for b in self._books.values() if b.available is available]

    def count(self) -> int:
        return len(self._books)

    def create(self, candidate: BookCandidate) -> Book:
        if self._isbn_taken(candidate.isbn):
            raise DuplicateIsbnError(candidate.isbn)
        book = Book(id=str(uuid.uuid4()), **candidate.model_dump())
        self._books[book.id] = book
        self.writes += 1
        return book

    def update(self, book: Book) -> Book:
        if book.id not in self._books:
            raise BookNotFoundError.with_id(book.id)
        if self._isbn_taken(book.isbn, exclude_id=book.id):
            raise DuplicateIsbnError(book.isbn)
        self._books[book.id] = book
        self.writes += 1
        return book

    def delete(self, book_id: str) -> bool:
        removed = self._books.pop(book_id, None)
        if removed is not None:
            self.writes += 1
        return removed is not None
