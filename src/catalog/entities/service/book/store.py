"""Storage contract for book records."""

from abc import ABC, abstractmethod

from src.catalog.entities.service.book.entity import Book, BookCandidate


class BookStore(ABC):
    """Durable storage and lookup of book records, without business rules.

    Implementations raise ``DuplicateIsbnError`` from ``create``/``update``
    when the underlying storage rejects a duplicate ISBN, and
    ``BookNotFoundError`` from ``update`` when the record has vanished.
    """

    @abstractmethod
    def list_all(self) -> list[Book]:
        raise NotImplementedError

    @abstractmethod
    def get(self, book_id: str) -> Book | None:
        raise NotImplementedError

    @abstractmethod
    def get_by_isbn(self, isbn: str) -> Book | None:
        raise NotImplementedError

    @abstractmethod
    def exists_by_isbn(self, isbn: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def find_by_author_containing(self, author: str) -> list[Book]:
        """Case-insensitive substring match on author."""
        raise NotImplementedError

    @abstractmethod
    def find_by_title_containing(self, title: str) -> list[Book]:
        """Case-insensitive substring match on title."""
        raise NotImplementedError

    @abstractmethod
    def find_by_genre(self, genre: str) -> list[Book]:
        """Case-insensitive exact match on genre."""
        raise NotImplementedError

    @abstractmethod
    def find_by_available(self, available: bool) -> list[Book]:
        raise NotImplementedError

    @abstractmethod
    def count(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def create(self, candidate: BookCandidate) -> Book:
        """Persist a new record and return it with its assigned id.

        ``candidate.available`` must already be resolved to a boolean.
        """
        raise NotImplementedError

    @abstractmethod
    def update(self, book: Book) -> Book:
        """Overwrite the stored record that has ``book.id``."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, book_id: str) -> bool:
        """Remove the record; return whether one was removed."""
        raise NotImplementedError
