"""Book repository backed by SQLModel."""

from datetime import UTC, datetime

from loguru import logger
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from src.catalog.core.exceptions import BookNotFoundError, DuplicateIsbnError
from src.catalog.entities.service.book.entity import Book, BookCandidate
from src.catalog.entities.service.book.store import BookStore
from src.catalog.entities.service.book.table import BookTable


def _to_entity(row: BookTable) -> Book:
    return Book(**{name: getattr(row, name) for name in Book.model_fields})


class BookRepository(BookStore):
    """Data-access layer for books.

    Every mutating call commits immediately, so each one either persists
    fully or leaves the database untouched.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def _select_many(self, statement) -> list[Book]:
        return [_to_entity(row) for row in self._session.exec(statement).all()]

    def _commit(self, isbn: str) -> None:
        try:
            self._session.commit()
        except IntegrityError as exc:
            self._session.rollback()
            if "isbn" in str(exc.orig).lower():
                logger.warning("Unique constraint rejected ISBN {}", isbn)
                raise DuplicateIsbnError(isbn) from exc
            raise

    def list_all(self) -> list[Book]:
        return self._select_many(select(BookTable))

    def get(self, book_id: str) -> Book | None:
        row = self._session.get(BookTable, book_id)
        if row is None:
            return None
        return _to_entity(row)

    def get_by_isbn(self, isbn: str) -> Book | None:
        statement = select(BookTable).where(BookTable.isbn == isbn)
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return _to_entity(row)

    def exists_by_isbn(self, isbn: str) -> bool:
        statement = select(BookTable.id).where(BookTable.isbn == isbn).limit(1)
        return self._session.exec(statement).first() is not None

    def find_by_author_containing(self, author: str) -> list[Book]:
        statement = select(BookTable).where(
            BookTable.author.icontains(author, autoescape=True)
        )
        return self._select_many(statement)

    def find_by_title_containing(self, title: str) -> list[Book]:
        statement = select(BookTable).where(
            BookTable.title.icontains(title, autoescape=True)
        )
        return self._select_many(statement)

    def find_by_genre(self, genre: str) -> list[Book]:
        statement = select(BookTable).where(
            func.lower(BookTable.genre) == genre.lower()
        )
        return self._select_many(statement)

    def find_by_available(self, available: bool) -> list[Book]:
        statement = select(BookTable).where(BookTable.available == available)
        return self._select_many(statement)

    def count(self) -> int:
        statement = select(func.count()).select_from(BookTable)
        return self._session.exec(statement).one()

    def create(self, candidate: BookCandidate) -> Book:
        row = BookTable(**candidate.model_dump())
        self._session.add(row)
        self._commit(row.isbn)
        self._session.refresh(row)
        return _to_entity(row)

    def update(self, book: Book) -> Book:
        row = self._session.get(BookTable, book.id)
        if row is None:
            raise BookNotFoundError.with_id(book.id)

        for field, value in book.model_dump(exclude={"id"}).items():
            setattr(row, field, value)
        row.updated_at = datetime.now(UTC)

        self._session.add(row)
        self._commit(book.isbn)
        self._session.refresh(row)
        return _to_entity(row)

    def delete(self, book_id: str) -> bool:
        row = self._session.get(BookTable, book_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.commit()
        return True
