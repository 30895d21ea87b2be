"""Book database table model."""

from datetime import date

from sqlalchemy import Column, String, UniqueConstraint
from sqlmodel import Field

from src.catalog.entities.core._base import EntityTable


class BookTable(EntityTable, table=True):
    """Database persistence model for books.

    The unique constraint on ``isbn`` is the authoritative guard against
    duplicate ISBNs under concurrent writes.
    """

    __table_args__ = (UniqueConstraint("isbn", name="uq_book_isbn"),)

    title: str = Field(sa_column=Column(String(200), nullable=False))
    author: str = Field(sa_column=Column(String(100), nullable=False, index=True))
    isbn: str = Field(sa_column=Column(String(13), nullable=False, index=True))
    publication_date: date = Field(nullable=False)
    genre: str | None = Field(default=None, sa_column=Column(String(50), nullable=True))
    available: bool = Field(default=True, nullable=False)
    description: str | None = Field(
        default=None, sa_column=Column(String(1000), nullable=True)
    )
