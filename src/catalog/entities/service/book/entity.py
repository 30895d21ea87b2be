"""Entity: Book."""

from datetime import date

from pydantic import Field

from src.catalog.entities.core._base import Entity


class BookCandidate(Entity):
    """Caller-supplied book data for create and update, prior to persistence.

    Every field is optional at parse time so that missing or blank values are
    reported by ``validate_candidate`` as field errors rather than parse
    failures. ``available`` stays ``None`` when the caller omitted it.
    """

    title: str | None = Field(default=None, description="Book title")
    author: str | None = Field(default=None, description="Book author")
    isbn: str | None = Field(default=None, description="ISBN-10 or ISBN-13")
    publication_date: date | None = Field(default=None, description="Publication date")
    genre: str | None = Field(default=None, description="Genre")
    available: bool | None = Field(default=None, description="Availability flag")
    description: str | None = Field(default=None, description="Short description")


class Book(Entity):
    """Book record as stored and exchanged."""

    id: str = Field(description="Store-assigned identifier")
    title: str
    author: str
    isbn: str
    publication_date: date
    genre: str | None = None
    available: bool = True
    description: str | None = None


class AvailabilityUpdate(Entity):
    """Body of an availability patch."""

    available: bool | None = None
