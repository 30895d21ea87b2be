from __future__ import annotations

from collections.abc import Callable
from datetime import date
from typing import Any

import pytest

from src.catalog.core.services import CatalogService
from src.catalog.entities.service.book import BookCandidate
from tests.fixtures.dummies import InMemoryBookStore


def candidate_data(**overrides: Any) -> dict[str, Any]:
    """Wire-format body of a valid book candidate."""
    data: dict[str, Any] = {
        "title": "Clean Code",
        "author": "Robert C. Martin",
        "isbn": "9780132350884",
        "publicationDate": "2008-08-01",
        "genre": "Programming",
        "available": True,
        "description": "A Handbook of Agile Software Craftsmanship",
    }
    data.update(overrides)
    return data


@pytest.fixture
def make_candidate() -> Callable[..., BookCandidate]:
    """Build a valid candidate, overriding any field by its Python name."""

    def _make(**overrides: Any) -> BookCandidate:
        fields: dict[str, Any] = {
            "title": "Clean Code",
            "author": "Robert C. Martin",
            "isbn": "9780132350884",
            "publication_date": date(2008, 8, 1),
            "genre": "Programming",
            "available": True,
            "description": "A Handbook of Agile Software Craftsmanship",
        }
        fields.update(overrides)
        return BookCandidate(**fields)

    return _make


@pytest.fixture
def book_store() -> InMemoryBookStore:
    return InMemoryBookStore()


@pytest.fixture
def catalog_service(book_store: InMemoryBookStore) -> CatalogService:
    return CatalogService(book_store)
