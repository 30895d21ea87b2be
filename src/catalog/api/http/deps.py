"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.core.services import CatalogService, DbSessionService
from src.catalog.entities.service.book import BookRepository, BookStore


def get_database_service(request: Request) -> DbSessionService:
    """Get the database service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.database_service


def get_db_session(
    database_service: DbSessionService = Depends(get_database_service),
) -> Iterator[Session]:
    """Yield a database session scoped to the current request."""
    session = database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_book_store(db: Session = Depends(get_db_session)) -> BookStore:
    """Get the book store for the current request."""
    return BookRepository(db)


def get_catalog_service(
    store: BookStore = Depends(get_book_store),
) -> CatalogService:
    """Get the catalog service bound to the request's book store."""
    return CatalogService(store)
