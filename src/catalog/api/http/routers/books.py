"""Book catalog API router."""

from fastapi import APIRouter, Depends, Query, Response, status

from src.catalog.api.http.deps import get_catalog_service
from src.catalog.core.exceptions import BookValidationError, FieldError
from src.catalog.core.services import CatalogService
from src.catalog.entities.service.book import Book, BookCandidate
from src.catalog.entities.service.book.entity import AvailabilityUpdate

router = APIRouter(prefix="/api/books", tags=["books"])


@router.get("", response_model=list[Book])
def list_books(
    service: CatalogService = Depends(get_catalog_service),
) -> list[Book]:
    """List all books."""
    return service.list_all()


@router.get("/available", response_model=list[Book])
def list_available_books(
    service: CatalogService = Depends(get_catalog_service),
) -> list[Book]:
    """List books that are currently available."""
    return service.list_available()


@router.get("/isbn/{isbn}", response_model=Book)
def get_book_by_isbn(
    isbn: str,
    service: CatalogService = Depends(get_catalog_service),
) -> Book:
    """Get a book by ISBN."""
    return service.get_by_isbn(isbn)


@router.get("/search/author", response_model=list[Book])
def search_by_author(
    author: str = Query(..., description="Case-insensitive substring"),
    service: CatalogService = Depends(get_catalog_service),
) -> list[Book]:
    return service.find_by_author(author)


@router.get("/search/title", response_model=list[Book])
def search_by_title(
    title: str = Query(..., description="Case-insensitive substring"),
    service: CatalogService = Depends(get_catalog_service),
) -> list[Book]:
    return service.find_by_title(title)


@router.get("/search/genre", response_model=list[Book])
def search_by_genre(
    genre: str = Query(..., description="Case-insensitive exact genre"),
    service: CatalogService = Depends(get_catalog_service),
) -> list[Book]:
    return service.find_by_genre(genre)


@router.get("/{book_id}", response_model=Book)
def get_book(
    book_id: str,
    service: CatalogService = Depends(get_catalog_service),
) -> Book:
    """Get a book by ID."""
    return service.get_by_id(book_id)


@router.post("", response_model=Book, status_code=status.HTTP_201_CREATED)
def create_book(
    candidate: BookCandidate,
    service: CatalogService = Depends(get_catalog_service),
) -> Book:
    """Create a new book."""
    return service.create(candidate)


@router.put("/{book_id}", response_model=Book)
def update_book(
    book_id: str,
    candidate: BookCandidate,
    service: CatalogService = Depends(get_catalog_service),
) -> Book:
    """Replace a book's fields; availability is kept when omitted."""
    return service.update(book_id, candidate)


@router.patch("/{book_id}/availability", response_model=Book)
def update_book_availability(
    book_id: str,
    payload: AvailabilityUpdate,
    service: CatalogService = Depends(get_catalog_service),
) -> Book:
    """Set only the availability flag of a book."""
    if payload.available is None:
        raise BookValidationError([FieldError("available", "Available is required")])
    return service.set_availability(book_id, payload.available)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_book(
    book_id: str,
    service: CatalogService = Depends(get_catalog_service),
) -> Response:
    """Delete a book."""
    service.delete(book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
