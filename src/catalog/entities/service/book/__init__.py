"""Entity package: Book."""

from .entity import Book, BookCandidate
from .repository import BookRepository
from .store import BookStore
from .table import BookTable
from .validation import validate_candidate

__all__ = [
    "Book",
    "BookCandidate",
    "BookRepository",
    "BookStore",
    "BookTable",
    "validate_candidate",
]
