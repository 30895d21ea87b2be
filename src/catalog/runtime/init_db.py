"""Database initialization and sample data."""

from datetime import date

from loguru import logger

from src.catalog.core.services import CatalogService, DbManageService, DbSessionService
from src.catalog.entities.service.book import BookCandidate, BookRepository

SAMPLE_BOOKS: list[BookCandidate] = [
    BookCandidate(
        title="Clean Code",
        author="Robert C. Martin",
        isbn="9780132350884",
        publication_date=date(2008, 8, 1),
        genre="Programming",
        available=True,
        description="A Handbook of Agile Software Craftsmanship",
    ),
    BookCandidate(
        title="Effective Java",
        author="Joshua Bloch",
        isbn="9780134685991",
        publication_date=date(2017, 12, 27),
        genre="Programming",
        available=True,
        description="Best practices for the Java platform",
    ),
    BookCandidate(
        title="Design Patterns",
        author="Erich Gamma",
        isbn="9780201633610",
        publication_date=date(1994, 10, 31),
        genre="Software Engineering",
        available=False,
        description="Elements of Reusable Object-Oriented Software",
    ),
    BookCandidate(
        title="Spring in Action",
        author="Craig Walls",
        isbn="9781617294945",
        publication_date=date(2018, 10, 1),
        genre="Programming",
        available=True,
        description="Covers Spring 5",
    ),
]


def init_db(database_service: DbSessionService | None = None) -> None:
    """Create all database tables."""
    DbManageService(database_service or DbSessionService()).create_all()


def seed_sample_data(database_service: DbSessionService | None = None) -> int:
    """Insert the sample books when the catalog is empty.

    Returns the number of books inserted.
    """
    database_service = database_service or DbSessionService()
    with database_service.session_scope() as session:
        repository = BookRepository(session)
        if repository.count() > 0:
            logger.info("Catalog already populated; skipping sample data")
            return 0

        service = CatalogService(repository)
        for candidate in SAMPLE_BOOKS:
            service.create(candidate)

    logger.info("Seeded {} sample books", len(SAMPLE_BOOKS))
    return len(SAMPLE_BOOKS)


if __name__ == "__main__":
    init_db()
