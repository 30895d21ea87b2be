"""Database management CLI commands."""

import typer
from rich.panel import Panel
from rich.table import Table

from src.catalog.core.services import DbManageService, DbSessionService
from src.catalog.entities.service.book import BookRepository
from src.catalog.runtime.context import get_config
from src.catalog.runtime.init_db import seed_sample_data

from .utils import console

db_app = typer.Typer(help="🗄️ Database commands")


@db_app.command(name="init")
def init() -> None:
    """Create the catalog tables."""
    url = get_config().database.url
    DbManageService(DbSessionService()).create_all()
    console.print(
        Panel.fit(f"[bold green]Tables created[/bold green]\n{url}", border_style="green")
    )


@db_app.command(name="seed")
def seed() -> None:
    """Insert the sample books if the catalog is empty."""
    database_service = DbSessionService()
    DbManageService(database_service).create_all()
    inserted = seed_sample_data(database_service)
    if inserted:
        console.print(f"[green]Inserted {inserted} sample books[/green]")
    else:
        console.print("[yellow]Catalog is not empty; nothing inserted[/yellow]")


@db_app.command(name="list")
def list_books() -> None:
    """Print the books currently in the catalog."""
    database_service = DbSessionService()
    DbManageService(database_service).create_all()
    with database_service.session_scope() as session:
        books = BookRepository(session).list_all()

    table = Table(title="Catalog")
    table.add_column("ISBN", style="cyan")
    table.add_column("Title")
    table.add_column("Author")
    table.add_column("Genre")
    table.add_column("Available")
    for book in books:
        table.add_row(
            book.isbn,
            book.title,
            book.author,
            book.genre or "-",
            "✓" if book.available else "✗",
        )
    console.print(table)


@db_app.command(name="drop")
def drop(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Drop the catalog tables."""
    if not yes and not typer.confirm("Drop all catalog tables?"):
        console.print("[yellow]Aborted[/yellow]")
        raise typer.Exit(1)
    DbManageService(DbSessionService()).drop_all()
    console.print("[red]Tables dropped[/red]")
