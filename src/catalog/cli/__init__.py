"""Main CLI application module."""

import typer

from .db_commands import db_app
from .server_commands import serve

app = typer.Typer(
    help="📚 Library Catalog CLI - database and server management",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(db_app, name="db")
app.command(name="serve")(serve)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
