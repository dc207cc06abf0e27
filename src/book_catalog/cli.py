"""Main CLI application."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from book_catalog.config import DEFAULT_OUTPUT_PATH, DEFAULT_SOURCE_DIR
from book_catalog.core.errors import CatalogError
from book_catalog.core.parser_factory import ParserFactory

app = typer.Typer(
    name="book-catalog",
    help="Scan a directory of PDF books and build a JSON catalog.",
    add_completion=False,
)

console = Console()


def configure_logging(verbose: bool = False) -> None:
    """Route log records through rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Scan a directory of PDF books and build a JSON catalog.

    Run without arguments to catalog ./books into ./booksData.json.
    """
    if ctx.invoked_subcommand is None:
        configure_logging()
        try:
            from book_catalog.commands.build import execute_build

            execute_build(
                source_dir=DEFAULT_SOURCE_DIR,
                output_path=DEFAULT_OUTPUT_PATH,
                quiet=False,
                console=console,
            )
        except CatalogError as e:
            console.print(f"[red]Error: {e}[/]")
            raise typer.Exit(1)


@app.command()
def build(
    source_dir: Annotated[
        Path,
        typer.Argument(
            help="Directory containing the PDF books",
        ),
    ] = DEFAULT_SOURCE_DIR,
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Catalog JSON file to write (overwritten on every run)",
        ),
    ] = DEFAULT_OUTPUT_PATH,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress progress output",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show debug logging",
        ),
    ] = False,
) -> None:
    """Build the catalog from every PDF in SOURCE_DIR."""
    configure_logging(verbose)

    try:
        from book_catalog.commands.build import execute_build

        execute_build(
            source_dir=source_dir,
            output_path=output,
            quiet=quiet,
            console=console,
        )
    except CatalogError as e:
        console.print(f"[red]Error: {e}[/]")
        raise typer.Exit(1)


@app.command()
def info(
    book_path: Annotated[
        Path,
        typer.Argument(
            help="Path to the PDF file",
            exists=True,
            file_okay=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
) -> None:
    """Display the catalog entry derived for a single book."""
    configure_logging()

    if not ParserFactory.is_supported(book_path):
        console.print(f"[red]Unsupported file format: {book_path.suffix}[/]")
        console.print("[dim]Supported formats: .pdf[/]")
        raise typer.Exit(1)

    from book_catalog.commands.show import execute_info

    execute_info(book_path=book_path, console=console)


@app.command()
def show(
    catalog_path: Annotated[
        Path,
        typer.Argument(
            help="Catalog JSON file written by 'build'",
        ),
    ] = DEFAULT_OUTPUT_PATH,
) -> None:
    """Display an existing catalog as a table."""
    try:
        from book_catalog.commands.show import execute_show

        execute_show(catalog_path=catalog_path, console=console)
    except CatalogError as e:
        console.print(f"[red]Error: {e}[/]")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
