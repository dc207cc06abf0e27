"""Show and info command implementations."""

from collections import Counter
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from book_catalog.core.catalog_builder import CatalogBuilder
from book_catalog.core.output_writer import load_catalog
from book_catalog.models.catalog import CatalogEntry, Difficulty


def _display(value: object) -> str:
    """Render missing values as a dash."""
    if value is None:
        return "—"
    if isinstance(value, Difficulty):
        return value.value
    return str(value)


def display_entry(entry: CatalogEntry, console: Console) -> None:
    """Display a single catalog entry."""
    info_lines = [
        f"[bold]{entry.title}[/]",
        "",
        f"[dim]Author:[/] {entry.author}",
        f"[dim]Pages:[/] {_display(entry.num_pages)}",
        f"[dim]Created:[/] {entry.creation_date}",
        f"[dim]Read time:[/] {_display(entry.read_time)}",
        f"[dim]Difficulty:[/] {_display(entry.difficulty)}",
        f"[dim]Rating:[/] {entry.rating}",
        f"[dim]Signature:[/] {entry.signature}",
    ]

    if entry.is_degraded:
        info_lines.append("")
        info_lines.append("[yellow]⚠ Document could not be parsed[/]")

    console.print(
        Panel(
            "\n".join(info_lines),
            title="Book Information",
            border_style="yellow" if entry.is_degraded else "green",
        )
    )


def execute_info(book_path: Path, console: Console) -> CatalogEntry:
    """Execute the info command: derive one entry without writing anything."""
    entry = CatalogBuilder().build_entry(book_path)
    console.print()
    display_entry(entry, console)
    return entry


def execute_show(catalog_path: Path, console: Console) -> None:
    """Execute the show command."""
    catalog = load_catalog(catalog_path)

    table = Table(title="Book Catalog", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("Title", style="white")
    table.add_column("Author", style="white")
    table.add_column("Pages", justify="right", style="green")
    table.add_column("Read Time")
    table.add_column("Difficulty")
    table.add_column("Rating", justify="right", style="magenta")
    table.add_column("Sig", style="dim")

    for i, entry in enumerate(catalog):
        table.add_row(
            str(i + 1),
            entry.title,
            entry.author,
            _display(entry.num_pages),
            _display(entry.read_time),
            _display(entry.difficulty),
            f"{entry.rating:.1f}",
            entry.signature,
        )

    console.print(table)

    difficulty_counts = Counter(
        _display(entry.difficulty) for entry in catalog if entry.difficulty
    )
    signature_counts = Counter(entry.signature for entry in catalog)
    degraded = sum(1 for entry in catalog if entry.is_degraded)

    summary_lines = [f"[bold]{len(catalog)} entries[/]"]
    if difficulty_counts:
        summary_lines.append(
            "[dim]Difficulty:[/] "
            + ", ".join(
                f"{tier.value} {difficulty_counts[tier.value]}"
                for tier in Difficulty
                if difficulty_counts[tier.value]
            )
        )
    summary_lines.append(
        f"[dim]Signatures:[/] RE {signature_counts['RE']}, JE {signature_counts['JE']}"
    )
    if degraded:
        summary_lines.append(f"[yellow]⚠ {degraded} unparsed book(s)[/]")

    console.print()
    console.print(
        Panel(
            "\n".join(summary_lines),
            title="Summary",
            border_style="blue",
        )
    )
