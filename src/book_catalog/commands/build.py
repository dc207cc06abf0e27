"""Build command implementation."""

import logging
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress

from book_catalog.core.catalog_builder import CatalogBuilder
from book_catalog.models.catalog import Catalog

log = logging.getLogger(__name__)


def execute_build(
    source_dir: Path,
    output_path: Path,
    quiet: bool,
    console: Console,
) -> Catalog:
    """Execute the build command."""
    builder = CatalogBuilder(source_dir, output_path)
    paths = builder.discover()

    if not paths and not quiet:
        console.print(f"[yellow]No PDF files found in {source_dir}[/]")

    if quiet:
        catalog = builder.build(paths)
    else:
        entries = []
        with Progress(console=console) as progress:
            task = progress.add_task("Cataloging books...", total=len(paths))

            for path, entry in builder.iter_entries(paths):
                entries.append(entry)
                progress.update(
                    task, advance=1, description=f"Cataloging: {path.name[:40]}..."
                )
        catalog = Catalog(tuple(entries))

    output = builder.write(catalog)

    if not quiet:
        degraded = sum(1 for entry in catalog if entry.is_degraded)

        summary_lines = [
            f"[green]Books data has been written to {output}[/]",
            "",
            f"[dim]Source directory:[/] {source_dir}",
            f"[dim]Books:[/] {len(catalog)}",
        ]
        if degraded:
            summary_lines.append(
                f"[yellow]⚠ {degraded} book(s) could not be parsed[/]"
            )

        console.print()
        console.print(
            Panel(
                "\n".join(summary_lines),
                title="Complete",
                border_style="green",
            )
        )

    return catalog
