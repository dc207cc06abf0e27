"""Scan a directory of documents and build the catalog."""

import logging
import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from book_catalog.config import DEFAULT_OUTPUT_PATH, DEFAULT_SOURCE_DIR
from book_catalog.core.errors import DirectoryReadError
from book_catalog.core.labels import (
    format_title,
    generate_rating,
    generate_signature,
)
from book_catalog.core.metadata_extractor import extract_metadata
from book_catalog.core.output_writer import CatalogWriter
from book_catalog.core.parser_factory import ParserFactory
from book_catalog.models.catalog import Catalog, CatalogEntry

log = logging.getLogger(__name__)


class CatalogBuilder:
    """Build a catalog from every supported document in a directory."""

    def __init__(
        self,
        source_dir: Path = DEFAULT_SOURCE_DIR,
        output_path: Path = DEFAULT_OUTPUT_PATH,
    ):
        self.source_dir = source_dir
        self.output_path = output_path

    def discover(self) -> list[Path]:
        """List supported documents directly inside the source directory.

        Subdirectories are not followed. Results are sorted by file name so
        repeated runs process files in the same order.

        Raises:
            DirectoryReadError: If the directory is missing or unreadable
        """
        try:
            children = list(self.source_dir.iterdir())
        except OSError as e:
            raise DirectoryReadError(self.source_dir, e.strerror or str(e)) from e

        documents = [
            path
            for path in children
            if path.is_file() and ParserFactory.is_supported(path)
        ]
        log.debug(f"Found {len(documents)} document(s) in {self.source_dir}")
        return sorted(documents, key=lambda p: p.name)

    def build_entry(self, path: Path) -> CatalogEntry:
        """Build the catalog entry for a single document."""
        metadata = extract_metadata(path)
        title = format_title(display_stem(path))

        return CatalogEntry(
            title=title,
            author=metadata.author,
            num_pages=metadata.num_pages,
            creation_date=metadata.creation_date,
            read_time=metadata.read_time,
            difficulty=metadata.difficulty,
            rating=generate_rating(title),
            signature=generate_signature(title),
        )

    def iter_entries(
        self, paths: Iterable[Path] | None = None
    ) -> Iterator[tuple[Path, CatalogEntry]]:
        """Yield (path, entry) pairs, one document at a time."""
        if paths is None:
            paths = self.discover()
        for path in paths:
            yield path, self.build_entry(path)

    def build(self, paths: Iterable[Path] | None = None) -> Catalog:
        """Build the full catalog without writing it."""
        return Catalog(tuple(entry for _, entry in self.iter_entries(paths)))

    def write(self, catalog: Catalog) -> Path:
        """Persist a catalog to the configured output path."""
        output = CatalogWriter(self.output_path).write(catalog)
        log.info(f"Catalog with {len(catalog)} entries written to {output}")
        return output

    def run(self) -> Catalog:
        """Discover, build and write the catalog in one pass."""
        catalog = self.build()
        self.write(catalog)
        return catalog


def display_stem(path: Path) -> str:
    """File stem as valid text.

    Names that are not valid UTF-8 come back from the OS with lone
    surrogates; those bytes are replaced with U+FFFD.
    """
    return os.fsencode(path.stem).decode("utf-8", errors="replace")
