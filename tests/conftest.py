"""Shared fixtures: PDFs generated on the fly with pypdf."""

from pathlib import Path

import pytest
from pypdf import PdfWriter


def write_pdf(
    path: Path,
    pages: int = 1,
    author: str | None = None,
    creation_date: str | None = None,
) -> Path:
    """Write a PDF of blank pages with optional info fields."""
    writer = PdfWriter()
    for _ in range(pages):
        writer.add_blank_page(width=612, height=792)

    metadata = {}
    if author is not None:
        metadata["/Author"] = author
    if creation_date is not None:
        metadata["/CreationDate"] = creation_date
    if metadata:
        writer.add_metadata(metadata)

    with open(path, "wb") as f:
        writer.write(f)
    return path


@pytest.fixture
def make_pdf():
    return write_pdf


@pytest.fixture
def books_dir(tmp_path):
    """A source directory with one good and one corrupt PDF."""
    directory = tmp_path / "books"
    directory.mkdir()
    write_pdf(
        directory / "pride_and_prejudice.pdf",
        pages=3,
        author="Jane Austen",
        creation_date="D:20230115103000",
    )
    (directory / "broken_book.pdf").write_bytes(b"this is not a pdf")
    return directory
