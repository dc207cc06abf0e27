"""Data models for per-document extraction results."""

from pydantic import BaseModel, Field

from book_catalog.config import UNKNOWN
from book_catalog.models.catalog import Difficulty


class RawDocument(BaseModel):
    """Fields read straight from the document parser."""

    num_pages: int
    author: str | None = None
    creation_date: str | None = None  # Raw PDF date, e.g. "D:20230115103000"
    text: str = ""


class DocumentMetadata(BaseModel):
    """Metadata derived from a document, possibly degraded."""

    num_pages: int | None = None
    author: str = UNKNOWN
    creation_date: str = UNKNOWN
    read_time: str | None = None
    difficulty: Difficulty | None = None
    # Internal only, never written to the catalog
    text: str = Field(default="", exclude=True, repr=False)

    @classmethod
    def degraded(cls) -> "DocumentMetadata":
        """Placeholder record for a document that failed to parse."""
        return cls()
