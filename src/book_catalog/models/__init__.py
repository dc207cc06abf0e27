"""Data models."""

from book_catalog.models.catalog import (
    Catalog,
    CatalogEntry,
    Difficulty,
)
from book_catalog.models.document import (
    DocumentMetadata,
    RawDocument,
)

__all__ = [
    # Catalog models
    "Difficulty",
    "CatalogEntry",
    "Catalog",
    # Document models
    "RawDocument",
    "DocumentMetadata",
]
