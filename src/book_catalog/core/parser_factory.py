"""Factory for creating document parsers based on file format."""

from abc import ABC, abstractmethod
from pathlib import Path

from book_catalog.config import DOCUMENT_EXTENSION
from book_catalog.core.errors import DocumentParseError
from book_catalog.models.document import RawDocument


class DocumentParser(ABC):
    """Abstract base class for document parsers."""

    @abstractmethod
    def parse(self) -> RawDocument:
        """Parse the document and return its raw fields."""
        pass


class ParserFactory:
    """Factory for creating appropriate parser based on file format."""

    SUPPORTED_FORMATS = {
        DOCUMENT_EXTENSION: "pdf",
    }

    @classmethod
    def create(cls, path: Path) -> DocumentParser:
        """Create appropriate parser for the given file.

        Args:
            path: Path to the document file

        Returns:
            DocumentParser instance for the file type

        Raises:
            DocumentParseError: If the format is unsupported or the file
                cannot be opened
        """
        suffix = path.suffix.lower()

        if suffix not in cls.SUPPORTED_FORMATS:
            supported = ", ".join(cls.SUPPORTED_FORMATS.keys())
            raise DocumentParseError(
                path, f"Unsupported format: {suffix}. Supported formats: {supported}"
            )

        from book_catalog.core.pdf_parser import PdfParser

        return PdfParser(path)

    @classmethod
    def is_supported(cls, path: Path) -> bool:
        """Check if file format is supported (case-insensitive extension)."""
        return path.suffix.lower() in cls.SUPPORTED_FORMATS
