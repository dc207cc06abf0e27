"""PDF parsing via pypdf."""

import io
import logging
from pathlib import Path

# Suppress warnings about malformed PDF object references
logging.getLogger("pypdf").setLevel(logging.ERROR)

import pypdf
from pypdf.errors import EmptyFileError, FileNotDecryptedError, PdfReadError

from book_catalog.core.errors import DocumentParseError
from book_catalog.core.parser_factory import DocumentParser
from book_catalog.models.document import RawDocument

log = logging.getLogger(__name__)

PAGE_SEPARATOR = "\n\n"


class PdfParser(DocumentParser):
    """Read page count, info fields and full text from a PDF."""

    def __init__(self, pdf_path: Path):
        self.path = pdf_path

        try:
            data = pdf_path.read_bytes()
        except OSError as e:
            raise DocumentParseError(pdf_path, f"File could not be read: {e}") from e

        try:
            self._reader = pypdf.PdfReader(io.BytesIO(data))
        except EmptyFileError as e:
            raise DocumentParseError(pdf_path, "PDF file is empty.") from e
        except FileNotDecryptedError as e:
            raise DocumentParseError(
                pdf_path, "PDF is encrypted. Please decrypt first."
            ) from e
        except PdfReadError as e:
            raise DocumentParseError(pdf_path, f"PDF appears corrupted: {e}") from e
        except Exception as e:
            raise DocumentParseError(pdf_path, f"PDF could not be opened: {e}") from e

    def parse(self) -> RawDocument:
        """Parse the PDF and return its raw fields."""
        try:
            info = self._reader.metadata or {}
            num_pages = len(self._reader.pages)
            text = self._extract_text()
        except FileNotDecryptedError as e:
            raise DocumentParseError(
                self.path, "PDF is encrypted. Please decrypt first."
            ) from e
        except PdfReadError as e:
            raise DocumentParseError(self.path, f"PDF appears corrupted: {e}") from e
        except Exception as e:
            raise DocumentParseError(self.path, f"Text extraction failed: {e}") from e

        log.debug(f"Parsed {self.path.name}: {num_pages} pages, {len(text)} chars")

        return RawDocument(
            num_pages=num_pages,
            author=_info_text(info, "/Author"),
            creation_date=_info_text(info, "/CreationDate"),
            text=text,
        )

    def _extract_text(self) -> str:
        """Extract text from every page, pages separated by a blank line."""
        text_parts = []
        for page in self._reader.pages:
            text_parts.append(page.extract_text() or "")
        return PAGE_SEPARATOR.join(text_parts)


def _info_text(info, key: str) -> str | None:
    """Read an info dictionary entry as plain text, if present."""
    if key not in info:
        return None
    value = info[key]
    if value is None:
        return None
    return str(value)
