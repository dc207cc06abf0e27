"""Extract per-document metadata and derive reading metrics from it."""

import logging
import re
from pathlib import Path

from book_catalog.config import UNKNOWN
from book_catalog.core.errors import DocumentParseError
from book_catalog.core.metrics import (
    classify_difficulty,
    count_words,
    estimate_read_time,
)
from book_catalog.core.parser_factory import ParserFactory
from book_catalog.models.document import DocumentMetadata, RawDocument

log = logging.getLogger(__name__)

# PDF date strings look like "D:YYYYMMDDHHmmSSOHH'mm'"; only the date part is used
CREATION_DATE_PATTERN = re.compile(r"^D:([0-9]{4})([0-9]{2})([0-9]{2})")


def parse_creation_date(raw: str | None) -> str:
    """Convert a PDF date string to MM/DD/YYYY, or "Unknown".

    Month and day are not range-checked.
    """
    if not raw:
        return UNKNOWN

    match = CREATION_DATE_PATTERN.match(raw)
    if not match:
        return UNKNOWN

    year, month, day = match.groups()
    return f"{month}/{day}/{year}"


def derive_metadata(raw: RawDocument) -> DocumentMetadata:
    """Derive catalog metadata from successfully parsed document fields."""
    text = raw.text or ""
    return DocumentMetadata(
        num_pages=raw.num_pages,
        author=raw.author or UNKNOWN,
        creation_date=parse_creation_date(raw.creation_date),
        read_time=estimate_read_time(count_words(text)),
        difficulty=classify_difficulty(text),
        text=text,
    )


def extract_metadata(path: Path) -> DocumentMetadata:
    """Parse a document and derive its metadata.

    Parse failures never propagate: they are logged and turned into a
    degraded record so a single bad file cannot abort a catalog build.
    """
    try:
        raw = ParserFactory.create(path).parse()
    except DocumentParseError as e:
        log.error(f"Error processing {path}: {e.reason}")
        return DocumentMetadata.degraded()

    return derive_metadata(raw)
