"""Default locations and constants used by catalog builds."""

from pathlib import Path

DEFAULT_SOURCE_DIR = Path("books")
DEFAULT_OUTPUT_PATH = Path("booksData.json")

DOCUMENT_EXTENSION = ".pdf"

AVERAGE_READING_SPEED = 200  # words per minute

# Placeholder for metadata the document does not provide
UNKNOWN = "Unknown"
