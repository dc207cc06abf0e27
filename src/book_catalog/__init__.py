"""Build a JSON catalog of PDF books with derived reading metadata."""

__version__ = "0.1.0"
