"""Errors raised while building or loading a catalog."""

from pathlib import Path


class CatalogError(Exception):
    """Base class for catalog failures."""


class DirectoryReadError(CatalogError):
    """Source directory is missing or cannot be listed."""

    def __init__(self, directory: Path, reason: str):
        self.directory = directory
        self.reason = reason
        super().__init__(f"Cannot read directory {directory}: {reason}")


class DocumentParseError(CatalogError):
    """A single document could not be read or parsed."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot parse {path.name}: {reason}")


class OutputWriteError(CatalogError):
    """The catalog file could not be written."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot write catalog to {path}: {reason}")


class CatalogLoadError(CatalogError):
    """An existing catalog file is missing or invalid."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load catalog {path}: {reason}")
