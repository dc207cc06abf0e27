"""Write and load catalog files."""

import os
import stat
import tempfile
from pathlib import Path

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from book_catalog.core.errors import CatalogLoadError, OutputWriteError
from book_catalog.models.catalog import Catalog


class CatalogWriter:
    """Write a catalog to a JSON file, replacing any previous content."""

    def __init__(self, output_path: Path):
        """Initialize catalog writer.

        Args:
            output_path: Destination JSON file
        """
        self.output_path = output_path

    def write(self, catalog: Catalog) -> Path:
        """Serialize the catalog and atomically replace the output file.

        The JSON is written to a temp file in the destination directory and
        renamed over the target, so readers never see a half-written file.
        The result keeps the previous file's mode, or gets the usual
        umask-derived mode for a new file.

        Raises:
            OutputWriteError: If serialization fails or the directory or
                file cannot be written
        """
        try:
            payload = catalog.to_json()
        except PydanticSerializationError as e:
            raise OutputWriteError(self.output_path, str(e)) from e

        directory = self.output_path.parent

        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=str(directory),
                prefix=f".{self.output_path.name}.",
                suffix=".tmp",
            )
        except OSError as e:
            raise OutputWriteError(self.output_path, str(e)) from e

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            # mkstemp creates the file as 0600
            os.chmod(tmp_path, self._target_mode())
            os.replace(tmp_path, self.output_path)
        except OSError as e:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass  # keep the original error
            raise OutputWriteError(self.output_path, str(e)) from e

        return self.output_path

    def _target_mode(self) -> int:
        """Mode of the existing output file, else 0666 minus the umask."""
        try:
            return stat.S_IMODE(self.output_path.stat().st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask


def load_catalog(path: Path) -> Catalog:
    """Load and validate a previously written catalog file."""
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogLoadError(path, str(e)) from e

    try:
        return Catalog.model_validate_json(content)
    except ValidationError as e:
        raise CatalogLoadError(
            path, f"invalid catalog ({e.error_count()} validation error(s))"
        ) from e
