"""JSON file storage for the finance document."""

import os
import tempfile
from pathlib import Path

from rich_life.application.ports.document_storage import DocumentStoragePort


class JsonFileDocumentStorage(DocumentStoragePort):
    """Storage keeping the document in a single JSON file."""

    def __init__(self, path: Path) -> None:
        """Initialize the storage.

        Args:
            path: Location of the JSON document.
        """
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> str | None:
        """Return the file content, or None when the file does not exist."""
        if not self._path.exists():
            return None
        return self._path.read_text(encoding="utf-8")

    def write(self, payload: str) -> None:
        """Write the document atomically through a temporary file."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self._path.parent,
            prefix=f".{self._path.name}.",
            suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            os.replace(tmp_name, self._path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise


__all__ = ["JsonFileDocumentStorage"]
