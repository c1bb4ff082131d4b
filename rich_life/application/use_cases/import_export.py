"""Use cases to import and export the finance document."""

import json
from dataclasses import dataclass

from rich_life.application.snapshot_store import SnapshotStore
from rich_life.domain.errors import DocumentValidationError
from rich_life.infrastructure.logging.logger import get_usage_logger


@dataclass(frozen=True)
class ImportResult:
    """Summary of an imported document.

    Attributes:
        snapshot_count: Number of snapshots in the imported document.
        goal_count: Number of goals after reconciliation.
    """

    snapshot_count: int
    goal_count: int


class ImportDocumentUseCase:
    """Replace the stored document with an imported backup."""

    def __init__(self, store: SnapshotStore, usage_logger=None) -> None:
        self._store = store
        self._usage_logger = usage_logger or get_usage_logger()

    def execute(self, payload: str) -> ImportResult:
        """Validate and import a JSON backup.

        Args:
            payload: JSON text of the backup.

        Returns:
            ImportResult: Counts of the imported data.

        Raises:
            DocumentValidationError: If the payload is not JSON or misses the
                snapshots list or income object. Nothing is changed then.
        """
        try:
            parsed = json.loads(payload)
        except json.JSONDecodeError as exc:
            raise DocumentValidationError(
                f"Invalid data format: not valid JSON ({exc.msg})."
            ) from exc
        document = self._store.replace(parsed)
        result = ImportResult(
            snapshot_count=len(document["snapshots"]),
            goal_count=len(document.get("goals") or {}),
        )
        self._usage_logger.info(
            f"Imported document with {result.snapshot_count} snapshots"
        )
        return result


class ExportDocumentUseCase:
    """Serialize the stored document for backup."""

    def __init__(self, store: SnapshotStore, usage_logger=None) -> None:
        self._store = store
        self._usage_logger = usage_logger or get_usage_logger()

    def execute(self) -> str:
        """Return the document as JSON text."""
        payload = self._store.export()
        self._usage_logger.info("Exported document")
        return payload


__all__ = ["ImportDocumentUseCase", "ExportDocumentUseCase", "ImportResult"]
