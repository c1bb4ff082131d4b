"""Snapshot store owning the finance document.

The store wraps a DocumentStoragePort and the bundled default document. It
loads lazily, reconciles stored data with the current schema, and persists
every mutation through the port. One store instance is meant to be shared by
the use cases of a session; there is no lock against two processes writing
the same storage concurrently.
"""

import copy
import json
from collections.abc import Callable, Mapping
from datetime import date
from decimal import Decimal
from typing import Any

from rich_life.application.ports.document_storage import DocumentStoragePort
from rich_life.domain.errors import DocumentValidationError, EmptyHistoryError
from rich_life.domain.models import (
    CspTargets,
    Goal,
    Income,
    Profile,
    Snapshot,
    WeddingTask,
)
from rich_life.domain.services.document import (
    parse_goals,
    parse_income,
    parse_profile,
    parse_snapshot,
    parse_targets,
    parse_tasks,
    snapshot_to_dict,
)
from rich_life.domain.services.normalization import parse_document_date
from rich_life.domain.services.schema import (
    Document,
    reconcile_document,
    validate_document,
)
from rich_life.domain.services.validation import (
    validate_breakdown_totals,
    validate_snapshot_amounts,
)
from rich_life.infrastructure.logging.logger import get_app_logger
from rich_life.utils.decimal_utils import to_json_number


class SnapshotStore:
    """Own the ordered snapshots and the income, target and goal settings."""

    def __init__(
        self,
        storage: DocumentStoragePort,
        defaults: Mapping[str, Any],
        logger=None,
    ) -> None:
        """Initialize the store.

        Args:
            storage: Port reading and writing the JSON document.
            defaults: Default document used for seeding and reconciliation.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._storage = storage
        self._defaults = defaults
        self._logger = logger or get_app_logger()
        self._document: Document | None = None

    def load(self) -> Document:
        """Load, validate and reconcile the persisted document.

        A missing, undecodable or malformed document is replaced with the
        defaults. The failure is logged and never raised.

        Returns:
            Document: The reconciled document now held by the store.
        """
        try:
            payload = self._storage.read()
        except UnicodeDecodeError as exc:
            return self._fall_back(
                f"Stored finance data is not valid UTF-8, using defaults: {exc}"
            )
        if payload is None:
            self._logger.info("No stored finance data, using defaults")
            self._document = self._default_document()
            return self._document
        try:
            stored = validate_document(json.loads(payload))
            document = reconcile_document(stored, self._defaults)
        except json.JSONDecodeError as exc:
            return self._fall_back(
                f"Stored finance data is not valid JSON, using defaults: {exc}"
            )
        except DocumentValidationError as exc:
            return self._fall_back(
                f"Stored finance data rejected, using defaults: {exc}"
            )
        self._document = document
        return self._document

    def get(self) -> Document:
        """Return the loaded document, loading it on first access."""
        if self._document is None:
            return self.load()
        return self._document

    @property
    def document(self) -> Document:
        """Return the loaded document."""
        return self.get()

    def mutate(self, change: Callable[[Document], None]) -> Document:
        """Apply ``change`` to the document and persist the result."""
        document = self.get()
        change(document)
        self.persist()
        return document

    def persist(self) -> None:
        """Write the current document through the storage port."""
        self._storage.write(self.export())

    def export(self) -> str:
        """Return the current document as JSON text."""
        return json.dumps(self.get(), indent=2)

    def replace(self, document: Any) -> Document:
        """Replace the whole document, as done when importing a backup.

        Args:
            document: Parsed JSON value to import.

        Returns:
            Document: The reconciled imported document.

        Raises:
            DocumentValidationError: If the document lacks required keys. The
                current document is left unchanged.
        """
        validated = validate_document(document)
        self._document = reconcile_document(validated, self._defaults)
        self.persist()
        return self._document

    def snapshots(self) -> list[Snapshot]:
        """Return parsed snapshots sorted by ascending date.

        Snapshots whose date cannot be parsed are skipped with a warning.
        """
        parsed: list[Snapshot] = []
        for raw in self.get()["snapshots"]:
            try:
                parsed.append(parse_snapshot(raw))
            except ValueError as exc:
                self._logger.warning(f"Skipping snapshot: {exc}")
        return sorted(parsed, key=lambda snapshot: snapshot.date)

    def latest(self) -> Snapshot:
        """Return the snapshot with the maximum date.

        Raises:
            EmptyHistoryError: If no snapshot exists.
        """
        snapshots = self.snapshots()
        if not snapshots:
            raise EmptyHistoryError("No snapshots recorded yet.")
        return snapshots[-1]

    def previous(self) -> Snapshot | None:
        """Return the second most recent snapshot, or None."""
        snapshots = self.snapshots()
        if len(snapshots) < 2:
            return None
        return snapshots[-2]

    def append(self, snapshot: Snapshot) -> None:
        """Insert a snapshot, keep the history sorted by date, and persist.

        Inconsistent amounts are logged as warnings; the snapshot is stored.
        """
        validate_snapshot_amounts(snapshot, self._logger)
        validate_breakdown_totals(snapshot, self._logger)

        def _insert(document: Document) -> None:
            document["snapshots"].append(snapshot_to_dict(snapshot))
            document["snapshots"].sort(key=_snapshot_sort_key)

        self.mutate(_insert)
        self._logger.info(f"Snapshot recorded for {snapshot.date}")

    def update_income(
        self,
        net: Decimal,
        gross: Decimal | None = None,
        today: date | None = None,
    ) -> bool:
        """Update income figures and stamp the update date.

        Args:
            net: New monthly net income; ignored when not positive.
            gross: Optional new gross income.
            today: Date used for ``lastUpdated``.

        Returns:
            bool: True when the income was updated and persisted.
        """
        if net <= 0:
            return False
        stamp = (today or date.today()).isoformat()

        def _update(document: Document) -> None:
            income = document["income"]
            income["net"] = to_json_number(net)
            if gross is not None and gross > 0:
                income["gross"] = to_json_number(gross)
            income["lastUpdated"] = stamp

        self.mutate(_update)
        return True

    def income(self) -> Income:
        return parse_income(self.get()["income"])

    def targets(self) -> CspTargets:
        return parse_targets(self.get().get("targets") or {})

    def goals(self) -> list[Goal]:
        return parse_goals(self.get().get("goals") or {})

    def tasks(self) -> list[WeddingTask]:
        return parse_tasks(self.get().get("weddingTasks") or [])

    def profile(self) -> Profile:
        return parse_profile(self.get().get("profile"))

    def _default_document(self) -> Document:
        return reconcile_document(copy.deepcopy(dict(self._defaults)), self._defaults)

    def _fall_back(self, message: str) -> Document:
        self._logger.error(message)
        self._document = self._default_document()
        return self._document


def _snapshot_sort_key(raw: Mapping[str, Any]) -> date:
    return parse_document_date(raw.get("date")) or date.min


__all__ = ["SnapshotStore"]
