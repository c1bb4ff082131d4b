"""Use case to score the latest snapshot against CSP targets."""

from rich_life.application.snapshot_store import SnapshotStore
from rich_life.domain.models import CspHealthReport
from rich_life.domain.services.health import evaluate_csp_health
from rich_life.infrastructure.logging.logger import get_app_logger


class GetCspHealthUseCase:
    """Compute the CSP health score of the latest snapshot."""

    def __init__(self, store: SnapshotStore, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Snapshot store holding the finance document.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self) -> CspHealthReport:
        """Return the health report of the latest snapshot.

        Returns:
            CspHealthReport: Score, issues and category percentages.
        """
        report = evaluate_csp_health(
            self._store.latest().csp,
            self._store.income().net,
            self._store.targets(),
        )
        if report.issues:
            self._logger.info(
                f"CSP health score {report.score} with "
                f"{len(report.issues)} issue(s)"
            )
        return report


__all__ = ["GetCspHealthUseCase", "CspHealthReport"]
