"""Use case to describe the Conscious Spending Plan of the latest snapshot."""

from rich_life.application.snapshot_store import SnapshotStore
from rich_life.domain.models import CspOverview
from rich_life.domain.services.finance import compute_csp_overview


class GetCspOverviewUseCase:
    """Compute CSP amounts, shares of net income and trends."""

    def __init__(self, store: SnapshotStore) -> None:
        self._store = store

    def execute(self) -> CspOverview:
        """Return the CSP overview of the latest snapshot."""
        return compute_csp_overview(
            self._store.latest(),
            self._store.previous(),
            self._store.income().net,
            self._store.targets(),
        )


__all__ = ["GetCspOverviewUseCase", "CspOverview"]
