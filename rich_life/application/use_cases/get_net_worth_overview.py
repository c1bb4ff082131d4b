"""Use case to compute net worth trends from the snapshot history."""

from rich_life.application.snapshot_store import SnapshotStore
from rich_life.domain.models import NetWorthOverview
from rich_life.domain.services.finance import compute_net_worth_overview
from rich_life.infrastructure.logging.logger import get_app_logger


class GetNetWorthOverviewUseCase:
    """Compute latest net worth with period-over-period and all-time trends."""

    def __init__(self, store: SnapshotStore, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Snapshot store holding the finance document.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self, range_months: int = 0) -> NetWorthOverview:
        """Return the net worth overview.

        Args:
            range_months: Number of recent snapshots in the chart history;
                0 keeps the whole history.

        Returns:
            NetWorthOverview: Latest totals, trends and history points.
        """
        overview = compute_net_worth_overview(
            self._store.snapshots(),
            range_months=range_months,
        )
        self._logger.info(
            f"Net worth computed: total={overview.total}, "
            f"as_of={overview.as_of}"
        )
        return overview


__all__ = ["GetNetWorthOverviewUseCase", "NetWorthOverview"]
