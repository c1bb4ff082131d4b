"""Use case assembling every dashboard value for the presentation layer."""

from dataclasses import dataclass
from datetime import date

from rich_life.application.snapshot_store import SnapshotStore
from rich_life.application.use_cases.get_csp_health import GetCspHealthUseCase
from rich_life.application.use_cases.get_csp_overview import (
    GetCspOverviewUseCase,
)
from rich_life.application.use_cases.get_goal_projections import (
    GetGoalProjectionsUseCase,
)
from rich_life.application.use_cases.get_net_worth_overview import (
    GetNetWorthOverviewUseCase,
)
from rich_life.application.use_cases.get_tasks import GetTasksUseCase
from rich_life.domain.models import (
    CspHealthReport,
    CspOverview,
    GoalProjection,
    Income,
    NetWorthOverview,
    Profile,
    WeddingTask,
)


@dataclass(frozen=True)
class DashboardView:
    """Computed values rendered by the dashboard."""

    profile: Profile
    income: Income
    net_worth: NetWorthOverview
    csp: CspOverview
    health: CspHealthReport
    goals: list[GoalProjection]
    tasks: list[WeddingTask]


class GetDashboardUseCase:
    """Compute every dashboard section from one snapshot store."""

    def __init__(self, store: SnapshotStore, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Snapshot store holding the finance document.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger

    def execute(
        self,
        range_months: int = 0,
        today: date | None = None,
    ) -> DashboardView:
        """Return the dashboard view.

        Args:
            range_months: Number of recent snapshots in the net worth chart.
            today: Reference date for goal projections.

        Returns:
            DashboardView: All computed sections.
        """
        return DashboardView(
            profile=self._store.profile(),
            income=self._store.income(),
            net_worth=GetNetWorthOverviewUseCase(
                self._store,
                logger=self._logger,
            ).execute(range_months=range_months),
            csp=GetCspOverviewUseCase(self._store).execute(),
            health=GetCspHealthUseCase(
                self._store,
                logger=self._logger,
            ).execute(),
            goals=GetGoalProjectionsUseCase(self._store).execute(today=today),
            tasks=GetTasksUseCase(self._store).execute(),
        )


__all__ = ["GetDashboardUseCase", "DashboardView"]
