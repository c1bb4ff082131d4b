"""Application use cases package."""

from .get_csp_health import GetCspHealthUseCase, CspHealthReport
from .get_csp_overview import GetCspOverviewUseCase, CspOverview
from .get_dashboard import GetDashboardUseCase, DashboardView
from .get_goal_projections import GetGoalProjectionsUseCase, GoalProjection
from .get_net_worth_overview import (
    GetNetWorthOverviewUseCase,
    NetWorthOverview,
)
from .get_tasks import GetTasksUseCase
from .import_export import (
    ExportDocumentUseCase,
    ImportDocumentUseCase,
    ImportResult,
)
from .record_snapshot import RecordSnapshotUseCase, SnapshotEntry
from .update_income import UpdateIncomeUseCase

__all__ = [
    "GetCspHealthUseCase",
    "CspHealthReport",
    "GetCspOverviewUseCase",
    "CspOverview",
    "GetDashboardUseCase",
    "DashboardView",
    "GetGoalProjectionsUseCase",
    "GoalProjection",
    "GetNetWorthOverviewUseCase",
    "NetWorthOverview",
    "GetTasksUseCase",
    "ExportDocumentUseCase",
    "ImportDocumentUseCase",
    "ImportResult",
    "RecordSnapshotUseCase",
    "SnapshotEntry",
    "UpdateIncomeUseCase",
]
