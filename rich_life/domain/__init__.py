"""Domain package for business rules and core models."""

from .constants import BREAKDOWN_FIELDS, CSP_CATEGORIES, SCHEMA_VERSION
from .errors import DocumentValidationError, EmptyHistoryError
from .models import (
    CspHealthReport,
    CspTargets,
    CspTotals,
    Goal,
    GoalProjection,
    Income,
    NetWorth,
    Snapshot,
    TargetRange,
    Trend,
)
from .services import (
    evaluate_csp_health,
    months_until_goal,
    percentage,
    project_goals,
    reconcile_document,
    trend,
)

__all__ = [
    "BREAKDOWN_FIELDS",
    "CSP_CATEGORIES",
    "SCHEMA_VERSION",
    "DocumentValidationError",
    "EmptyHistoryError",
    "CspHealthReport",
    "CspTargets",
    "CspTotals",
    "Goal",
    "GoalProjection",
    "Income",
    "NetWorth",
    "Snapshot",
    "TargetRange",
    "Trend",
    "evaluate_csp_health",
    "months_until_goal",
    "percentage",
    "project_goals",
    "reconcile_document",
    "trend",
]
