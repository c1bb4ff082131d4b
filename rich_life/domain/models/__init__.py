"""Domain models package."""

from .goals import Goal, GoalPriority, GoalProjection, ProjectionMode
from .health import CategoryHealth, CspHealthReport
from .snapshot import CspTotals, Income, NetWorth, Profile, Snapshot
from .targets import CspTargets, TargetRange
from .tasks import WeddingTask
from .trends import (
    AllTimeStats,
    CspCategoryOverview,
    CspOverview,
    NetWorthOverview,
    NetWorthPoint,
    Trend,
    TrendDirection,
)

__all__ = [
    "AllTimeStats",
    "CategoryHealth",
    "CspCategoryOverview",
    "CspHealthReport",
    "CspOverview",
    "CspTargets",
    "CspTotals",
    "Goal",
    "GoalPriority",
    "GoalProjection",
    "Income",
    "NetWorth",
    "NetWorthOverview",
    "NetWorthPoint",
    "Profile",
    "ProjectionMode",
    "Snapshot",
    "TargetRange",
    "Trend",
    "TrendDirection",
    "WeddingTask",
]
