"""Domain services package."""

from .document import (
    parse_goal,
    parse_goals,
    parse_income,
    parse_profile,
    parse_snapshot,
    parse_targets,
    parse_tasks,
    snapshot_to_dict,
    sort_tasks_for_display,
)
from .finance import (
    compute_all_time_stats,
    compute_csp_overview,
    compute_net_worth_overview,
)
from .goals import effective_current_amount, project_goal, project_goals
from .health import evaluate_csp_health
from .metrics import (
    add_months,
    months_until_goal,
    percentage,
    select_history_window,
    trend,
)
from .normalization import normalize_priority, parse_document_date
from .schema import (
    MIGRATIONS,
    Migration,
    merge_goal_defaults,
    reconcile_document,
    validate_document,
)
from .validation import validate_breakdown_totals, validate_snapshot_amounts

__all__ = [
    "MIGRATIONS",
    "Migration",
    "add_months",
    "compute_all_time_stats",
    "compute_csp_overview",
    "compute_net_worth_overview",
    "effective_current_amount",
    "evaluate_csp_health",
    "merge_goal_defaults",
    "months_until_goal",
    "normalize_priority",
    "parse_document_date",
    "parse_goal",
    "parse_goals",
    "parse_income",
    "parse_profile",
    "parse_snapshot",
    "parse_targets",
    "parse_tasks",
    "percentage",
    "project_goal",
    "project_goals",
    "reconcile_document",
    "select_history_window",
    "snapshot_to_dict",
    "sort_tasks_for_display",
    "trend",
    "validate_breakdown_totals",
    "validate_document",
    "validate_snapshot_amounts",
]
