"""Goal projection in velocity and fixed-date modes."""

import math
from collections.abc import Iterable, Sequence
from datetime import date
from decimal import Decimal

from rich_life.domain.constants import (
    DAYS_PER_PROJECTION_MONTH,
    GOAL_PRIORITIES,
)
from rich_life.domain.models import Goal, GoalProjection, Snapshot
from rich_life.domain.services.metrics import (
    add_months,
    months_until_goal,
    percentage,
)


def effective_current_amount(
    goal: Goal,
    snapshots: Iterable[Snapshot],
) -> Decimal:
    """Return the current amount used for projection.

    Goals declaring ``derived_from_breakdown_field`` are floored by the sum
    of that breakdown field across every snapshot, so recorded contributions
    never make progress regress.
    """
    field_name = goal.derived_from_breakdown_field
    if not field_name:
        return goal.current_amount
    contributed = sum(
        (snapshot.breakdown_amount(field_name) for snapshot in snapshots),
        start=Decimal("0"),
    )
    return max(goal.current_amount, contributed)


def project_goal(
    goal: Goal,
    snapshots: Sequence[Snapshot],
    today: date,
) -> GoalProjection:
    """Project completion of a single goal.

    Args:
        goal: Goal configuration.
        snapshots: Full snapshot history, used for derived current amounts.
        today: Reference date for projections.

    Returns:
        GoalProjection: Velocity projection without a target date, fixed-date
        projection otherwise.
    """
    current = effective_current_amount(goal, snapshots)
    remaining = goal.target_amount - current
    progress = percentage(current, goal.target_amount)
    if goal.target_date is None:
        return _project_by_velocity(goal, current, remaining, progress, today)
    return _project_by_date(goal, current, remaining, progress, today)


def project_goals(
    goals: Iterable[Goal],
    snapshots: Sequence[Snapshot],
    today: date,
) -> list[GoalProjection]:
    """Project every goal, ordered by priority then key."""
    ordered = sorted(goals, key=lambda goal: (_priority_rank(goal), goal.key))
    return [project_goal(goal, snapshots, today) for goal in ordered]


def _project_by_velocity(
    goal: Goal,
    current: Decimal,
    remaining: Decimal,
    progress: Decimal,
    today: date,
) -> GoalProjection:
    months = months_until_goal(remaining, goal.monthly_contribution)
    estimated = _completion_date(today, months)
    return GoalProjection(
        goal=goal,
        mode="velocity",
        current_amount=current,
        remaining=remaining,
        progress_percent=progress,
        months_remaining=months,
        estimated_completion=estimated,
    )


def _project_by_date(
    goal: Goal,
    current: Decimal,
    remaining: Decimal,
    progress: Decimal,
    today: date,
) -> GoalProjection:
    days_left = (goal.target_date - today).days
    months = max(1, math.ceil(days_left / DAYS_PER_PROJECTION_MONTH))
    required = max(0, math.ceil(remaining / months))
    on_track = remaining <= 0 or goal.monthly_contribution >= required
    shortfall = None
    if not on_track:
        shortfall = Decimal(required) - goal.monthly_contribution
    return GoalProjection(
        goal=goal,
        mode="fixed_date",
        current_amount=current,
        remaining=remaining,
        progress_percent=progress,
        months_remaining=months,
        estimated_completion=goal.target_date,
        required_monthly=required,
        on_track=on_track,
        monthly_shortfall=shortfall,
    )


def _completion_date(today: date, months: int | float) -> date | None:
    """Return today plus ``months``, or None past the calendar range."""
    if months == math.inf:
        return None
    if today.year + (today.month - 1 + months) // 12 > date.max.year:
        return None
    return add_months(today, months)


def _priority_rank(goal: Goal) -> int:
    if goal.priority in GOAL_PRIORITIES:
        return GOAL_PRIORITIES.index(goal.priority)
    return len(GOAL_PRIORITIES)


__all__ = ["effective_current_amount", "project_goal", "project_goals"]
