"""Pure metric helpers: percentages, trends, and goal horizons."""

import calendar
import math
from collections.abc import Sequence
from datetime import date
from decimal import Decimal

from rich_life.domain.models import Snapshot, Trend

_HUNDRED = Decimal("100")
_ZERO = Decimal("0")


def percentage(part: Decimal, whole: Decimal) -> Decimal:
    """Return ``part`` as a percentage of ``whole``.

    A zero ``whole`` yields zero rather than an error: a net income of zero
    is a degenerate but legitimate configuration.
    """
    if whole == 0:
        return _ZERO
    return (part / whole) * _HUNDRED


def trend(current: Decimal, previous: Decimal | None) -> Trend:
    """Return the change from ``previous`` to ``current``.

    Args:
        current: Latest value.
        previous: Earlier value, or None when no earlier value exists.

    Returns:
        Trend: Neutral zero trend when ``previous`` is missing or zero.
    """
    if previous is None or previous == 0:
        return Trend(change=_ZERO, percent=_ZERO, direction="neutral")
    change = current - previous
    percent = (change / abs(previous)) * _HUNDRED
    if change > 0:
        direction = "up"
    elif change < 0:
        direction = "down"
    else:
        direction = "neutral"
    return Trend(change=change, percent=percent, direction=direction)


def months_until_goal(
    remaining: Decimal,
    monthly_contribution: Decimal,
) -> int | float:
    """Return whole months needed to cover ``remaining``.

    Returns:
        int | float: ``math.inf`` when the contribution is not positive,
        otherwise a non-negative month count rounded up.
    """
    if monthly_contribution <= 0:
        return math.inf
    return max(0, math.ceil(remaining / monthly_contribution))


def add_months(day: date, months: int) -> date:
    """Add calendar months, clamping to the last day of the target month."""
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def select_history_window(
    snapshots: Sequence[Snapshot],
    months: int,
) -> list[Snapshot]:
    """Return the most recent ``months`` snapshots, or all when not positive."""
    if months <= 0 or len(snapshots) <= months:
        return list(snapshots)
    return list(snapshots[-months:])


__all__ = [
    "percentage",
    "trend",
    "months_until_goal",
    "add_months",
    "select_history_window",
]
