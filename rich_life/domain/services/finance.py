"""Domain services for net worth and CSP overviews."""

from collections.abc import Sequence
from decimal import Decimal

from rich_life.domain.constants import NET_WORTH_COMPONENTS
from rich_life.domain.errors import EmptyHistoryError
from rich_life.domain.models import (
    AllTimeStats,
    CspCategoryOverview,
    CspOverview,
    CspTargets,
    NetWorthOverview,
    NetWorthPoint,
    Snapshot,
)
from rich_life.domain.services.metrics import (
    percentage,
    select_history_window,
    trend,
)


def compute_net_worth_overview(
    snapshots: Sequence[Snapshot],
    *,
    range_months: int = 0,
) -> NetWorthOverview:
    """Compute latest net worth, its trends and all-time statistics.

    Args:
        snapshots: Snapshot history sorted by ascending date.
        range_months: Number of recent snapshots kept in the chart history;
            0 keeps all of them.

    Returns:
        NetWorthOverview: Latest components, period-over-period trends and
        all-time statistics.

    Raises:
        EmptyHistoryError: If ``snapshots`` is empty.
    """
    if not snapshots:
        raise EmptyHistoryError("No snapshots recorded yet.")
    latest = snapshots[-1]
    previous = snapshots[-2] if len(snapshots) > 1 else None

    components = _components(latest)
    previous_components = _components(previous) if previous else {}
    trends = {
        name: trend(value, previous_components.get(name))
        for name, value in components.items()
    }
    history = [
        NetWorthPoint(date=snapshot.date, total=snapshot.net_worth.total)
        for snapshot in select_history_window(snapshots, range_months)
    ]
    return NetWorthOverview(
        as_of=latest.date,
        total=latest.net_worth.total,
        components={
            name: value for name, value in components.items() if name != "total"
        },
        trends=trends,
        has_previous=previous is not None,
        all_time=compute_all_time_stats(snapshots),
        history=history,
    )


def compute_all_time_stats(snapshots: Sequence[Snapshot]) -> AllTimeStats:
    """Compute statistics over the whole snapshot history.

    Args:
        snapshots: Snapshot history sorted by ascending date.

    Returns:
        AllTimeStats: First-to-latest change, peak and average change.

    Raises:
        EmptyHistoryError: If ``snapshots`` is empty.
    """
    if not snapshots:
        raise EmptyHistoryError("No snapshots recorded yet.")
    first = snapshots[0]
    latest = snapshots[-1]
    peak = max(snapshots, key=lambda snapshot: snapshot.net_worth.total)
    intervals = len(snapshots) - 1
    change = latest.net_worth.total - first.net_worth.total
    average = change / intervals if intervals else Decimal("0")
    return AllTimeStats(
        first_date=first.date,
        latest_date=latest.date,
        snapshot_count=len(snapshots),
        change=trend(
            latest.net_worth.total,
            first.net_worth.total if intervals else None,
        ),
        peak_total=peak.net_worth.total,
        peak_date=peak.date,
        average_change=average,
    )


def compute_csp_overview(
    latest: Snapshot,
    previous: Snapshot | None,
    net_income: Decimal,
    targets: CspTargets,
) -> CspOverview:
    """Compute CSP amounts, shares of income and trends.

    Args:
        latest: Most recent snapshot.
        previous: Snapshot before it, if any.
        net_income: Monthly net income.
        targets: Target ranges, used for labels.

    Returns:
        CspOverview: Category details in CSP order.
    """
    labels = targets.by_category()
    previous_amounts = previous.csp.by_category() if previous else {}
    categories = [
        CspCategoryOverview(
            category=category,
            label=labels[category].label,
            amount=amount,
            percentage=percentage(amount, net_income),
            trend=trend(amount, previous_amounts.get(category)),
        )
        for category, amount in latest.csp.by_category().items()
    ]
    return CspOverview(
        as_of=latest.date,
        net_income=net_income,
        categories=categories,
    )


def _components(snapshot: Snapshot) -> dict[str, Decimal]:
    net_worth = snapshot.net_worth
    values = {name: getattr(net_worth, name) for name in NET_WORTH_COMPONENTS}
    values["total"] = net_worth.total
    return values


__all__ = [
    "compute_net_worth_overview",
    "compute_all_time_stats",
    "compute_csp_overview",
]
