"""Tests for net worth and CSP overviews."""

from dataclasses import replace
from datetime import date
from decimal import Decimal

import pytest

from rich_life.domain.errors import EmptyHistoryError
from rich_life.domain.models import CspTotals
from rich_life.domain.services.finance import (
    compute_all_time_stats,
    compute_csp_overview,
    compute_net_worth_overview,
)


@pytest.fixture
def history(make_snapshot) -> list:
    return [
        make_snapshot(date(2023, 10, 1), total_assets=1000),
        make_snapshot(date(2023, 11, 1), total_assets=1500),
        make_snapshot(date(2023, 12, 1), total_assets=1300, debt=100),
    ]


def test_net_worth_overview_reports_latest_and_trends(history) -> None:
    overview = compute_net_worth_overview(history)

    assert overview.as_of == date(2023, 12, 1)
    assert overview.total == Decimal("1200")
    assert overview.components == {
        "assets": Decimal("1300"),
        "investments": Decimal("0"),
        "savings": Decimal("0"),
        "debt": Decimal("100"),
    }
    assert overview.has_previous is True
    total_trend = overview.trends["total"]
    assert total_trend.change == Decimal("-300")
    assert total_trend.percent == Decimal("-20")
    assert total_trend.direction == "down"
    assert overview.trends["investments"].direction == "neutral"


def test_net_worth_overview_limits_chart_history(history) -> None:
    overview = compute_net_worth_overview(history, range_months=2)

    assert [point.date for point in overview.history] == [
        date(2023, 11, 1),
        date(2023, 12, 1),
    ]
    assert overview.all_time.snapshot_count == 3


def test_net_worth_overview_single_snapshot_has_neutral_trends(
    make_snapshot,
) -> None:
    overview = compute_net_worth_overview([make_snapshot(date(2023, 12, 1))])

    assert overview.has_previous is False
    assert {t.direction for t in overview.trends.values()} == {"neutral"}
    assert overview.all_time.change.direction == "neutral"
    assert overview.all_time.average_change == Decimal("0")


def test_net_worth_overview_requires_history() -> None:
    with pytest.raises(EmptyHistoryError):
        compute_net_worth_overview([])


def test_all_time_stats(history) -> None:
    stats = compute_all_time_stats(history)

    assert stats.first_date == date(2023, 10, 1)
    assert stats.latest_date == date(2023, 12, 1)
    assert stats.change.change == Decimal("200")
    assert stats.change.percent == Decimal("20")
    assert stats.peak_total == Decimal("1500")
    assert stats.peak_date == date(2023, 11, 1)
    assert stats.average_change == Decimal("100")


def test_csp_overview_percentages_and_trends(
    make_snapshot,
    default_targets,
) -> None:
    latest = make_snapshot(date(2023, 12, 1))
    previous = replace(
        latest,
        date=date(2023, 11, 1),
        csp=CspTotals(
            fixed_costs=Decimal("2935"),
            investments=Decimal("500"),
            savings_goals=Decimal("1000"),
            guilt_free_spending=Decimal("2999"),
        ),
    )

    overview = compute_csp_overview(
        latest,
        previous,
        Decimal("7859"),
        default_targets,
    )

    by_category = {item.category: item for item in overview.categories}
    assert list(by_category) == [
        "fixedCosts",
        "investments",
        "savingsGoals",
        "guiltFreeSpending",
    ]
    assert round(by_category["fixedCosts"].percentage, 1) == Decimal("37.3")
    assert by_category["investments"].label == "Investments"
    assert by_category["investments"].trend.change == Decimal("-75")
    assert by_category["savingsGoals"].trend.percent == Decimal("50")
    assert by_category["fixedCosts"].trend.direction == "neutral"
    assert overview.total_spent == Decimal("7859")


def test_csp_overview_without_previous_or_income(
    make_snapshot,
    default_targets,
) -> None:
    overview = compute_csp_overview(
        make_snapshot(date(2023, 12, 1)),
        None,
        Decimal("0"),
        default_targets,
    )

    assert all(item.percentage == 0 for item in overview.categories)
    assert all(item.trend.direction == "neutral" for item in overview.categories)
