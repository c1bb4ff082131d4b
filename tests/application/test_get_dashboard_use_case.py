"""Tests for the dashboard read use cases."""

from datetime import date
from decimal import Decimal

import pytest

from rich_life.application.snapshot_store import SnapshotStore
from rich_life.application.use_cases.get_csp_health import GetCspHealthUseCase
from rich_life.application.use_cases.get_csp_overview import (
    GetCspOverviewUseCase,
)
from rich_life.application.use_cases.get_dashboard import GetDashboardUseCase
from rich_life.application.use_cases.get_goal_projections import (
    GetGoalProjectionsUseCase,
)
from rich_life.application.use_cases.get_net_worth_overview import (
    GetNetWorthOverviewUseCase,
)
from rich_life.application.use_cases.get_tasks import GetTasksUseCase
from rich_life.domain.errors import EmptyHistoryError


def test_net_worth_overview_logs_total(store, fake_logger) -> None:
    overview = GetNetWorthOverviewUseCase(store, logger=fake_logger).execute()

    assert overview.total == Decimal("7500")
    assert overview.trends["assets"].change == Decimal("100")
    fake_logger.info.assert_called()


def test_csp_health_reports_reference_issues(store, fake_logger) -> None:
    report = GetCspHealthUseCase(store, logger=fake_logger).execute()

    assert report.score == 50
    assert report.issues == [
        "Investments at 5% (target: 10%+)",
        "Guilt-free spending at 38% (target: 20-35%)",
    ]
    assert report.status == "Needs Attention"


def test_csp_overview_uses_net_income(store) -> None:
    overview = GetCspOverviewUseCase(store).execute()

    assert overview.net_income == Decimal("7859")
    assert overview.total_spent == Decimal("7859")


def test_goal_projections_floor_wedding_fund(store, make_snapshot) -> None:
    store.append(make_snapshot(date(2024, 1, 1), breakdown={"wedding": 9000}))

    projections = GetGoalProjectionsUseCase(store).execute(
        today=date(2026, 10, 19)
    )

    assert projections[0].current_amount == Decimal("9000")
    assert projections[0].months_remaining == 21


def test_tasks_are_returned_in_display_order(store) -> None:
    tasks = GetTasksUseCase(store).execute()

    assert [task.task for task in tasks] == ["Book venue"]


def test_dashboard_collects_every_section(store, fake_logger) -> None:
    view = GetDashboardUseCase(store, logger=fake_logger).execute(
        range_months=1,
        today=date(2026, 10, 19),
    )

    assert view.profile.name == "Test"
    assert view.income.net == Decimal("7859")
    assert len(view.net_worth.history) == 1
    assert view.health.score == 50
    assert view.goals[0].estimated_completion == date(2028, 8, 19)
    assert len(view.tasks) == 1


def test_dashboard_requires_a_snapshot(storage_factory, defaults, fake_logger) -> None:
    store = SnapshotStore(
        storage_factory('{"snapshots": [], "income": {"net": 1}}'),
        defaults=defaults,
        logger=fake_logger,
    )

    with pytest.raises(EmptyHistoryError):
        GetDashboardUseCase(store, logger=fake_logger).execute()
