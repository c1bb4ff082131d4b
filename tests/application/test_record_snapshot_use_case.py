"""Tests for recording snapshots and updating income."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from rich_life.application.use_cases.record_snapshot import (
    RecordSnapshotUseCase,
    SnapshotEntry,
)
from rich_life.application.use_cases.update_income import UpdateIncomeUseCase


def test_record_snapshot_derives_total_and_appends(store) -> None:
    usage_logger = MagicMock()
    entry = SnapshotEntry(
        date=date(2024, 1, 1),
        assets="1000",
        investments=50000.5,
        savings=20000,
        debt=-2000,
        fixed_costs=3000,
        csp_investments=800,
        savings_goals=1000,
        guilt_free_spending=2000,
        breakdown={"wedding": 1000},
    )

    snapshot = RecordSnapshotUseCase(store, usage_logger=usage_logger).execute(
        entry
    )

    assert snapshot.net_worth.debt == Decimal("2000")
    assert snapshot.net_worth.total == Decimal("69000.5")
    assert store.latest() == snapshot
    usage_logger.info.assert_called_once()


def test_record_snapshot_defaults_missing_amounts_to_zero(store) -> None:
    snapshot = RecordSnapshotUseCase(store, usage_logger=MagicMock()).execute(
        SnapshotEntry(date=date(2024, 1, 1), assets=10)
    )

    assert snapshot.csp.fixed_costs == Decimal("0")
    assert snapshot.net_worth.total == Decimal("10")


def test_update_income_applies_positive_net(store) -> None:
    usage_logger = MagicMock()

    updated = UpdateIncomeUseCase(store, usage_logger=usage_logger).execute(
        "8200",
        gross=14000,
        today=date(2026, 10, 19),
    )

    assert updated is True
    assert store.income().net == Decimal("8200")
    assert store.income().gross == Decimal("14000")
    usage_logger.info.assert_called_once_with("Net income updated to 8200")


def test_update_income_ignores_non_positive_net(store, storage) -> None:
    usage_logger = MagicMock()

    updated = UpdateIncomeUseCase(store, usage_logger=usage_logger).execute(0)

    assert updated is False
    assert storage.writes == []
    usage_logger.info.assert_not_called()
