"""Shared fixtures for the dashboard tests."""

import copy
from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from rich_life.application.snapshot_store import SnapshotStore
from rich_life.domain.models import (
    CspTargets,
    CspTotals,
    NetWorth,
    Snapshot,
    TargetRange,
)
from rich_life.infrastructure.logging import logger as logger_module


class InMemoryStorage:
    """DocumentStoragePort fake keeping the payload in memory."""

    def __init__(self, payload: str | None = None) -> None:
        self.payload = payload
        self.writes: list[str] = []

    def read(self) -> str | None:
        return self.payload

    def write(self, payload: str) -> None:
        self.payload = payload
        self.writes.append(payload)


def snapshot_dict(
    day: str,
    assets: int = 1000,
    investments: int = 5000,
    savings: int = 2000,
    debt: int = 500,
    csp: dict | None = None,
    breakdown: dict | None = None,
) -> dict:
    payload = {
        "date": day,
        "netWorth": {
            "assets": assets,
            "investments": investments,
            "savings": savings,
            "debt": debt,
            "total": assets + investments + savings - debt,
        },
        "csp": csp
        or {
            "fixedCosts": 2935,
            "investments": 425,
            "savingsGoals": 1500,
            "guiltFreeSpending": 2999,
        },
    }
    if breakdown is not None:
        payload["breakdown"] = breakdown
    return payload


def make_snapshot(
    day: date,
    total_assets: int = 1000,
    debt: int = 0,
    breakdown: dict | None = None,
) -> Snapshot:
    return Snapshot(
        date=day,
        net_worth=NetWorth(
            assets=Decimal(total_assets),
            investments=Decimal("0"),
            savings=Decimal("0"),
            debt=Decimal(debt),
        ),
        csp=CspTotals(
            fixed_costs=Decimal("2935"),
            investments=Decimal("425"),
            savings_goals=Decimal("1500"),
            guilt_free_spending=Decimal("2999"),
        ),
        breakdown={k: Decimal(v) for k, v in (breakdown or {}).items()},
    )


DEFAULTS = {
    "schemaVersion": 3,
    "profile": {"name": "Test", "currency": "USD", "incomeFrequency": "monthly"},
    "income": {"gross": 12639, "net": 7859, "lastUpdated": "2023-12-01"},
    "targets": {
        "fixedCosts": {"min": 50, "max": 60, "label": "Fixed Costs"},
        "investments": {"min": 10, "max": 10, "label": "Investments"},
        "savingsGoals": {"min": 5, "max": 10, "label": "Savings Goals"},
        "guiltFreeSpending": {"min": 20, "max": 35, "label": "Guilt-Free"},
    },
    "snapshots": [
        snapshot_dict("2023-11-01", assets=900),
        snapshot_dict("2023-12-01"),
    ],
    "goals": {
        "wedding": {
            "name": "Wedding Fund",
            "icon": "ring",
            "targetAmount": 30000,
            "currentAmount": 8500,
            "monthlyContribution": 1000,
            "priority": "high",
            "notes": "",
            "derivedFromBreakdownField": "wedding",
        }
    },
    "weddingTasks": [
        {"id": 1, "task": "Book venue", "completed": False, "priority": "high"}
    ],
}


@pytest.fixture(autouse=True)
def _silence_singleton_loggers(monkeypatch):
    """Keep use cases that default to the shared loggers off the log files."""
    monkeypatch.setattr(logger_module.AppLogger, "_instance", MagicMock())
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", MagicMock())


@pytest.fixture
def defaults() -> dict:
    return copy.deepcopy(DEFAULTS)


@pytest.fixture
def default_targets() -> CspTargets:
    return CspTargets(
        fixed_costs=TargetRange(Decimal("50"), Decimal("60"), "Fixed Costs"),
        investments=TargetRange(Decimal("10"), Decimal("10"), "Investments"),
        savings_goals=TargetRange(Decimal("5"), Decimal("10"), "Savings Goals"),
        guilt_free_spending=TargetRange(
            Decimal("20"),
            Decimal("35"),
            "Guilt-Free",
        ),
    )


@pytest.fixture
def fake_logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def store(storage, defaults, fake_logger) -> SnapshotStore:
    return SnapshotStore(storage, defaults=defaults, logger=fake_logger)


@pytest.fixture(name="snapshot_dict")
def snapshot_dict_fixture():
    return snapshot_dict


@pytest.fixture(name="make_snapshot")
def make_snapshot_fixture():
    return make_snapshot


@pytest.fixture
def storage_factory():
    return InMemoryStorage
