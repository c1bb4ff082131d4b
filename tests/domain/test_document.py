"""Tests for document parsing and serialization."""

from datetime import date
from decimal import Decimal

import pytest

from rich_life.domain.services.document import (
    parse_goal,
    parse_income,
    parse_profile,
    parse_snapshot,
    parse_targets,
    parse_tasks,
    snapshot_to_dict,
    sort_tasks_for_display,
)
from rich_life.domain.services.normalization import (
    normalize_priority,
    parse_document_date,
)


def test_parse_snapshot_ignores_stored_total(snapshot_dict) -> None:
    raw = snapshot_dict("2023-12-01", breakdown={"rent": 1800, "pets": 40})
    raw["netWorth"]["total"] = 1

    snapshot = parse_snapshot(raw)

    assert snapshot.date == date(2023, 12, 1)
    assert snapshot.net_worth.total == Decimal("7500")
    assert snapshot.breakdown == {"rent": Decimal("1800"), "pets": Decimal("40")}


def test_parse_snapshot_stores_debt_as_magnitude(snapshot_dict) -> None:
    snapshot = parse_snapshot(snapshot_dict("2023-12-01", debt=-500))

    assert snapshot.net_worth.debt == Decimal("500")


def test_parse_snapshot_rejects_bad_date(snapshot_dict) -> None:
    with pytest.raises(ValueError, match="Invalid snapshot date"):
        parse_snapshot(snapshot_dict("someday"))


def test_snapshot_to_dict_writes_derived_total(snapshot_dict) -> None:
    raw = snapshot_dict("2023-12-01", breakdown={"dining": 12.5})

    payload = snapshot_to_dict(parse_snapshot(raw))

    assert payload["netWorth"]["total"] == 7500
    assert payload["breakdown"] == {"dining": 12.5}
    assert payload["csp"]["guiltFreeSpending"] == 2999


def test_snapshot_to_dict_omits_empty_breakdown(snapshot_dict) -> None:
    payload = snapshot_to_dict(parse_snapshot(snapshot_dict("2023-12-01")))

    assert "breakdown" not in payload


def test_parse_income_and_profile() -> None:
    income = parse_income({"gross": 12639, "net": 7859.5, "lastUpdated": "2023-12-01"})
    profile = parse_profile(None)

    assert income.net == Decimal("7859.5")
    assert income.last_updated == date(2023, 12, 1)
    assert profile.currency == "USD"
    assert profile.income_frequency == "monthly"


def test_parse_targets_treats_missing_category_as_unconstrained() -> None:
    targets = parse_targets({"fixedCosts": {"min": 50, "max": 60, "label": "Fixed"}})

    assert targets.fixed_costs.max == Decimal("60")
    assert targets.fixed_costs.label == "Fixed"
    assert targets.investments.min == Decimal("0")
    assert targets.investments.max == Decimal("100")
    assert targets.guilt_free_spending.label == "Guilt-Free"


def test_parse_goal_reads_optional_fields() -> None:
    goal = parse_goal(
        "wedding",
        {
            "name": "Wedding Fund",
            "targetAmount": 30000,
            "currentAmount": 8500,
            "monthlyContribution": 1000,
            "priority": "HIGH",
            "targetDate": "2027-09-01",
            "startDate": "2023-01-01",
            "derivedFromBreakdownField": "wedding",
        },
    )

    assert goal.priority == "high"
    assert goal.target_date == date(2027, 9, 1)
    assert goal.start_date == date(2023, 1, 1)
    assert goal.derived_from_breakdown_field == "wedding"
    assert goal.icon == "default"


def test_tasks_sorted_open_first_then_priority() -> None:
    tasks = parse_tasks(
        [
            {"id": 1, "task": "Venue", "completed": True, "priority": "high"},
            {"id": 2, "task": "Flowers", "completed": False, "priority": "low"},
            {"id": 3, "task": "Photographer", "completed": False, "priority": "high"},
            {"id": 4, "task": "Cake", "completed": False},
        ]
    )

    ordered = sort_tasks_for_display(tasks)

    assert [task.id for task in ordered] == [3, 4, 2, 1]


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2023-12-01", date(2023, 12, 1)),
        ("2023-12-01T10:00:00Z", date(2023, 12, 1)),
        ("Dec 2023", date(2023, 12, 1)),
        ("December 2023", date(2023, 12, 1)),
        ("2023-12", date(2023, 12, 1)),
        ("not a date", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_document_date(value, expected) -> None:
    assert parse_document_date(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [(" High ", "high"), ("low", "low"), ("urgent", "medium"), (None, "medium")],
)
def test_normalize_priority(value, expected) -> None:
    assert normalize_priority(value) == expected
