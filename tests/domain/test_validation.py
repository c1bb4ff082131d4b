"""Tests for snapshot validation warnings."""

from datetime import date

from rich_life.domain.services.validation import (
    validate_breakdown_totals,
    validate_snapshot_amounts,
)


def test_snapshot_without_breakdown_is_valid(make_snapshot, fake_logger) -> None:
    snapshot = make_snapshot(date(2023, 12, 1))

    assert validate_breakdown_totals(snapshot, fake_logger) is True
    assert validate_snapshot_amounts(snapshot, fake_logger) is True
    fake_logger.warning.assert_not_called()


def test_matching_breakdown_is_valid(make_snapshot, fake_logger) -> None:
    snapshot = make_snapshot(
        date(2023, 12, 1),
        breakdown={"rent": 2000, "groceries": 935, "wedding": 1500},
    )

    assert validate_breakdown_totals(snapshot, fake_logger) is True


def test_mismatched_breakdown_warns(make_snapshot, fake_logger) -> None:
    snapshot = make_snapshot(date(2023, 12, 1), breakdown={"dining": 100})

    assert validate_breakdown_totals(snapshot, fake_logger) is False
    message = fake_logger.warning.call_args.args[0]
    assert "guiltFreeSpending" in message
    assert "expected 2999" in message


def test_unknown_breakdown_fields_are_ignored(make_snapshot, fake_logger) -> None:
    snapshot = make_snapshot(date(2023, 12, 1), breakdown={"pets": 40})

    assert validate_breakdown_totals(snapshot, fake_logger) is True


def test_negative_amount_warns(make_snapshot, fake_logger) -> None:
    snapshot = make_snapshot(date(2023, 12, 1), total_assets=-5)

    assert validate_snapshot_amounts(snapshot, fake_logger) is False
    fake_logger.warning.assert_called_once()
