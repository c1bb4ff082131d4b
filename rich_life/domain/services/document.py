"""Mapping between persisted JSON documents and domain models."""

from collections.abc import Iterable, Mapping
from typing import Any

from rich_life.domain.constants import CSP_CATEGORIES, GOAL_PRIORITIES
from rich_life.domain.models import (
    CspTargets,
    CspTotals,
    Goal,
    Income,
    NetWorth,
    Profile,
    Snapshot,
    TargetRange,
    WeddingTask,
)
from rich_life.domain.services.normalization import (
    normalize_priority,
    parse_document_date,
)
from rich_life.utils.decimal_utils import coerce_decimal, to_json_number

_CATEGORY_LABELS = {
    "fixedCosts": "Fixed Costs",
    "investments": "Investments",
    "savingsGoals": "Savings Goals",
    "guiltFreeSpending": "Guilt-Free",
}


def parse_snapshot(raw: Mapping[str, Any]) -> Snapshot:
    """Build a Snapshot from its persisted form.

    The stored ``netWorth.total`` is ignored; it is always derived.

    Raises:
        ValueError: If the snapshot date cannot be parsed.
    """
    snapshot_date = parse_document_date(raw.get("date"))
    if snapshot_date is None:
        raise ValueError(f"Invalid snapshot date: {raw.get('date')!r}")
    net_worth = raw.get("netWorth") or {}
    csp = raw.get("csp") or {}
    breakdown = raw.get("breakdown") or {}
    return Snapshot(
        date=snapshot_date,
        net_worth=NetWorth(
            assets=coerce_decimal(net_worth.get("assets")),
            investments=coerce_decimal(net_worth.get("investments")),
            savings=coerce_decimal(net_worth.get("savings")),
            debt=abs(coerce_decimal(net_worth.get("debt"))),
        ),
        csp=CspTotals(
            fixed_costs=coerce_decimal(csp.get("fixedCosts")),
            investments=coerce_decimal(csp.get("investments")),
            savings_goals=coerce_decimal(csp.get("savingsGoals")),
            guilt_free_spending=coerce_decimal(csp.get("guiltFreeSpending")),
        ),
        breakdown={
            name: coerce_decimal(value) for name, value in breakdown.items()
        },
    )


def snapshot_to_dict(snapshot: Snapshot) -> dict[str, Any]:
    """Serialize a Snapshot into its persisted form."""
    net_worth = snapshot.net_worth
    payload: dict[str, Any] = {
        "date": snapshot.date.isoformat(),
        "netWorth": {
            "assets": to_json_number(net_worth.assets),
            "investments": to_json_number(net_worth.investments),
            "savings": to_json_number(net_worth.savings),
            "debt": to_json_number(net_worth.debt),
            "total": to_json_number(net_worth.total),
        },
        "csp": {
            name: to_json_number(value)
            for name, value in snapshot.csp.by_category().items()
        },
    }
    if snapshot.breakdown:
        payload["breakdown"] = {
            name: to_json_number(value)
            for name, value in snapshot.breakdown.items()
        }
    return payload


def parse_income(raw: Mapping[str, Any]) -> Income:
    """Build Income from its persisted form."""
    return Income(
        gross=coerce_decimal(raw.get("gross")),
        net=coerce_decimal(raw.get("net")),
        last_updated=parse_document_date(raw.get("lastUpdated")),
    )


def parse_profile(raw: Mapping[str, Any] | None) -> Profile:
    """Build a Profile, falling back to defaults for missing fields."""
    raw = raw or {}
    return Profile(
        name=raw.get("name") or "",
        currency=raw.get("currency") or "USD",
        income_frequency=raw.get("incomeFrequency") or "monthly",
    )


def parse_targets(raw: Mapping[str, Any]) -> CspTargets:
    """Build CSP targets, treating a missing category as unconstrained."""
    ranges = {
        category: _parse_target(category, raw.get(category) or {})
        for category in CSP_CATEGORIES
    }
    return CspTargets(
        fixed_costs=ranges["fixedCosts"],
        investments=ranges["investments"],
        savings_goals=ranges["savingsGoals"],
        guilt_free_spending=ranges["guiltFreeSpending"],
    )


def _parse_target(category: str, raw: Mapping[str, Any]) -> TargetRange:
    low = coerce_decimal(raw.get("min"))
    high = coerce_decimal(raw.get("max", 100))
    return TargetRange(
        min=low,
        max=max(low, high),
        label=raw.get("label") or _CATEGORY_LABELS[category],
        color=raw.get("color"),
    )


def parse_goal(key: str, raw: Mapping[str, Any]) -> Goal:
    """Build a Goal from its persisted form."""
    return Goal(
        key=key,
        name=raw.get("name") or key,
        icon=raw.get("icon") or "default",
        target_amount=coerce_decimal(raw.get("targetAmount")),
        current_amount=coerce_decimal(raw.get("currentAmount")),
        monthly_contribution=coerce_decimal(raw.get("monthlyContribution")),
        priority=normalize_priority(raw.get("priority")),
        notes=raw.get("notes") or "",
        target_date=parse_document_date(raw.get("targetDate")),
        start_date=parse_document_date(raw.get("startDate")),
        derived_from_breakdown_field=raw.get("derivedFromBreakdownField"),
    )


def parse_goals(raw: Mapping[str, Any]) -> list[Goal]:
    """Build every goal of the goals mapping, in document order."""
    return [parse_goal(key, value) for key, value in raw.items()]


def parse_tasks(raw: Iterable[Mapping[str, Any]]) -> list[WeddingTask]:
    """Build checklist tasks from their persisted form."""
    return [
        WeddingTask(
            id=item.get("id", index),
            task=item.get("task") or "",
            completed=bool(item.get("completed")),
            priority=normalize_priority(item.get("priority")),
            due_date=parse_document_date(item.get("dueDate")),
            notes=item.get("notes") or "",
        )
        for index, item in enumerate(raw)
    ]


def sort_tasks_for_display(tasks: Iterable[WeddingTask]) -> list[WeddingTask]:
    """Order tasks with open items first, then by priority."""
    return sorted(
        tasks,
        key=lambda task: (
            task.completed,
            GOAL_PRIORITIES.index(task.priority),
            str(task.id),
        ),
    )


__all__ = [
    "parse_snapshot",
    "snapshot_to_dict",
    "parse_income",
    "parse_profile",
    "parse_targets",
    "parse_goal",
    "parse_goals",
    "parse_tasks",
    "sort_tasks_for_display",
]
