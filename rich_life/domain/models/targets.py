"""Domain models for CSP target ranges."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class TargetRange:
    """Percentage bounds of net income for a CSP category."""

    min: Decimal
    max: Decimal
    label: str
    color: str | None = None

    def describe(self) -> str:
        """Return a short human-readable description of the range."""
        low = _format_bound(self.min)
        high = _format_bound(self.max)
        if low == high:
            return f"{low}%+"
        return f"{low}-{high}%"


@dataclass(frozen=True)
class CspTargets:
    """Target ranges for the four CSP categories."""

    fixed_costs: TargetRange
    investments: TargetRange
    savings_goals: TargetRange
    guilt_free_spending: TargetRange

    def by_category(self) -> dict[str, TargetRange]:
        """Return ranges keyed by the persisted category name."""
        return {
            "fixedCosts": self.fixed_costs,
            "investments": self.investments,
            "savingsGoals": self.savings_goals,
            "guiltFreeSpending": self.guilt_free_spending,
        }


def _format_bound(value: Decimal) -> str:
    if value == value.to_integral_value():
        return str(int(value))
    return f"{value:.1f}"


__all__ = ["TargetRange", "CspTargets"]
