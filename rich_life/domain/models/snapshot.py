"""Domain models for dated financial snapshots."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class NetWorth:
    """Net worth components of a snapshot.

    Attributes:
        assets: Value of physical and cash assets.
        investments: Value of investment accounts.
        savings: Value of savings accounts.
        debt: Outstanding debt stored as a positive magnitude.
    """

    assets: Decimal
    investments: Decimal
    savings: Decimal
    debt: Decimal

    @property
    def total(self) -> Decimal:
        """Return assets plus investments plus savings minus debt."""
        return self.assets + self.investments + self.savings - self.debt


@dataclass(frozen=True)
class CspTotals:
    """Monthly Conscious Spending Plan totals per category."""

    fixed_costs: Decimal
    investments: Decimal
    savings_goals: Decimal
    guilt_free_spending: Decimal

    def by_category(self) -> dict[str, Decimal]:
        """Return totals keyed by the persisted category name."""
        return {
            "fixedCosts": self.fixed_costs,
            "investments": self.investments,
            "savingsGoals": self.savings_goals,
            "guiltFreeSpending": self.guilt_free_spending,
        }


@dataclass(frozen=True)
class Snapshot:
    """A point-in-time financial record."""

    date: date
    net_worth: NetWorth
    csp: CspTotals
    breakdown: dict[str, Decimal] = field(default_factory=dict)

    def breakdown_amount(self, field_name: str) -> Decimal:
        """Return the itemized amount for a breakdown field, zero if absent."""
        return self.breakdown.get(field_name, Decimal("0"))


@dataclass(frozen=True)
class Income:
    """Income figures used as the percentage denominator."""

    gross: Decimal
    net: Decimal
    last_updated: date | None = None


@dataclass(frozen=True)
class Profile:
    """Optional profile information shown by the dashboard."""

    name: str = ""
    currency: str = "USD"
    income_frequency: str = "monthly"


__all__ = ["NetWorth", "CspTotals", "Snapshot", "Income", "Profile"]
