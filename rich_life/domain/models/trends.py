"""Domain models for period-over-period and all-time trends."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Literal

TrendDirection = Literal["up", "down", "neutral"]


@dataclass(frozen=True)
class Trend:
    """Change between two values."""

    change: Decimal
    percent: Decimal
    direction: TrendDirection


@dataclass(frozen=True)
class NetWorthPoint:
    """Net worth total at a snapshot date, for charting."""

    date: date
    total: Decimal


@dataclass(frozen=True)
class AllTimeStats:
    """Statistics over the whole snapshot history."""

    first_date: date
    latest_date: date
    snapshot_count: int
    change: Trend
    peak_total: Decimal
    peak_date: date
    average_change: Decimal


@dataclass(frozen=True)
class NetWorthOverview:
    """Latest net worth with its trends.

    ``trends`` holds period-over-period trends keyed by ``total`` and each
    net worth component.
    """

    as_of: date
    total: Decimal
    components: dict[str, Decimal]
    trends: dict[str, Trend]
    has_previous: bool
    all_time: AllTimeStats
    history: list[NetWorthPoint]


@dataclass(frozen=True)
class CspCategoryOverview:
    """Amount, share of income and trend of one CSP category."""

    category: str
    label: str
    amount: Decimal
    percentage: Decimal
    trend: Trend


@dataclass(frozen=True)
class CspOverview:
    """CSP breakdown of the latest snapshot."""

    as_of: date
    net_income: Decimal
    categories: list[CspCategoryOverview]

    @property
    def total_spent(self) -> Decimal:
        """Return the sum of all category amounts."""
        return sum(
            (item.amount for item in self.categories),
            start=Decimal("0"),
        )


__all__ = [
    "Trend",
    "TrendDirection",
    "NetWorthPoint",
    "AllTimeStats",
    "NetWorthOverview",
    "CspCategoryOverview",
    "CspOverview",
]
