"""Domain models for the CSP health check."""

from dataclasses import dataclass
from decimal import Decimal

from rich_life.domain.constants import HEALTHY_SCORE_THRESHOLD


@dataclass(frozen=True)
class CategoryHealth:
    """Outcome of checking one CSP category against its target."""

    category: str
    label: str
    percentage: Decimal
    passed: bool
    issue: str | None = None


@dataclass(frozen=True)
class CspHealthReport:
    """Health score of the latest snapshot against CSP targets.

    Attributes:
        score: 0 to 100 in steps of 25, one quarter per category.
        categories: Per-category outcomes in CSP order.
    """

    score: int
    categories: list[CategoryHealth]

    @property
    def is_healthy(self) -> bool:
        """Return True when at most one category failed."""
        return self.score >= HEALTHY_SCORE_THRESHOLD

    @property
    def issues(self) -> list[str]:
        """Return the violation messages of failing categories."""
        return [item.issue for item in self.categories if item.issue]

    @property
    def percentages(self) -> dict[str, Decimal]:
        """Return category percentages of net income."""
        return {item.category: item.percentage for item in self.categories}

    @property
    def status(self) -> str:
        """Return the display status of the score."""
        if self.score == 100:
            return "Perfect"
        if self.is_healthy:
            return "Healthy"
        return "Needs Attention"


__all__ = ["CategoryHealth", "CspHealthReport"]
