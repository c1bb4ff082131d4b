"""CSP health scoring against configurable target ranges."""

from decimal import ROUND_HALF_UP, Decimal

from rich_life.domain.constants import POINTS_PER_CATEGORY
from rich_life.domain.models import (
    CategoryHealth,
    CspHealthReport,
    CspTargets,
    CspTotals,
    TargetRange,
)
from rich_life.domain.services.metrics import percentage

_ISSUE_SUBJECTS = {
    "fixedCosts": "Fixed costs",
    "investments": "Investments",
    "savingsGoals": "Savings",
    "guiltFreeSpending": "Guilt-free spending",
}


def evaluate_csp_health(
    csp: CspTotals,
    net_income: Decimal,
    targets: CspTargets,
) -> CspHealthReport:
    """Score CSP totals against their target ranges.

    Each category is worth 25 points. Fixed costs enforce the maximum only,
    investments and savings enforce the minimum only, and guilt-free spending
    must sit inside its band. Guilt-free spending below its minimum loses the
    points but is not reported as an issue.

    Args:
        csp: CSP totals of the latest snapshot.
        net_income: Monthly net income used as the denominator.
        targets: Target ranges per category.

    Returns:
        CspHealthReport: Score, per-category outcomes and issue messages.
    """
    amounts = csp.by_category()
    ranges = targets.by_category()
    results: list[CategoryHealth] = []
    for category, amount in amounts.items():
        target = ranges[category]
        pct = percentage(amount, net_income)
        passed, violated = _check_category(category, pct, target)
        issue = _issue_message(category, pct, target) if violated else None
        results.append(
            CategoryHealth(
                category=category,
                label=target.label,
                percentage=pct,
                passed=passed,
                issue=issue,
            )
        )
    score = POINTS_PER_CATEGORY * sum(1 for item in results if item.passed)
    return CspHealthReport(score=score, categories=results)


def _check_category(
    category: str,
    pct: Decimal,
    target: TargetRange,
) -> tuple[bool, bool]:
    """Return (passed, reported_as_violation) for a category."""
    if category == "fixedCosts":
        passed = pct <= target.max
        return passed, not passed
    if category in ("investments", "savingsGoals"):
        passed = pct >= target.min
        return passed, not passed
    passed = target.min <= pct <= target.max
    return passed, pct > target.max


def _issue_message(category: str, pct: Decimal, target: TargetRange) -> str:
    rounded = int(pct.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    subject = _ISSUE_SUBJECTS[category]
    return f"{subject} at {rounded}% (target: {target.describe()})"


__all__ = ["evaluate_csp_health"]
