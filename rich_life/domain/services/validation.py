"""Domain validation helpers."""

from decimal import Decimal
from logging import Logger

from rich_life.domain.constants import BREAKDOWN_FIELDS
from rich_life.domain.models import Snapshot


def validate_snapshot_amounts(snapshot: Snapshot, logger: Logger) -> bool:
    """Warn when a snapshot carries negative amounts.

    Args:
        snapshot: Snapshot to check.
        logger: Logger used for warnings.

    Returns:
        bool: True when every amount is non-negative.
    """
    amounts = {
        "netWorth.assets": snapshot.net_worth.assets,
        "netWorth.investments": snapshot.net_worth.investments,
        "netWorth.savings": snapshot.net_worth.savings,
        "netWorth.debt": snapshot.net_worth.debt,
    }
    amounts.update(
        {f"csp.{name}": value for name, value in snapshot.csp.by_category().items()}
    )
    valid = True
    for name, value in amounts.items():
        if value < 0:
            logger.warning(
                f"Negative amount for {name} on {snapshot.date}: {value}"
            )
            valid = False
    return valid


def validate_breakdown_totals(snapshot: Snapshot, logger: Logger) -> bool:
    """Warn when itemized breakdown sums disagree with CSP totals.

    Categories without any itemized field in the breakdown are skipped.

    Args:
        snapshot: Snapshot to check.
        logger: Logger used for warnings.

    Returns:
        bool: True when every itemized category matches its total.
    """
    if not snapshot.breakdown:
        return True
    totals = snapshot.csp.by_category()
    valid = True
    for category, fields in BREAKDOWN_FIELDS.items():
        present = [name for name in fields if name in snapshot.breakdown]
        if not present:
            continue
        itemized = sum(
            (snapshot.breakdown[name] for name in present),
            start=Decimal("0"),
        )
        if itemized != totals[category]:
            logger.warning(
                f"Breakdown for {category} on {snapshot.date} sums to "
                f"{itemized}, expected {totals[category]}"
            )
            valid = False
    return valid


__all__ = ["validate_snapshot_amounts", "validate_breakdown_totals"]
