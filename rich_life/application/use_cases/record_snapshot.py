"""Use case to record a new monthly snapshot."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from rich_life.application.snapshot_store import SnapshotStore
from rich_life.domain.models import CspTotals, NetWorth, Snapshot
from rich_life.infrastructure.logging.logger import get_usage_logger
from rich_life.utils.decimal_utils import coerce_decimal


@dataclass(frozen=True)
class SnapshotEntry:
    """Raw values submitted for a new snapshot.

    Amounts may be any numeric value accepted by ``coerce_decimal``. Debt is
    entered as a positive magnitude.
    """

    date: date
    assets: Decimal | int | float | str = 0
    investments: Decimal | int | float | str = 0
    savings: Decimal | int | float | str = 0
    debt: Decimal | int | float | str = 0
    fixed_costs: Decimal | int | float | str = 0
    csp_investments: Decimal | int | float | str = 0
    savings_goals: Decimal | int | float | str = 0
    guilt_free_spending: Decimal | int | float | str = 0
    breakdown: Mapping[str, Decimal | int | float | str] = field(
        default_factory=dict
    )


class RecordSnapshotUseCase:
    """Append a snapshot to the store and persist it."""

    def __init__(self, store: SnapshotStore, usage_logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Snapshot store holding the finance document.
            usage_logger: Optional logger recording user actions.
        """
        self._store = store
        self._usage_logger = usage_logger or get_usage_logger()

    def execute(self, entry: SnapshotEntry) -> Snapshot:
        """Build a snapshot from the entry and append it.

        Args:
            entry: Submitted snapshot values.

        Returns:
            Snapshot: The stored snapshot, with its total derived.
        """
        snapshot = Snapshot(
            date=entry.date,
            net_worth=NetWorth(
                assets=coerce_decimal(entry.assets),
                investments=coerce_decimal(entry.investments),
                savings=coerce_decimal(entry.savings),
                debt=abs(coerce_decimal(entry.debt)),
            ),
            csp=CspTotals(
                fixed_costs=coerce_decimal(entry.fixed_costs),
                investments=coerce_decimal(entry.csp_investments),
                savings_goals=coerce_decimal(entry.savings_goals),
                guilt_free_spending=coerce_decimal(entry.guilt_free_spending),
            ),
            breakdown={
                name: coerce_decimal(value)
                for name, value in entry.breakdown.items()
            },
        )
        self._store.append(snapshot)
        self._usage_logger.info(
            f"Snapshot added for {snapshot.date} "
            f"(net worth {snapshot.net_worth.total})"
        )
        return snapshot


__all__ = ["RecordSnapshotUseCase", "SnapshotEntry"]
