"""Use case to update income settings."""

from datetime import date
from decimal import Decimal

from rich_life.application.snapshot_store import SnapshotStore
from rich_life.infrastructure.logging.logger import get_usage_logger
from rich_life.utils.decimal_utils import coerce_decimal


class UpdateIncomeUseCase:
    """Update net and gross income; non-positive net income is ignored."""

    def __init__(self, store: SnapshotStore, usage_logger=None) -> None:
        self._store = store
        self._usage_logger = usage_logger or get_usage_logger()

    def execute(
        self,
        net,
        gross=None,
        today: date | None = None,
    ) -> bool:
        """Apply the income update.

        Args:
            net: New monthly net income.
            gross: Optional new gross income.
            today: Date stamped as ``lastUpdated``.

        Returns:
            bool: True when the update was applied.
        """
        net_value = coerce_decimal(net)
        gross_value: Decimal | None = (
            coerce_decimal(gross) if gross is not None else None
        )
        updated = self._store.update_income(
            net_value,
            gross=gross_value,
            today=today,
        )
        if updated:
            self._usage_logger.info(f"Net income updated to {net_value}")
        return updated


__all__ = ["UpdateIncomeUseCase"]
