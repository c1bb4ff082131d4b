"""Domain models for savings goals and their projections."""

import math
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Literal

GoalPriority = Literal["high", "medium", "low"]
ProjectionMode = Literal["velocity", "fixed_date"]


@dataclass(frozen=True)
class Goal:
    """A savings goal defined in configuration.

    Attributes:
        key: Identifier of the goal inside the goals mapping.
        name: Display name.
        icon: Icon identifier used by the presentation layer.
        target_amount: Amount to reach.
        current_amount: Amount saved so far, as stored.
        monthly_contribution: Planned monthly contribution.
        priority: One of high, medium or low.
        notes: Free-form notes.
        target_date: Optional deadline switching to fixed-date projection.
        start_date: Optional date tracking started.
        derived_from_breakdown_field: Optional snapshot breakdown field whose
            cumulative sum floors the current amount.
    """

    key: str
    name: str
    icon: str
    target_amount: Decimal
    current_amount: Decimal
    monthly_contribution: Decimal
    priority: GoalPriority = "medium"
    notes: str = ""
    target_date: date | None = None
    start_date: date | None = None
    derived_from_breakdown_field: str | None = None


@dataclass(frozen=True)
class GoalProjection:
    """Computed progress and completion outlook for a goal.

    ``months_remaining`` is ``math.inf`` when the goal cannot be reached at
    the current pace; ``estimated_completion`` is then ``None``. It is also
    ``None`` when the completion date would fall past year 9999.
    """

    goal: Goal
    mode: ProjectionMode
    current_amount: Decimal
    remaining: Decimal
    progress_percent: Decimal
    months_remaining: int | float
    estimated_completion: date | None
    required_monthly: int | None = None
    on_track: bool | None = None
    monthly_shortfall: Decimal | None = None

    @property
    def is_reachable(self) -> bool:
        """Return True when a finite completion horizon exists."""
        return self.months_remaining != math.inf


__all__ = ["Goal", "GoalPriority", "GoalProjection", "ProjectionMode"]
