"""Use case to project completion of every savings goal."""

from datetime import date

from rich_life.application.snapshot_store import SnapshotStore
from rich_life.domain.models import GoalProjection
from rich_life.domain.services.goals import project_goals


class GetGoalProjectionsUseCase:
    """Project progress and completion dates of the configured goals."""

    def __init__(self, store: SnapshotStore) -> None:
        self._store = store

    def execute(self, today: date | None = None) -> list[GoalProjection]:
        """Return one projection per goal, ordered by priority.

        Args:
            today: Reference date; defaults to the current date.

        Returns:
            list[GoalProjection]: Projections in priority order.
        """
        return project_goals(
            self._store.goals(),
            self._store.snapshots(),
            today or date.today(),
        )


__all__ = ["GetGoalProjectionsUseCase", "GoalProjection"]
