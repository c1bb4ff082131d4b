"""Use case to list checklist tasks in display order."""

from rich_life.application.snapshot_store import SnapshotStore
from rich_life.domain.models import WeddingTask
from rich_life.domain.services.document import sort_tasks_for_display


class GetTasksUseCase:
    """Return checklist tasks with open items first."""

    def __init__(self, store: SnapshotStore) -> None:
        self._store = store

    def execute(self) -> list[WeddingTask]:
        return sort_tasks_for_display(self._store.tasks())


__all__ = ["GetTasksUseCase", "WeddingTask"]
