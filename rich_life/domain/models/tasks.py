"""Domain model for the wedding planning checklist."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class WeddingTask:
    """Checklist item carried alongside the financial data."""

    id: int | str
    task: str
    completed: bool = False
    priority: str = "medium"
    due_date: date | None = None
    notes: str = ""


__all__ = ["WeddingTask"]
