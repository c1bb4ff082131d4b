"""Domain normalization helpers."""

from datetime import date, datetime

from rich_life.domain.constants import GOAL_PRIORITIES

_MONTH_FORMATS = ("%b %Y", "%B %Y", "%Y-%m")


def normalize_priority(priority: str | None) -> str:
    """Normalize goal and task priority values.

    Args:
        priority: Raw priority value from a document.

    Returns:
        str: One of high, medium or low; medium when unrecognized.
    """
    if not priority:
        return "medium"
    cleaned = priority.strip().lower()
    return cleaned if cleaned in GOAL_PRIORITIES else "medium"


def parse_document_date(value: str | date | None) -> date | None:
    """Parse a date stored in a document.

    ISO dates are the canonical form. Month labels such as ``Dec 2023`` and
    ``2023-12`` from older datasets resolve to the first day of the month.

    Args:
        value: Raw date value.

    Returns:
        date | None: Parsed date, or None when empty or unparseable.
    """
    if value is None or value == "":
        return None
    if isinstance(value, date):
        return value
    cleaned = str(value).strip()
    try:
        return date.fromisoformat(cleaned[:10])
    except ValueError:
        pass
    for fmt in _MONTH_FORMATS:
        try:
            return datetime.strptime(cleaned, fmt).date()
        except ValueError:
            continue
    return None


__all__ = ["normalize_priority", "parse_document_date"]
