"""Bundled default finance document."""

import json
from importlib import resources
from typing import Any

DEFAULT_DOCUMENT_RESOURCE = "default_document.json"


def load_default_document() -> dict[str, Any]:
    """Return a fresh copy of the bundled default document.

    Returns:
        dict[str, Any]: Default profile, income, targets, snapshots, goals
        and tasks.
    """
    data_files = resources.files("rich_life.infrastructure") / "data"
    payload = (data_files / DEFAULT_DOCUMENT_RESOURCE).read_text(
        encoding="utf-8"
    )
    return json.loads(payload)


__all__ = ["load_default_document", "DEFAULT_DOCUMENT_RESOURCE"]
