"""Versioned reconciliation of stored documents with the default schema.

Stored documents are tagged with ``schemaVersion``. On load, every pending
migration runs in order, then goal defaults are merged. Each step is
idempotent, so reconciling an already reconciled document is a no-op.
"""

import copy
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any

from rich_life.domain.constants import SCHEMA_VERSION
from rich_life.domain.errors import DocumentValidationError
from rich_life.domain.services.normalization import parse_document_date
from rich_life.utils.decimal_utils import coerce_decimal, to_json_number

Document = dict[str, Any]

OPTIONAL_COLLECTIONS = ("profile", "targets", "goals", "weddingTasks")
OBJECT_COLLECTIONS = ("profile", "targets", "goals")

GOAL_AMOUNT_FIELDS = ("targetAmount", "currentAmount", "monthlyContribution")

# Goal fields owned by the product configuration rather than the user.
OWNER_CONTROLLED_GOAL_FIELDS = ("targetAmount", "targetDate")

# Goals whose progress used to be derived from a breakdown field by key.
LEGACY_BREAKDOWN_SOURCES = {"wedding": "wedding"}


@dataclass(frozen=True)
class Migration:
    """A single idempotent schema upgrade step."""

    version: int
    name: str
    apply: Callable[[Document, Mapping[str, Any]], Document]


def validate_document(document: Any) -> Document:
    """Check the shape every stored or imported document needs.

    Args:
        document: Parsed JSON value.

    Returns:
        Document: The same document when it is valid.

    Raises:
        DocumentValidationError: If the document is not an object, lacks a
            snapshots list or an income object, holds a collection of the
            wrong type, or carries an amount that is not a finite number.
    """
    if not isinstance(document, dict):
        raise DocumentValidationError(
            "Invalid data format: expected a JSON object."
        )
    if not isinstance(document.get("snapshots"), list):
        raise DocumentValidationError(
            "Invalid data format: missing snapshots list."
        )
    if not isinstance(document.get("income"), dict):
        raise DocumentValidationError(
            "Invalid data format: missing income object."
        )
    for name in OBJECT_COLLECTIONS:
        if name in document and not isinstance(document[name], dict):
            raise DocumentValidationError(
                f"Invalid data format: {name} must be an object."
            )
    if "weddingTasks" in document and not isinstance(
        document["weddingTasks"], list
    ):
        raise DocumentValidationError(
            "Invalid data format: weddingTasks must be a list."
        )

    _require_amounts(document["income"], ("gross", "net"), "income")
    for position, snapshot in enumerate(document["snapshots"], start=1):
        where = f"snapshot {position}"
        _require_object(snapshot, where)
        for section in ("netWorth", "csp", "breakdown"):
            values = snapshot.get(section)
            if values is None:
                continue
            _require_object(values, f"{where} {section}")
            _require_amounts(values, tuple(values), f"{where} {section}")
    for key, goal in (document.get("goals") or {}).items():
        _require_object(goal, f"goal {key}")
        _require_amounts(goal, GOAL_AMOUNT_FIELDS, f"goal {key}")
    for key, target in (document.get("targets") or {}).items():
        _require_object(target, f"target {key}")
        _require_amounts(target, ("min", "max"), f"target {key}")
    for position, task in enumerate(
        document.get("weddingTasks") or [],
        start=1,
    ):
        _require_object(task, f"task {position}")
    return document


def inject_missing_collections(
    document: Document,
    defaults: Mapping[str, Any],
) -> Document:
    """Copy top-level collections and target categories missing from storage."""
    for name in OPTIONAL_COLLECTIONS:
        if name not in document and name in defaults:
            document[name] = copy.deepcopy(defaults[name])
    stored_targets = document.get("targets")
    if isinstance(stored_targets, dict):
        for category, target in (defaults.get("targets") or {}).items():
            stored_targets.setdefault(category, copy.deepcopy(target))
    return document


def declare_breakdown_sources(
    document: Document,
    defaults: Mapping[str, Any],
) -> Document:
    """Attach breakdown sources to goals that relied on key-based rules."""
    _ = defaults
    goals = document.get("goals")
    if not isinstance(goals, dict):
        return document
    for key, field_name in LEGACY_BREAKDOWN_SOURCES.items():
        goal = goals.get(key)
        if isinstance(goal, dict):
            goal.setdefault("derivedFromBreakdownField", field_name)
    return document


def normalize_snapshots(
    document: Document,
    defaults: Mapping[str, Any],
) -> Document:
    """Recompute net worth totals and sort snapshots by ascending date."""
    _ = defaults
    snapshots = [item for item in document["snapshots"] if isinstance(item, dict)]
    for snapshot in snapshots:
        parsed = parse_document_date(snapshot.get("date"))
        if parsed is not None:
            snapshot["date"] = parsed.isoformat()
        net_worth = snapshot.get("netWorth")
        if isinstance(net_worth, dict):
            net_worth["total"] = to_json_number(_net_worth_total(net_worth))
    document["snapshots"] = sorted(snapshots, key=_snapshot_sort_key)
    return document


def merge_goal_defaults(
    document: Document,
    defaults: Mapping[str, Any],
) -> Document:
    """Merge default goal fields underneath stored goal fields.

    Stored values win, except owner-controlled target fields which always
    follow the defaults. Goals only present in the defaults are added.
    """
    default_goals = defaults.get("goals") or {}
    stored_goals = document.setdefault("goals", {})
    for key, default_goal in default_goals.items():
        stored_goal = stored_goals.get(key)
        if not isinstance(stored_goal, dict):
            stored_goals[key] = copy.deepcopy(default_goal)
            continue
        merged = {**copy.deepcopy(default_goal), **stored_goal}
        for field_name in OWNER_CONTROLLED_GOAL_FIELDS:
            if field_name in default_goal:
                merged[field_name] = default_goal[field_name]
            else:
                merged.pop(field_name, None)
        stored_goals[key] = merged
    return document


MIGRATIONS: tuple[Migration, ...] = (
    Migration(1, "inject_missing_collections", inject_missing_collections),
    Migration(2, "declare_breakdown_sources", declare_breakdown_sources),
    Migration(3, "normalize_snapshots", normalize_snapshots),
)


def document_version(document: Mapping[str, Any]) -> int:
    """Return the schema version of a document, 0 when untagged."""
    version = document.get("schemaVersion", 0)
    return version if isinstance(version, int) else 0


def reconcile_document(
    stored: Mapping[str, Any],
    defaults: Mapping[str, Any],
    migrations: tuple[Migration, ...] = MIGRATIONS,
) -> Document:
    """Bring a stored document up to the current schema.

    Args:
        stored: Validated stored document; it is not modified.
        defaults: Current default document.
        migrations: Ordered migration steps.

    Returns:
        Document: A new reconciled document tagged with the latest version.

    Raises:
        DocumentValidationError: If a migration meets an amount it cannot
            convert.
    """
    document = copy.deepcopy(dict(stored))
    version = document_version(document)
    for migration in migrations:
        if migration.version <= version:
            continue
        try:
            document = migration.apply(document, defaults)
        except InvalidOperation as exc:
            raise DocumentValidationError(
                f"Invalid data format: {migration.name} failed on an amount."
            ) from exc
    document = merge_goal_defaults(document, defaults)
    latest = max((m.version for m in migrations), default=SCHEMA_VERSION)
    document["schemaVersion"] = max(version, latest)
    return document


def _require_object(value: Any, where: str) -> None:
    if not isinstance(value, dict):
        raise DocumentValidationError(
            f"Invalid data format: {where} must be an object."
        )


def _require_amounts(
    values: Mapping[str, Any],
    names: tuple[str, ...],
    where: str,
) -> None:
    for name in names:
        try:
            amount = coerce_decimal(values.get(name))
        except InvalidOperation as exc:
            raise DocumentValidationError(
                f"Invalid data format: {where} {name} is not a number."
            ) from exc
        if not amount.is_finite():
            raise DocumentValidationError(
                f"Invalid data format: {where} {name} is not a number."
            )


def _net_worth_total(net_worth: Mapping[str, Any]) -> Decimal:
    return (
        coerce_decimal(net_worth.get("assets"))
        + coerce_decimal(net_worth.get("investments"))
        + coerce_decimal(net_worth.get("savings"))
        - abs(coerce_decimal(net_worth.get("debt")))
    )


def _snapshot_sort_key(snapshot: Mapping[str, Any]) -> date:
    return parse_document_date(snapshot.get("date")) or date.min


__all__ = [
    "Document",
    "Migration",
    "MIGRATIONS",
    "validate_document",
    "inject_missing_collections",
    "declare_breakdown_sources",
    "normalize_snapshots",
    "merge_goal_defaults",
    "document_version",
    "reconcile_document",
]
