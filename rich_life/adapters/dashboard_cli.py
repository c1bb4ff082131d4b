"""Command-line adapter for the finance dashboard.

Subcommands print a summary, import or export a JSON backup, record a
snapshot, or update income settings. The store is wired by the composition
root from environment settings.
"""

import argparse
from collections.abc import Sequence
from datetime import date
from decimal import Decimal, InvalidOperation
from pathlib import Path

from rich_life.adapters.formatting import (
    describe_goal_status,
    format_currency,
    format_percent,
    format_trend,
)
from rich_life.application.use_cases.get_dashboard import (
    DashboardView,
    GetDashboardUseCase,
)
from rich_life.application.use_cases.import_export import (
    ExportDocumentUseCase,
    ImportDocumentUseCase,
)
from rich_life.application.use_cases.record_snapshot import (
    RecordSnapshotUseCase,
    SnapshotEntry,
)
from rich_life.application.use_cases.update_income import UpdateIncomeUseCase
from rich_life.domain.constants import BREAKDOWN_FIELDS
from rich_life.domain.errors import DocumentValidationError, EmptyHistoryError
from rich_life.infrastructure.container import build_snapshot_store
from rich_life.infrastructure.logging.logger import get_app_logger
from rich_life.utils.decimal_utils import coerce_decimal


def _parse_date(value: str) -> date:
    """Parse an ISO date argument.

    Raises:
        argparse.ArgumentTypeError: If the value is not YYYY-MM-DD.
    """
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        ) from exc


def _parse_amount(value: str) -> Decimal:
    """Parse a monetary amount argument.

    Raises:
        argparse.ArgumentTypeError: If the value is not a number.
    """
    try:
        return coerce_decimal(value.replace(",", ""))
    except InvalidOperation as exc:
        raise argparse.ArgumentTypeError(
            f"Invalid amount '{value}'."
        ) from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rich-life",
        description="Personal finance snapshot dashboard.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    summary = subparsers.add_parser("summary", help="Print the dashboard.")
    summary.add_argument("--range", type=int, default=0, dest="range_months")

    import_parser = subparsers.add_parser("import", help="Import a backup.")
    import_parser.add_argument("path", type=Path)

    export_parser = subparsers.add_parser("export", help="Export a backup.")
    export_parser.add_argument("path", type=Path)

    snapshot = subparsers.add_parser("add-snapshot", help="Record a snapshot.")
    snapshot.add_argument("--date", type=_parse_date, default=date.today())
    for name in (
        "assets",
        "investments",
        "savings",
        "debt",
        "fixed-costs",
        "csp-investments",
        "savings-goals",
        "guilt-free-spending",
    ):
        snapshot.add_argument(
            f"--{name}",
            type=_parse_amount,
            default=Decimal("0"),
        )
    for fields in BREAKDOWN_FIELDS.values():
        for field_name in fields:
            snapshot.add_argument(
                f"--{field_name}",
                type=_parse_amount,
                default=None,
            )

    income = subparsers.add_parser("set-income", help="Update income.")
    income.add_argument("net", type=_parse_amount)
    income.add_argument("--gross", type=_parse_amount, default=None)
    return parser


def _print_summary(view: DashboardView) -> None:
    currency = view.profile.currency
    net_worth = view.net_worth
    print(f"Net worth as of {net_worth.as_of}: "
          f"{format_currency(net_worth.total, currency)}")
    if net_worth.has_previous:
        print(f"  vs last snapshot: "
              f"{format_trend(net_worth.trends['total'], currency)}")
    all_time = net_worth.all_time
    print(f"  since {all_time.first_date}: "
          f"{format_trend(all_time.change, currency)}")
    print(f"Net income: {format_currency(view.income.net, currency)}")
    for item in view.csp.categories:
        print(f"  {item.label}: {format_currency(item.amount, currency)} "
              f"({format_percent(item.percentage)})")
    print(f"CSP health: {view.health.score}/100 ({view.health.status})")
    for issue in view.health.issues:
        print(f"  - {issue}")
    for projection in view.goals:
        print(f"Goal {projection.goal.name}: "
              f"{format_percent(projection.progress_percent)} of "
              f"{format_currency(projection.goal.target_amount, currency)}; "
              f"{describe_goal_status(projection, currency)}")


def _snapshot_entry(args: argparse.Namespace) -> SnapshotEntry:
    breakdown = {
        field_name: getattr(args, field_name)
        for fields in BREAKDOWN_FIELDS.values()
        for field_name in fields
        if getattr(args, field_name) is not None
    }
    return SnapshotEntry(
        date=args.date,
        assets=args.assets,
        investments=args.investments,
        savings=args.savings,
        debt=args.debt,
        fixed_costs=args.fixed_costs,
        csp_investments=args.csp_investments,
        savings_goals=args.savings_goals,
        guilt_free_spending=args.guilt_free_spending,
        breakdown=breakdown,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return a process exit code."""
    args = _build_parser().parse_args(argv)
    logger = get_app_logger()
    store = build_snapshot_store()

    if args.command == "summary":
        try:
            view = GetDashboardUseCase(store, logger=logger).execute(
                range_months=args.range_months,
            )
        except EmptyHistoryError:
            print("No snapshots recorded yet.")
            return 1
        _print_summary(view)
        return 0

    if args.command == "import":
        try:
            result = ImportDocumentUseCase(store).execute(
                args.path.read_text(encoding="utf-8")
            )
        except (OSError, DocumentValidationError) as exc:
            logger.error(f"Import failed: {exc}")
            print(f"Import failed: {exc}")
            return 1
        print(f"Imported {result.snapshot_count} snapshots "
              f"and {result.goal_count} goals.")
        return 0

    if args.command == "export":
        payload = ExportDocumentUseCase(store).execute()
        args.path.write_text(payload, encoding="utf-8")
        print(f"Exported finance data to {args.path}.")
        return 0

    if args.command == "add-snapshot":
        snapshot = RecordSnapshotUseCase(store).execute(_snapshot_entry(args))
        print(f"Recorded snapshot for {snapshot.date} "
              f"(net worth {format_currency(snapshot.net_worth.total)}).")
        return 0

    updated = UpdateIncomeUseCase(store).execute(args.net, gross=args.gross)
    if not updated:
        print("Net income must be greater than zero; nothing changed.")
        return 1
    print(f"Net income set to {args.net}.")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
