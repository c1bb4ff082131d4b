"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

import altair as alt
import streamlit as st

from rich_life.adapters.formatting import (
    clamp_progress,
    describe_goal_status,
    format_currency,
    format_month,
    format_percent,
    format_trend,
)
from rich_life.application.snapshot_store import SnapshotStore
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
from rich_life.domain.models import CspOverview, NetWorthOverview, WeddingTask
from rich_life.infrastructure.container import build_snapshot_store

CHART_RANGES = {
    "6 months": 6,
    "12 months": 12,
    "24 months": 24,
    "All": 0,
}

CSP_COLORS = {
    "fixedCosts": "#ef4444",
    "investments": "#22c55e",
    "savingsGoals": "#3b82f6",
    "guiltFreeSpending": "#a855f7",
}


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Return whether numpy and pandas expose what Altair charts need."""
    import numpy
    import pandas

    if not hasattr(numpy, "ndarray"):
        return False, "numpy import is incomplete; charts are disabled."
    if not hasattr(pandas, "Timestamp"):
        return False, "pandas import is incomplete; charts are disabled."
    return True, None


def _build_store() -> SnapshotStore:
    """Build the snapshot store from environment settings."""
    return build_snapshot_store()


@st.cache_resource(show_spinner=False)
def _load_store() -> SnapshotStore:
    """Cached store shared by the reruns of a Streamlit session."""
    return _build_store()


def _fetch_dashboard(
    store: SnapshotStore,
    range_months: int,
) -> DashboardView:
    """Compute every dashboard section."""
    return GetDashboardUseCase(store).execute(range_months=range_months)


def _prepare_csp_chart_data(
    csp: CspOverview,
    currency_code: str,
) -> list[dict[str, str | float]]:
    """Prepare donut chart rows for the CSP categories.

    Args:
        csp: CSP overview of the latest snapshot.
        currency_code: Currency used in labels.

    Returns:
        Altair-ready rows with amounts, labels and shares of spending.
    """
    total = csp.total_spent
    data: list[dict[str, str | float]] = []
    for item in csp.categories:
        share = (item.amount / total) * Decimal("100") if total else Decimal("0")
        data.append(
            {
                "category": item.label,
                "amount": float(item.amount),
                "amount_label": format_currency(item.amount, currency_code),
                "share_label": f"{share:.1f}%",
                "color": CSP_COLORS.get(item.category, "#6c8ead"),
            }
        )
    return data


def _prepare_history_chart_data(
    overview: NetWorthOverview,
    currency_code: str,
) -> list[dict[str, str | float]]:
    """Prepare line chart rows for the net worth history."""
    return [
        {
            "date": point.date.isoformat(),
            "total": float(point.total),
            "total_label": format_currency(point.total, currency_code),
        }
        for point in overview.history
    ]


def _render_net_worth(view: DashboardView) -> None:
    """Render net worth metrics with period-over-period deltas."""
    currency = view.profile.currency
    overview = view.net_worth
    st.subheader(f"Net Worth ({format_month(overview.as_of)})")

    def _delta(name: str) -> str | None:
        if not overview.has_previous:
            return None
        return format_trend(overview.trends[name], currency)

    total_col, assets_col, invest_col, savings_col, debt_col = st.columns(5)
    total_col.metric(
        "Net Worth",
        format_currency(overview.total, currency),
        _delta("total"),
    )
    assets_col.metric(
        "Assets",
        format_currency(overview.components["assets"], currency),
        _delta("assets"),
    )
    invest_col.metric(
        "Investments",
        format_currency(overview.components["investments"], currency),
        _delta("investments"),
    )
    savings_col.metric(
        "Savings",
        format_currency(overview.components["savings"], currency),
        _delta("savings"),
    )
    debt_col.metric(
        "Debt",
        format_currency(overview.components["debt"], currency),
        _delta("debt"),
        delta_color="inverse",
    )
    all_time = overview.all_time
    st.caption(
        f"Since {format_month(all_time.first_date)}: "
        f"{format_trend(all_time.change, currency)} over "
        f"{all_time.snapshot_count} snapshots. Peak "
        f"{format_currency(all_time.peak_total, currency)} in "
        f"{format_month(all_time.peak_date)}."
    )


def _render_net_worth_chart(view: DashboardView, charts_enabled: bool) -> None:
    """Render the net worth history line chart."""
    data = _prepare_history_chart_data(view.net_worth, view.profile.currency)
    if not charts_enabled or not data:
        st.dataframe(data, width="stretch", hide_index=True)
        return
    chart = alt.Chart(alt.Data(values=data)).mark_area(
        line={"color": "#7c3aed"},
        color="#7c3aed",
        opacity=0.25,
        interpolate="monotone",
    ).encode(
        x=alt.X("date:T", title=None),
        y=alt.Y("total:Q", title=None),
        tooltip=[
            alt.Tooltip("date:T"),
            alt.Tooltip("total_label:N", title="Net worth"),
        ],
    ).properties(height=300)
    st.altair_chart(chart, width="stretch")


def _render_csp(view: DashboardView, charts_enabled: bool) -> None:
    """Render the CSP donut chart and category breakdown."""
    currency = view.profile.currency
    st.subheader("Conscious Spending Plan")
    st.caption(f"Net income: {format_currency(view.income.net, currency)}")
    data = _prepare_csp_chart_data(view.csp, currency)
    chart_col, detail_col = st.columns(2)
    if charts_enabled and data:
        hover = alt.selection_point(
            name="hover",
            fields=["category"],
            on="view:mouseover",
            clear="view:mouseout",
            empty=False,
        )
        donut = alt.Chart(alt.Data(values=data)).mark_arc(
            innerRadius=90,
            cornerRadius=8,
            padAngle=0.02,
        ).encode(
            theta=alt.Theta("amount:Q"),
            color=alt.Color(
                "category:N",
                scale=alt.Scale(
                    domain=[row["category"] for row in data],
                    range=[row["color"] for row in data],
                ),
                legend=alt.Legend(orient="bottom", title=None),
            ),
            opacity=alt.condition(hover, alt.value(1.0), alt.value(0.6)),
            tooltip=[
                alt.Tooltip("category:N"),
                alt.Tooltip("amount_label:N"),
                alt.Tooltip("share_label:N"),
            ],
        ).add_params(hover).properties(width=280, height=280)
        chart_col.altair_chart(donut, width="stretch")
    for item in view.csp.categories:
        detail_col.metric(
            item.label,
            format_currency(item.amount, currency),
            format_percent(item.percentage) + " of income",
            delta_color="off",
        )


def _render_health(view: DashboardView) -> None:
    """Render the CSP health indicator and its issues."""
    health = view.health
    message = f"CSP health: {health.status} ({health.score}/100)"
    if health.is_healthy:
        st.success(message)
    else:
        st.error(message)
    for issue in health.issues:
        st.warning(issue)


def _render_goals(view: DashboardView) -> None:
    """Render one card per goal projection."""
    currency = view.profile.currency
    st.subheader("Goals")
    if not view.goals:
        st.info("No goals configured.")
        return
    columns = st.columns(min(len(view.goals), 3))
    for index, projection in enumerate(view.goals):
        goal = projection.goal
        column = columns[index % len(columns)]
        column.markdown(f"**{goal.name}** · {goal.priority}")
        column.progress(
            clamp_progress(projection) / 100,
            text=format_percent(projection.progress_percent),
        )
        column.caption(
            f"Saved {format_currency(projection.current_amount, currency)} of "
            f"{format_currency(goal.target_amount, currency)}; "
            f"remaining {format_currency(projection.remaining, currency)}"
        )
        column.caption(describe_goal_status(projection, currency))
        if goal.notes:
            column.caption(f'"{goal.notes}"')


def _render_tasks(tasks: Sequence[WeddingTask]) -> None:
    """Render the checklist table."""
    if not tasks:
        return
    st.subheader("Wedding Checklist")
    data = [
        {
            "Done": task.completed,
            "Task": task.task,
            "Priority": task.priority,
            "Due": task.due_date.isoformat() if task.due_date else "",
            "Notes": task.notes,
        }
        for task in tasks
    ]
    st.dataframe(data, width="stretch", hide_index=True)


def _render_snapshot_form(store: SnapshotStore) -> None:
    """Render the sidebar form recording a new snapshot."""
    with st.sidebar.form("snapshot_form", clear_on_submit=True):
        st.markdown("**Record snapshot**")
        snapshot_date = st.date_input("Date", value=date.today())
        values = {
            name: st.number_input(label, min_value=0.0, step=100.0)
            for name, label in (
                ("assets", "Assets"),
                ("investments", "Investments"),
                ("savings", "Savings"),
                ("debt", "Debt"),
                ("fixed_costs", "Fixed costs"),
                ("csp_investments", "Monthly investments"),
                ("savings_goals", "Savings goals"),
                ("guilt_free_spending", "Guilt-free spending"),
            )
        }
        with st.expander("Itemized breakdown"):
            itemized = {
                field_name: st.number_input(
                    field_name,
                    min_value=0.0,
                    step=50.0,
                    key=f"breakdown_{field_name}",
                )
                for fields in BREAKDOWN_FIELDS.values()
                for field_name in fields
            }
        submitted = st.form_submit_button("Save snapshot")
    if submitted:
        breakdown = {name: value for name, value in itemized.items() if value}
        RecordSnapshotUseCase(store).execute(
            SnapshotEntry(date=snapshot_date, breakdown=breakdown, **values)
        )
        st.sidebar.success(f"Snapshot saved for {snapshot_date}.")


def _render_income_form(store: SnapshotStore) -> None:
    """Render the sidebar form updating income."""
    income = store.income()
    with st.sidebar.form("income_form"):
        st.markdown("**Income**")
        net = st.number_input("Net monthly", value=float(income.net), step=100.0)
        gross = st.number_input(
            "Gross monthly",
            value=float(income.gross),
            step=100.0,
        )
        submitted = st.form_submit_button("Update income")
    if submitted:
        if UpdateIncomeUseCase(store).execute(net, gross=gross):
            st.sidebar.success("Income updated.")
        else:
            st.sidebar.warning("Net income must be greater than zero.")


def _render_backup(store: SnapshotStore) -> None:
    """Render import and export controls."""
    st.sidebar.download_button(
        "Export data",
        data=ExportDocumentUseCase(store).execute(),
        file_name=f"finance-backup-{date.today().isoformat()}.json",
        mime="application/json",
    )
    uploaded = st.sidebar.file_uploader("Import data", type=["json"])
    if uploaded is None:
        return
    upload_id = f"{uploaded.name}:{uploaded.size}"
    if st.session_state.get("last_import") == upload_id:
        return
    st.session_state["last_import"] = upload_id
    try:
        result = ImportDocumentUseCase(store).execute(
            uploaded.getvalue().decode("utf-8")
        )
    except (UnicodeDecodeError, DocumentValidationError) as exc:
        st.sidebar.error(f"Import failed: {exc}")
        return
    st.sidebar.success(f"Imported {result.snapshot_count} snapshots.")


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Rich Life Dashboard", layout="wide")
    st.title("Rich Life Dashboard")

    store = _load_store()
    range_label = st.sidebar.selectbox("Chart range", list(CHART_RANGES))
    _render_snapshot_form(store)
    _render_income_form(store)
    _render_backup(store)

    try:
        view = _fetch_dashboard(store, CHART_RANGES.get(range_label, 0))
    except EmptyHistoryError:
        st.warning("No snapshots recorded yet. Add one from the sidebar.")
        return

    charts_enabled, chart_error = _check_altair_dependencies()
    if chart_error:
        st.warning(chart_error)

    _render_health(view)
    _render_net_worth(view)
    _render_net_worth_chart(view, charts_enabled)
    _render_csp(view, charts_enabled)
    _render_goals(view)
    _render_tasks(view.tasks)


if __name__ == "__main__":  # pragma: no cover
    main()
