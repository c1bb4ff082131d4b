"""Display formatting shared by the CLI and the Streamlit dashboard."""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from rich_life.domain.models import GoalProjection, Trend

_CURRENCY_SYMBOLS = {"USD": "$", "EUR": "€", "GBP": "£"}


def format_currency(value: Decimal, currency_code: str = "USD") -> str:
    """Format an amount with no decimals, e.g. ``$196,809``."""
    rounded = value.quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    symbol = _CURRENCY_SYMBOLS.get(currency_code)
    sign = "-" if rounded < 0 else ""
    if symbol:
        return f"{sign}{symbol}{abs(rounded):,.0f}"
    return f"{sign}{abs(rounded):,.0f} {currency_code}"


def format_percent(value: Decimal) -> str:
    """Format a percentage rounded to the nearest integer."""
    rounded = value.quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return f"{rounded:.0f}%"


def format_trend(value: Trend, currency_code: str = "USD") -> str:
    """Format a trend as ``+$5,309 (+2.8%)``."""
    sign = "+" if value.change >= 0 else "-"
    amount = format_currency(abs(value.change), currency_code)
    return f"{sign}{amount} ({sign}{abs(value.percent):.1f}%)"


def format_month(value: date | None) -> str:
    """Format a date as ``December 2023``, or ``N/A`` when missing."""
    if value is None:
        return "N/A"
    return value.strftime("%B %Y")


def clamp_progress(projection: GoalProjection) -> float:
    """Return goal progress clamped to the 0-100 display range."""
    progress = max(projection.progress_percent, Decimal("0"))
    return float(min(progress, Decimal("100")))


def describe_goal_status(
    projection: GoalProjection,
    currency_code: str = "USD",
) -> str:
    """Return a one-line completion outlook for a goal."""
    if projection.mode == "velocity":
        if not projection.is_reachable:
            return "Est. completion: N/A"
        return (
            "Est. completion: "
            f"{format_month(projection.estimated_completion)}"
        )
    if projection.on_track:
        return (
            f"On track for {format_month(projection.estimated_completion)}"
        )
    shortfall = format_currency(
        projection.monthly_shortfall or Decimal("0"),
        currency_code,
    )
    required = format_currency(
        Decimal(projection.required_monthly or 0),
        currency_code,
    )
    return f"Behind: needs {required}/month ({shortfall} more)"


__all__ = [
    "format_currency",
    "format_percent",
    "format_trend",
    "format_month",
    "clamp_progress",
    "describe_goal_status",
]
