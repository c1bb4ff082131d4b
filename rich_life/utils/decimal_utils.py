"""Helpers for Decimal normalization."""

from decimal import Decimal


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from a JSON document or a form.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def to_json_number(value: Decimal) -> int | float:
    """Convert a Decimal into a JSON-friendly number.

    Args:
        value: Decimal amount.

    Returns:
        int | float: Integer when the amount is integral, float otherwise.
    """
    if value == value.to_integral_value():
        return int(value)
    return float(value)


__all__ = ["coerce_decimal", "to_json_number"]
