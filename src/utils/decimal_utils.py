"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def quantize_to(value: Decimal, places: int) -> Decimal:
    """Round half-up to ``places`` decimal places, the scale a column keeps."""
    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def quantize_money(value: Decimal) -> Decimal:
    """Round a monetary value to two decimal places for display."""
    return value.quantize(Decimal("0.01"))


__all__ = ["coerce_decimal", "quantize_to", "quantize_money"]
