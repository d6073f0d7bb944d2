"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


ZERO = Decimal("0")
HUNDRED = Decimal("100")
INFINITY = Decimal("Infinity")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from callers, JSON payloads or storage.

    Returns:
        Decimal: Normalized numeric value.

    Raises:
        ValueError: If the value cannot be read as a number.
    """
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Expected a numeric amount, got {value!r}")
    try:
        return Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(f"Expected a numeric amount, got {value!r}") from exc


def safe_divide(numerator: Decimal, denominator: Decimal) -> Decimal:
    """Return numerator / denominator, or zero when the denominator is zero."""
    if denominator == 0:
        return ZERO
    return numerator / denominator


def safe_percent(numerator: Decimal, denominator: Decimal) -> Decimal:
    """Return numerator as a percentage of denominator, zero-guarded."""
    if denominator == 0:
        return ZERO
    return (numerator / denominator) * HUNDRED


__all__ = [
    "ZERO",
    "HUNDRED",
    "INFINITY",
    "coerce_decimal",
    "safe_divide",
    "safe_percent",
]
