"""Normalization and parsing helpers shared by domain models."""

from datetime import date, datetime
from enum import Enum
from typing import TypeVar

from src.domain.constants import DEFAULT_CURRENCY
from src.domain.errors import ValidationError


EnumT = TypeVar("EnumT", bound=Enum)


def normalize_currency(currency: str | None) -> str:
    """Normalize currency codes.

    Args:
        currency: Raw currency code from callers or payloads.

    Returns:
        str: Upper-cased code, or the default currency when blank.
    """
    if not currency:
        return DEFAULT_CURRENCY
    cleaned = currency.strip()
    return cleaned.upper() if cleaned else DEFAULT_CURRENCY


def normalize_text(value: str | None) -> str:
    """Strip surrounding whitespace, mapping None to an empty string."""
    if value is None:
        return ""
    return str(value).strip()


def parse_category(category_type: type[EnumT], value) -> EnumT:
    """Resolve an enumeration member from a member or its string value.

    Args:
        category_type: Enumeration to resolve against.
        value: Member instance or raw value (case-insensitive).

    Returns:
        EnumT: Matching enumeration member.

    Raises:
        ValidationError: If the value is not part of the enumeration.
    """
    if isinstance(value, category_type):
        return value
    raw = normalize_text(value).lower()
    try:
        return category_type(raw)
    except ValueError as exc:
        allowed = ", ".join(member.value for member in category_type)
        raise ValidationError(
            f"Unknown {category_type.__name__} '{value}'. "
            f"Expected one of: {allowed}"
        ) from exc


def parse_timestamp(value) -> datetime | date | None:
    """Parse ISO 8601 strings into date or datetime values.

    Date-only strings (YYYY-MM-DD) become ``date`` objects so that values
    serialized from dates round-trip unchanged.

    Raises:
        ValidationError: If a string is not a valid ISO 8601 value.
    """
    if value is None or isinstance(value, (date, datetime)):
        return value
    raw = normalize_text(value)
    if not raw:
        return None
    try:
        if len(raw) == 10:
            return date.fromisoformat(raw)
        return datetime.fromisoformat(raw)
    except ValueError as exc:
        raise ValidationError(
            f"Invalid date '{value}'. Expected ISO 8601 format."
        ) from exc


_TRUE_FLAGS = ("true", "yes", "1")
_FALSE_FLAGS = ("false", "no", "0")


def parse_flag(value, default: bool, field_name: str) -> bool:
    """Read a boolean flag from a payload value.

    Args:
        value: Raw value; None falls back to ``default``.
        default: Value used when the flag is absent.
        field_name: Name used in error messages.

    Returns:
        bool: Parsed flag.

    Raises:
        ValidationError: If the value is neither a bool nor a recognised
            true/false string.
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        raw = value.strip().lower()
        if raw in _TRUE_FLAGS:
            return True
        if raw in _FALSE_FLAGS:
            return False
    raise ValidationError(
        f"Invalid {field_name} '{value}'. Expected true or false."
    )


def format_timestamp(value: datetime | date | None) -> str | None:
    """Return the ISO 8601 representation of a date or datetime."""
    if value is None:
        return None
    return value.isoformat()


__all__ = [
    "normalize_currency",
    "normalize_text",
    "parse_category",
    "parse_timestamp",
    "parse_flag",
    "format_timestamp",
]
