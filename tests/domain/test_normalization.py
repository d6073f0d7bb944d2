"""Tests for normalization and parsing helpers."""

from datetime import date, datetime, timezone

import pytest

from src.domain.constants import AssetCategory
from src.domain.errors import ValidationError
from src.domain.normalization import (
    format_timestamp,
    normalize_currency,
    normalize_text,
    parse_category,
    parse_timestamp,
)


def test_normalize_currency_defaults_and_uppercases() -> None:
    assert normalize_currency(None) == "USD"
    assert normalize_currency("  ") == "USD"
    assert normalize_currency(" eur ") == "EUR"


def test_normalize_text_strips_and_maps_none() -> None:
    assert normalize_text(None) == ""
    assert normalize_text("  Checking ") == "Checking"


def test_parse_category_accepts_members_and_values() -> None:
    assert parse_category(AssetCategory, AssetCategory.SAVINGS) is (
        AssetCategory.SAVINGS
    )
    assert parse_category(AssetCategory, " Checking ") is (
        AssetCategory.CHECKING
    )


def test_parse_category_rejects_unknown_value() -> None:
    with pytest.raises(ValidationError, match="AssetCategory"):
        parse_category(AssetCategory, "art")


def test_parse_timestamp_distinguishes_dates_and_datetimes() -> None:
    assert parse_timestamp("2024-01-31") == date(2024, 1, 31)
    parsed = parse_timestamp("2024-01-31T10:00:00+00:00")
    assert parsed == datetime(2024, 1, 31, 10, tzinfo=timezone.utc)
    assert parse_timestamp(None) is None
    assert parse_timestamp("") is None


def test_parse_timestamp_rejects_invalid_strings() -> None:
    with pytest.raises(ValidationError):
        parse_timestamp("31/01/2024")


def test_format_timestamp_uses_iso_format() -> None:
    assert format_timestamp(date(2024, 1, 31)) == "2024-01-31"
    assert format_timestamp(None) is None
