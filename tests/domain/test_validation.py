"""Tests for ledger entity validation."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.domain.errors import ValidationError
from src.domain.models import Asset, ExpenseCategory, IncomeStream, Liability
from src.domain.services.validation import (
    validate_asset,
    validate_expense,
    validate_income_stream,
    validate_liability,
)


def test_valid_entities_pass() -> None:
    validate_asset(Asset(id="a1", name="Cash", category="checking", value=0))
    validate_liability(
        Liability(id="l1", name="Loan", category="car_loan", balance=10)
    )
    validate_income_stream(
        IncomeStream(id="i1", name="Job", monthly_amount=100)
    )
    validate_expense(ExpenseCategory(id="e1", name="Rent", monthly_amount=1))


def test_negative_asset_value_is_rejected_and_logged() -> None:
    logger = MagicMock()
    asset = Asset(id="a1", name="Cash", category="checking", value=-1)

    with pytest.raises(ValidationError, match="value must be a finite non-negative amount"):
        validate_asset(asset, logger)

    logger.warning.assert_called_once()


def test_nan_amount_is_rejected() -> None:
    expense = ExpenseCategory(
        id="e1",
        name="Rent",
        monthly_amount=Decimal("NaN"),
    )

    with pytest.raises(ValidationError):
        validate_expense(expense)


@pytest.mark.parametrize(
    "raw",
    [Decimal("Infinity"), "-Infinity", "inf", float("inf")],
)
def test_infinite_amount_is_rejected(raw) -> None:
    asset = Asset(id="a1", name="Cash", category="checking", value=raw)

    with pytest.raises(ValidationError, match="finite"):
        validate_asset(asset)


def test_liability_problems_are_collected() -> None:
    liability = Liability(
        id="",
        name=" ",
        category="mortgage",
        balance=-5,
        interest_rate=-1,
    )

    with pytest.raises(ValidationError) as excinfo:
        validate_liability(liability)

    message = str(excinfo.value)
    assert "id is required" in message
    assert "name is required" in message
    assert "balance" in message
    assert "interest_rate" in message


def test_negative_income_is_rejected() -> None:
    with pytest.raises(ValidationError):
        validate_income_stream(
            IncomeStream(id="i1", name="Job", monthly_amount=-100)
        )
