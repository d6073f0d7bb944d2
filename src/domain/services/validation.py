"""Domain validation helpers for ledger entities."""

from decimal import Decimal
from logging import Logger

from src.domain.errors import ValidationError
from src.domain.models import Asset, ExpenseCategory, IncomeStream, Liability


def _require_identity(entity_id: str, name: str) -> list[str]:
    problems = []
    if not entity_id or not str(entity_id).strip():
        problems.append("id is required")
    if not name or not str(name).strip():
        problems.append("name is required")
    return problems


def _require_non_negative(field_name: str, amount: Decimal) -> list[str]:
    if not amount.is_finite() or amount < 0:
        return [
            f"{field_name} must be a finite non-negative amount (got {amount})"
        ]
    return []


def _raise_if_invalid(
    kind: str,
    entity_id: str,
    problems: list[str],
    logger: Logger | None,
) -> None:
    if not problems:
        return
    message = f"Invalid {kind} '{entity_id}': " + "; ".join(problems)
    if logger is not None:
        logger.warning(message)
    raise ValidationError(message)


def validate_asset(asset: Asset, logger: Logger | None = None) -> None:
    """Check that an asset can be stored.

    Args:
        asset: Asset to validate.
        logger: Optional logger used for warnings before raising.

    Raises:
        ValidationError: If id or name is empty or the value is negative.
    """
    problems = _require_identity(asset.id, asset.name)
    problems += _require_non_negative("value", asset.value)
    _raise_if_invalid("asset", asset.id, problems, logger)


def validate_liability(
    liability: Liability,
    logger: Logger | None = None,
) -> None:
    """Check that a liability can be stored.

    Args:
        liability: Liability to validate.
        logger: Optional logger used for warnings before raising.

    Raises:
        ValidationError: If id or name is empty, or the balance or the
            interest rate is negative.
    """
    problems = _require_identity(liability.id, liability.name)
    problems += _require_non_negative("balance", liability.balance)
    problems += _require_non_negative(
        "interest_rate",
        liability.interest_rate,
    )
    _raise_if_invalid("liability", liability.id, problems, logger)


def validate_income_stream(
    income: IncomeStream,
    logger: Logger | None = None,
) -> None:
    """Check that an income stream can be stored."""
    problems = _require_identity(income.id, income.name)
    problems += _require_non_negative("monthly_amount", income.monthly_amount)
    _raise_if_invalid("income stream", income.id, problems, logger)


def validate_expense(
    expense: ExpenseCategory,
    logger: Logger | None = None,
) -> None:
    """Check that an expense category can be stored."""
    problems = _require_identity(expense.id, expense.name)
    problems += _require_non_negative(
        "monthly_amount",
        expense.monthly_amount,
    )
    _raise_if_invalid("expense", expense.id, problems, logger)


__all__ = [
    "validate_asset",
    "validate_liability",
    "validate_income_stream",
    "validate_expense",
]
