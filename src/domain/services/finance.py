"""Domain services for ledger aggregates."""

from collections.abc import Iterable, Sequence
from decimal import Decimal

from src.domain.constants import (
    INVESTMENT_ASSET_CATEGORIES,
    LIQUID_ASSET_CATEGORIES,
    AssetCategory,
    LiabilityCategory,
)
from src.domain.models import (
    Asset,
    CashflowSummary,
    CategoryBreakdown,
    ExpenseCategory,
    IncomeStream,
    Liability,
    NetWorthSummary,
)
from src.utils.decimal_utils import ZERO


def _sum(amounts: Iterable[Decimal]) -> Decimal:
    return sum(amounts, ZERO)


def compute_total_assets(assets: Iterable[Asset]) -> Decimal:
    """Return the sum of all asset values."""
    return _sum(asset.value for asset in assets)


def compute_total_liabilities(liabilities: Iterable[Liability]) -> Decimal:
    """Return the sum of all outstanding liability balances."""
    return _sum(liability.balance for liability in liabilities)


def compute_net_worth_summary(
    assets: Sequence[Asset],
    liabilities: Sequence[Liability],
    *,
    currency_code: str,
) -> NetWorthSummary:
    """Compute net worth totals from the current ledger.

    Args:
        assets: Assets held by the ledger.
        liabilities: Liabilities held by the ledger.
        currency_code: Reporting currency of the amounts.

    Returns:
        NetWorthSummary: Computed asset, liability, and net worth totals.
    """
    asset_total = compute_total_assets(assets)
    liability_total = compute_total_liabilities(liabilities)
    return NetWorthSummary(
        asset_total=asset_total,
        liability_total=liability_total,
        net_worth=asset_total - liability_total,
        currency_code=currency_code,
    )


def compute_asset_breakdown(assets: Iterable[Asset]) -> CategoryBreakdown:
    """Return asset totals for every AssetCategory, zeros included."""
    return CategoryBreakdown.from_items(
        AssetCategory,
        ((asset.category, asset.value) for asset in assets),
    )


def compute_liability_breakdown(
    liabilities: Iterable[Liability],
) -> CategoryBreakdown:
    """Return liability totals for every LiabilityCategory, zeros included."""
    return CategoryBreakdown.from_items(
        LiabilityCategory,
        ((liability.category, liability.balance) for liability in liabilities),
    )


def compute_liquid_assets(assets: Iterable[Asset]) -> Decimal:
    """Return the value held in checking and savings assets."""
    return _sum(
        asset.value
        for asset in assets
        if asset.category in LIQUID_ASSET_CATEGORIES
    )


def compute_investment_assets(assets: Iterable[Asset]) -> Decimal:
    """Return the value held in investment, retirement and crypto assets."""
    return _sum(
        asset.value
        for asset in assets
        if asset.category in INVESTMENT_ASSET_CATEGORIES
    )


def compute_monthly_debt_payments(liabilities: Iterable[Liability]) -> Decimal:
    """Return the sum of scheduled monthly liability payments."""
    return _sum(liability.monthly_payment for liability in liabilities)


def compute_monthly_income(streams: Iterable[IncomeStream]) -> Decimal:
    """Return monthly income from active streams only."""
    return _sum(stream.monthly_amount for stream in streams if stream.is_active)


def compute_monthly_expenses(expenses: Iterable[ExpenseCategory]) -> Decimal:
    """Return monthly spending across all expense categories."""
    return _sum(expense.monthly_amount for expense in expenses)


def compute_cashflow_summary(
    streams: Sequence[IncomeStream],
    expenses: Sequence[ExpenseCategory],
    *,
    currency_code: str,
) -> CashflowSummary:
    """Compute monthly income and expense totals.

    Args:
        streams: Income streams held by the ledger.
        expenses: Expense categories held by the ledger.
        currency_code: Reporting currency of the amounts.

    Returns:
        CashflowSummary: Monthly totals, with net income and annual
        projected savings available as properties.
    """
    return CashflowSummary(
        monthly_income=compute_monthly_income(streams),
        monthly_expenses=compute_monthly_expenses(expenses),
        currency_code=currency_code,
    )


__all__ = [
    "compute_total_assets",
    "compute_total_liabilities",
    "compute_net_worth_summary",
    "compute_asset_breakdown",
    "compute_liability_breakdown",
    "compute_liquid_assets",
    "compute_investment_assets",
    "compute_monthly_debt_payments",
    "compute_monthly_income",
    "compute_monthly_expenses",
    "compute_cashflow_summary",
]
