"""Domain services deriving KPI ratios from ledger aggregates.

Every ratio has a defined value when its denominator is zero (zero), so the
calculations never raise. ``compute_debt_to_worth_ratio`` is the one
exception to finiteness: it returns ``Decimal("Infinity")`` for a negative
net worth to signal insolvency.
"""

from collections.abc import Sequence
from decimal import Decimal

from src.domain.constants import AssetCategory
from src.domain.models import (
    Asset,
    CategoryBreakdown,
    ExpenseCategory,
    IncomeStream,
    KPIMetrics,
    Liability,
    NetWorthSnapshot,
)
from src.domain.services.finance import (
    compute_asset_breakdown,
    compute_cashflow_summary,
    compute_investment_assets,
    compute_liquid_assets,
    compute_monthly_debt_payments,
    compute_net_worth_summary,
)
from src.domain.services.snapshot_history import latest_pair
from src.utils.decimal_utils import (
    HUNDRED,
    INFINITY,
    ZERO,
    safe_divide,
    safe_percent,
)


def compute_debt_to_income_ratio(
    monthly_debt_payments: Decimal,
    monthly_income: Decimal,
) -> Decimal:
    """Return monthly debt payments as a percentage of monthly income."""
    return safe_percent(monthly_debt_payments, monthly_income)


def compute_debt_to_worth_ratio(
    total_liabilities: Decimal,
    net_worth: Decimal,
) -> Decimal:
    """Return liabilities as a percentage of net worth.

    Returns:
        Decimal: Zero when net worth is zero, ``Decimal("Infinity")`` when
        net worth is negative, the percentage otherwise.
    """
    if net_worth < 0:
        return INFINITY
    if net_worth == 0:
        return ZERO
    return (total_liabilities / net_worth) * HUNDRED


def compute_savings_rate(
    monthly_net_income: Decimal,
    monthly_income: Decimal,
) -> Decimal:
    """Return monthly net income as a percentage of monthly income."""
    return safe_percent(monthly_net_income, monthly_income)


def compute_liquidity_ratio(
    liquid_assets: Decimal,
    monthly_expenses: Decimal,
) -> Decimal:
    """Return how many months of expenses liquid assets cover."""
    return safe_divide(liquid_assets, monthly_expenses)


def compute_emergency_fund_months(
    liquid_assets: Decimal,
    monthly_expenses: Decimal,
) -> Decimal:
    """Return emergency fund coverage in months.

    Numerically identical to the liquidity ratio; both describe runway.
    """
    return safe_divide(liquid_assets, monthly_expenses)


def compute_investment_ratio(
    investment_assets: Decimal,
    total_assets: Decimal,
) -> Decimal:
    """Return invested assets as a percentage of total assets."""
    return safe_percent(investment_assets, total_assets)


def compute_net_worth_growth_rate(
    history: Sequence[NetWorthSnapshot],
) -> Decimal:
    """Return the percent change between the two latest snapshots.

    Args:
        history: Snapshots in append order.

    Returns:
        Decimal: Zero with fewer than two snapshots or when the earlier
        snapshot's net worth is zero.
    """
    pair = latest_pair(history)
    if pair is None:
        return ZERO
    previous, current = pair
    return safe_percent(
        current.net_worth - previous.net_worth,
        previous.net_worth,
    )


def compute_asset_allocation(
    breakdown: CategoryBreakdown,
    total_assets: Decimal,
) -> CategoryBreakdown:
    """Return each asset category's share of total assets, in percent."""
    if total_assets == 0:
        return CategoryBreakdown.zeros(AssetCategory)
    return CategoryBreakdown.from_items(
        AssetCategory,
        (
            (category, safe_percent(amount, total_assets))
            for category, amount in breakdown.items()
        ),
    )


def compute_kpi_metrics(
    assets: Sequence[Asset],
    liabilities: Sequence[Liability],
    streams: Sequence[IncomeStream],
    expenses: Sequence[ExpenseCategory],
    history: Sequence[NetWorthSnapshot],
    *,
    currency_code: str,
) -> KPIMetrics:
    """Compute the full KPI set from the current ledger and history.

    Args:
        assets: Assets held by the ledger.
        liabilities: Liabilities held by the ledger.
        streams: Income streams held by the ledger.
        expenses: Expense categories held by the ledger.
        history: Net worth snapshots in append order.
        currency_code: Reporting currency of the amounts.

    Returns:
        KPIMetrics: Freshly computed ratios.
    """
    summary = compute_net_worth_summary(
        assets,
        liabilities,
        currency_code=currency_code,
    )
    cashflow = compute_cashflow_summary(
        streams,
        expenses,
        currency_code=currency_code,
    )
    liquid_assets = compute_liquid_assets(assets)

    return KPIMetrics(
        debt_to_income_ratio=compute_debt_to_income_ratio(
            compute_monthly_debt_payments(liabilities),
            cashflow.monthly_income,
        ),
        debt_to_worth_ratio=compute_debt_to_worth_ratio(
            summary.liability_total,
            summary.net_worth,
        ),
        savings_rate=compute_savings_rate(
            cashflow.monthly_net_income,
            cashflow.monthly_income,
        ),
        liquidity_ratio=compute_liquidity_ratio(
            liquid_assets,
            cashflow.monthly_expenses,
        ),
        investment_ratio=compute_investment_ratio(
            compute_investment_assets(assets),
            summary.asset_total,
        ),
        net_worth_growth_rate=compute_net_worth_growth_rate(history),
        emergency_fund_months=compute_emergency_fund_months(
            liquid_assets,
            cashflow.monthly_expenses,
        ),
        asset_allocation=compute_asset_allocation(
            compute_asset_breakdown(assets),
            summary.asset_total,
        ),
    )


__all__ = [
    "compute_debt_to_income_ratio",
    "compute_debt_to_worth_ratio",
    "compute_savings_rate",
    "compute_liquidity_ratio",
    "compute_emergency_fund_months",
    "compute_investment_ratio",
    "compute_net_worth_growth_rate",
    "compute_asset_allocation",
    "compute_kpi_metrics",
]
