"""Tests for KPI metric services."""

from datetime import date
from decimal import Decimal

from src.domain.constants import AssetCategory, LiabilityCategory
from src.domain.models import (
    Asset,
    CategoryBreakdown,
    ExpenseCategory,
    IncomeStream,
    NetWorthSnapshot,
)
from src.domain.services.metrics import (
    compute_asset_allocation,
    compute_debt_to_income_ratio,
    compute_debt_to_worth_ratio,
    compute_kpi_metrics,
    compute_liquidity_ratio,
    compute_net_worth_growth_rate,
    compute_savings_rate,
)


def _snapshot(net_worth: str) -> NetWorthSnapshot:
    return NetWorthSnapshot(
        date=date(2024, 1, 1),
        total_assets=Decimal(net_worth),
        total_liabilities=Decimal("0"),
        net_worth=Decimal(net_worth),
        currency="USD",
        asset_breakdown=CategoryBreakdown.zeros(AssetCategory),
        liability_breakdown=CategoryBreakdown.zeros(LiabilityCategory),
    )


def test_ratios_are_zero_when_denominator_is_zero() -> None:
    assert compute_debt_to_income_ratio(Decimal("500"), Decimal("0")) == 0
    assert compute_savings_rate(Decimal("-1000"), Decimal("0")) == 0
    assert compute_liquidity_ratio(Decimal("5000"), Decimal("0")) == 0


def test_debt_to_worth_ratio_signals_negative_net_worth() -> None:
    assert compute_debt_to_worth_ratio(
        Decimal("200000"),
        Decimal("-185000"),
    ).is_infinite()
    assert compute_debt_to_worth_ratio(Decimal("100"), Decimal("0")) == 0
    assert compute_debt_to_worth_ratio(
        Decimal("50"),
        Decimal("200"),
    ) == Decimal("25")


def test_growth_rate_needs_two_snapshots() -> None:
    assert compute_net_worth_growth_rate([]) == 0
    assert compute_net_worth_growth_rate([_snapshot("100")]) == 0
    assert compute_net_worth_growth_rate(
        [_snapshot("50"), _snapshot("100"), _snapshot("110")]
    ) == Decimal("10")
    assert compute_net_worth_growth_rate(
        [_snapshot("0"), _snapshot("100")]
    ) == 0


def test_asset_allocation_is_percent_of_total() -> None:
    breakdown = CategoryBreakdown.from_items(
        AssetCategory,
        [
            (AssetCategory.CHECKING, Decimal("25")),
            (AssetCategory.INVESTMENT, Decimal("75")),
        ],
    )

    allocation = compute_asset_allocation(breakdown, Decimal("100"))

    assert allocation[AssetCategory.CHECKING] == Decimal("25")
    assert allocation[AssetCategory.INVESTMENT] == Decimal("75")
    assert compute_asset_allocation(breakdown, Decimal("0")).total() == 0


def test_kpi_metrics_for_income_free_ledger() -> None:
    metrics = compute_kpi_metrics(
        [],
        [],
        [],
        [ExpenseCategory(id="e1", name="Rent", monthly_amount=1000)],
        [],
        currency_code="USD",
    )

    assert metrics.savings_rate == 0
    assert metrics.debt_to_income_ratio == 0
    assert metrics.liquidity_ratio == 0
    assert metrics.emergency_fund_months == 0


def test_kpi_metrics_liquidity_equals_emergency_fund() -> None:
    metrics = compute_kpi_metrics(
        [
            Asset(id="a1", name="Checking", category="checking", value=5000),
            Asset(id="a2", name="Brokerage", category="investment",
                  value=5000),
        ],
        [],
        [IncomeStream(id="i1", name="Job", monthly_amount=4000)],
        [ExpenseCategory(id="e1", name="Rent", monthly_amount=2000)],
        [],
        currency_code="USD",
    )

    assert metrics.liquidity_ratio == Decimal("2.5")
    assert metrics.emergency_fund_months == metrics.liquidity_ratio
    assert metrics.savings_rate == Decimal("50")
    assert metrics.investment_ratio == Decimal("50")
