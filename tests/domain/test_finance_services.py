"""Tests for ledger aggregation services."""

from decimal import Decimal

from src.domain.constants import AssetCategory, LiabilityCategory
from src.domain.models import Asset, ExpenseCategory, IncomeStream, Liability
from src.domain.services.finance import (
    compute_asset_breakdown,
    compute_cashflow_summary,
    compute_investment_assets,
    compute_liability_breakdown,
    compute_liquid_assets,
    compute_monthly_debt_payments,
    compute_net_worth_summary,
)


ASSETS = [
    Asset(id="a1", name="Checking", category="checking", value=5000),
    Asset(id="a2", name="Savings", category="savings", value=10000),
    Asset(id="a3", name="401k", category="retirement", value=30000),
    Asset(id="a4", name="House", category="property", value=250000),
]
LIABILITIES = [
    Liability(
        id="l1",
        name="Mortgage",
        category="mortgage",
        balance=200000,
        monthly_payment=1200,
    ),
    Liability(
        id="l2",
        name="Card",
        category="credit_card",
        balance=1500,
        monthly_payment=100,
    ),
]


def test_net_worth_summary_subtracts_liabilities() -> None:
    summary = compute_net_worth_summary(
        ASSETS,
        LIABILITIES,
        currency_code="USD",
    )

    assert summary.asset_total == Decimal("295000")
    assert summary.liability_total == Decimal("201500")
    assert summary.net_worth == Decimal("93500")
    assert summary.currency_code == "USD"
    assert summary.to_dict()["net_worth"] == "93500"


def test_empty_ledger_sums_to_zero() -> None:
    summary = compute_net_worth_summary([], [], currency_code="USD")

    assert summary.net_worth == Decimal("0")
    assert compute_asset_breakdown([]).total() == Decimal("0")


def test_breakdowns_cover_every_category() -> None:
    assets = compute_asset_breakdown(ASSETS)
    liabilities = compute_liability_breakdown(LIABILITIES)

    assert len(assets.items()) == len(AssetCategory)
    assert assets[AssetCategory.PROPERTY] == Decimal("250000")
    assert assets[AssetCategory.VEHICLE] == Decimal("0")
    assert liabilities[LiabilityCategory.CREDIT_CARD] == Decimal("1500")
    assert assets.total() == Decimal("295000")


def test_liquid_and_investment_assets_use_category_groups() -> None:
    assert compute_liquid_assets(ASSETS) == Decimal("15000")
    assert compute_investment_assets(ASSETS) == Decimal("30000")
    assert compute_monthly_debt_payments(LIABILITIES) == Decimal("1300")


def test_cashflow_ignores_inactive_income() -> None:
    streams = [
        IncomeStream(id="i1", name="Job", monthly_amount=6000),
        IncomeStream(
            id="i2",
            name="Old gig",
            monthly_amount=800,
            is_active=False,
        ),
    ]
    expenses = [
        ExpenseCategory(id="e1", name="Rent", monthly_amount=2500),
        ExpenseCategory(id="e2", name="Food", monthly_amount=1500),
    ]

    summary = compute_cashflow_summary(streams, expenses, currency_code="USD")

    assert summary.monthly_income == Decimal("6000")
    assert summary.monthly_expenses == Decimal("4000")
    assert summary.monthly_net_income == Decimal("2000")
