"""Tests for aggregate and report models."""

from datetime import date
from decimal import Decimal

from src.domain.constants import AssetCategory, LiabilityCategory
from src.domain.models import (
    CashflowSummary,
    CategoryBreakdown,
    NetWorthSnapshot,
)


def test_zero_breakdown_lists_every_category() -> None:
    breakdown = CategoryBreakdown.zeros(AssetCategory)

    assert [category for category, _ in breakdown.items()] == list(
        AssetCategory
    )
    assert breakdown.total() == Decimal("0")


def test_breakdown_from_items_sums_per_category() -> None:
    breakdown = CategoryBreakdown.from_items(
        AssetCategory,
        [
            (AssetCategory.SAVINGS, Decimal("10")),
            (AssetCategory.CHECKING, Decimal("5")),
            (AssetCategory.SAVINGS, Decimal("2.5")),
        ],
    )

    assert breakdown[AssetCategory.SAVINGS] == Decimal("12.5")
    assert breakdown[AssetCategory.CHECKING] == Decimal("5")
    assert breakdown[AssetCategory.PROPERTY] == Decimal("0")
    assert breakdown.to_dict()["savings"] == "12.5"


def test_cashflow_summary_projects_annual_savings() -> None:
    summary = CashflowSummary(
        monthly_income=Decimal("6000"),
        monthly_expenses=Decimal("4000"),
        currency_code="USD",
    )

    assert summary.monthly_net_income == Decimal("2000")
    assert summary.annual_projected_savings == Decimal("24000")


def test_snapshot_from_dict_restores_breakdowns() -> None:
    snapshot = NetWorthSnapshot(
        date=date(2024, 1, 31),
        total_assets=Decimal("15000"),
        total_liabilities=Decimal("200000"),
        net_worth=Decimal("-185000"),
        currency="USD",
        asset_breakdown=CategoryBreakdown.from_items(
            AssetCategory,
            [(AssetCategory.CHECKING, Decimal("15000"))],
        ),
        liability_breakdown=CategoryBreakdown.from_items(
            LiabilityCategory,
            [(LiabilityCategory.MORTGAGE, Decimal("200000"))],
        ),
    )

    restored = NetWorthSnapshot.from_dict(snapshot.to_dict())

    assert restored == snapshot
    assert restored.liability_breakdown[LiabilityCategory.MORTGAGE] == (
        Decimal("200000")
    )


def test_cashflow_summary_serializes_derived_totals() -> None:
    payload = CashflowSummary(
        monthly_income=Decimal("100"),
        monthly_expenses=Decimal("150"),
        currency_code="EUR",
    ).to_dict()

    assert payload["monthly_net_income"] == "-50"
    assert payload["annual_projected_savings"] == "-600"
    assert payload["currency_code"] == "EUR"
