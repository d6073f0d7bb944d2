"""Domain models for financial aggregates and reports."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable, Iterator, Mapping

from src.domain.constants import (
    MONTHS_PER_YEAR,
    AssetCategory,
    LiabilityCategory,
    RiskLevel,
    TrendDirection,
)
from src.domain.normalization import (
    format_timestamp,
    parse_category,
    parse_timestamp,
)
from src.utils.decimal_utils import ZERO, coerce_decimal


@dataclass(frozen=True)
class CategoryBreakdown:
    """Complete table of amounts, one slot per category variant.

    Slots follow the declaration order of ``category_type`` and are
    zero-initialised, so every category is always present.

    Attributes:
        category_type: Enumeration the table is indexed by.
        amounts: One amount per enumeration member, in declaration order.
    """

    category_type: type[Enum]
    amounts: tuple[Decimal, ...]

    @classmethod
    def zeros(cls, category_type: type[Enum]) -> "CategoryBreakdown":
        return cls(category_type, tuple(ZERO for _ in category_type))

    @classmethod
    def from_items(
        cls,
        category_type: type[Enum],
        items: Iterable[tuple[Enum, Decimal]],
    ) -> "CategoryBreakdown":
        """Sum amounts per category in a single pass over ``items``."""
        members = tuple(category_type)
        slots = [ZERO] * len(members)
        for category, amount in items:
            slots[members.index(category)] += amount
        return cls(category_type, tuple(slots))

    @classmethod
    def from_dict(
        cls,
        category_type: type[Enum],
        payload: Mapping[str, Any],
    ) -> "CategoryBreakdown":
        return cls.from_items(
            category_type,
            (
                (parse_category(category_type, key), coerce_decimal(value))
                for key, value in payload.items()
            ),
        )

    def __getitem__(self, category: Enum) -> Decimal:
        return self.amounts[tuple(self.category_type).index(category)]

    def __iter__(self) -> Iterator[Enum]:
        return iter(self.category_type)

    def items(self) -> list[tuple[Enum, Decimal]]:
        return list(zip(self.category_type, self.amounts))

    def total(self) -> Decimal:
        return sum(self.amounts, ZERO)

    def to_dict(self) -> dict[str, str]:
        return {
            category.value: str(amount)
            for category, amount in self.items()
        }


@dataclass(frozen=True)
class NetWorthSummary:
    """Summary of net worth figures.

    Attributes:
        asset_total: Sum of asset values.
        liability_total: Sum of liability balances.
        net_worth: Assets minus liabilities.
        currency_code: Reporting currency.
    """

    asset_total: Decimal
    liability_total: Decimal
    net_worth: Decimal
    currency_code: str

    def to_dict(self) -> dict[str, str]:
        return {
            "asset_total": str(self.asset_total),
            "liability_total": str(self.liability_total),
            "net_worth": str(self.net_worth),
            "currency_code": self.currency_code,
        }


@dataclass(frozen=True)
class CashflowSummary:
    """Monthly income and expense totals."""

    monthly_income: Decimal
    monthly_expenses: Decimal
    currency_code: str

    @property
    def monthly_net_income(self) -> Decimal:
        """Return monthly_income minus monthly_expenses."""
        return self.monthly_income - self.monthly_expenses

    @property
    def annual_projected_savings(self) -> Decimal:
        """Return the monthly net income extrapolated over a year."""
        return self.monthly_net_income * MONTHS_PER_YEAR

    def to_dict(self) -> dict[str, str]:
        return {
            "monthly_income": str(self.monthly_income),
            "monthly_expenses": str(self.monthly_expenses),
            "monthly_net_income": str(self.monthly_net_income),
            "annual_projected_savings": str(self.annual_projected_savings),
            "currency_code": self.currency_code,
        }


@dataclass(frozen=True)
class NetWorthSnapshot:
    """Frozen capture of aggregate totals at a point in time.

    Attributes:
        date: Capture timestamp.
        total_assets: Sum of asset values.
        total_liabilities: Sum of liability balances.
        net_worth: total_assets minus total_liabilities.
        currency: Reporting currency.
        asset_breakdown: Asset totals per AssetCategory.
        liability_breakdown: Liability totals per LiabilityCategory.
    """

    date: datetime | date
    total_assets: Decimal
    total_liabilities: Decimal
    net_worth: Decimal
    currency: str
    asset_breakdown: CategoryBreakdown
    liability_breakdown: CategoryBreakdown

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": format_timestamp(self.date),
            "total_assets": str(self.total_assets),
            "total_liabilities": str(self.total_liabilities),
            "net_worth": str(self.net_worth),
            "currency": self.currency,
            "asset_breakdown": self.asset_breakdown.to_dict(),
            "liability_breakdown": self.liability_breakdown.to_dict(),
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "NetWorthSnapshot":
        return cls(
            date=parse_timestamp(payload["date"]),
            total_assets=coerce_decimal(payload["total_assets"]),
            total_liabilities=coerce_decimal(payload["total_liabilities"]),
            net_worth=coerce_decimal(payload["net_worth"]),
            currency=payload["currency"],
            asset_breakdown=CategoryBreakdown.from_dict(
                AssetCategory,
                payload.get("asset_breakdown") or {},
            ),
            liability_breakdown=CategoryBreakdown.from_dict(
                LiabilityCategory,
                payload.get("liability_breakdown") or {},
            ),
        )


@dataclass(frozen=True)
class KPIMetrics:
    """Key ratios derived from the current ledger and snapshot history.

    ``debt_to_worth_ratio`` is ``Decimal("Infinity")`` when net worth is
    negative; check ``is_infinite()`` before formatting or comparing it.
    """

    debt_to_income_ratio: Decimal
    debt_to_worth_ratio: Decimal
    savings_rate: Decimal
    liquidity_ratio: Decimal
    investment_ratio: Decimal
    net_worth_growth_rate: Decimal
    emergency_fund_months: Decimal
    asset_allocation: CategoryBreakdown

    def to_dict(self) -> dict[str, Any]:
        return {
            "debt_to_income_ratio": str(self.debt_to_income_ratio),
            "debt_to_worth_ratio": str(self.debt_to_worth_ratio),
            "savings_rate": str(self.savings_rate),
            "liquidity_ratio": str(self.liquidity_ratio),
            "investment_ratio": str(self.investment_ratio),
            "net_worth_growth_rate": str(self.net_worth_growth_rate),
            "emergency_fund_months": str(self.emergency_fund_months),
            "asset_allocation": self.asset_allocation.to_dict(),
        }


@dataclass(frozen=True)
class FinancialTrends:
    """Period-over-period comparison of the two latest snapshots.

    ``income_growth_percent`` and ``expense_growth_percent`` are always zero
    until income and expense history is tracked per snapshot.
    """

    net_worth_trend: TrendDirection
    net_worth_change_percent: Decimal
    debt_trend: TrendDirection
    savings_trend_percent: Decimal
    income_growth_percent: Decimal = ZERO
    expense_growth_percent: Decimal = ZERO

    def to_dict(self) -> dict[str, Any]:
        return {
            "net_worth_trend": self.net_worth_trend.value,
            "net_worth_change_percent": str(self.net_worth_change_percent),
            "debt_trend": self.debt_trend.value,
            "savings_trend_percent": str(self.savings_trend_percent),
            "income_growth_percent": str(self.income_growth_percent),
            "expense_growth_percent": str(self.expense_growth_percent),
        }


@dataclass(frozen=True)
class RiskAssessment:
    """Outcome of the ordered risk rules."""

    risk_level: RiskLevel
    risk_factors: list[str]
    recommendations: list[str]
    debt_burden: Decimal
    liquidity_concern: bool
    emergency_fund_sufficiency: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "risk_level": self.risk_level.value,
            "risk_factors": list(self.risk_factors),
            "recommendations": list(self.recommendations),
            "debt_burden": str(self.debt_burden),
            "liquidity_concern": self.liquidity_concern,
            "emergency_fund_sufficiency": self.emergency_fund_sufficiency,
        }


@dataclass(frozen=True)
class FinancialAnalytics:
    """Composite report returned by the analytics facade."""

    timestamp: datetime
    net_worth_history: list[NetWorthSnapshot]
    cashflow: CashflowSummary
    metrics: KPIMetrics
    trends: FinancialTrends
    risk_assessment: RiskAssessment

    @property
    def monthly_income_total(self) -> Decimal:
        return self.cashflow.monthly_income

    @property
    def monthly_expenses_total(self) -> Decimal:
        return self.cashflow.monthly_expenses

    @property
    def monthly_net_income(self) -> Decimal:
        return self.cashflow.monthly_net_income

    @property
    def annual_projected_savings(self) -> Decimal:
        return self.cashflow.annual_projected_savings

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": format_timestamp(self.timestamp),
            "net_worth_history": [
                snapshot.to_dict() for snapshot in self.net_worth_history
            ],
            "monthly_income_total": str(self.monthly_income_total),
            "monthly_expenses_total": str(self.monthly_expenses_total),
            "monthly_net_income": str(self.monthly_net_income),
            "annual_projected_savings": str(self.annual_projected_savings),
            "metrics": self.metrics.to_dict(),
            "trends": self.trends.to_dict(),
            "risk_assessment": self.risk_assessment.to_dict(),
        }


__all__ = [
    "CategoryBreakdown",
    "NetWorthSummary",
    "CashflowSummary",
    "NetWorthSnapshot",
    "KPIMetrics",
    "FinancialTrends",
    "RiskAssessment",
    "FinancialAnalytics",
]
