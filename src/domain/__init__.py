"""Domain package for ledger entities, analytics rules and core models."""

from .constants import (
    DEFAULT_CURRENCY,
    AssetCategory,
    ExpenseType,
    IncomeType,
    LiabilityCategory,
    RiskLevel,
    TrendDirection,
)
from .errors import ValidationError
from .models import (
    Asset,
    CashflowSummary,
    CategoryBreakdown,
    ExpenseCategory,
    FinancialAnalytics,
    FinancialTrends,
    IncomeStream,
    KPIMetrics,
    Liability,
    NetWorthSnapshot,
    NetWorthSummary,
    RiskAssessment,
)
from .policies import risk_level_for_factor_count
from .services import (
    LedgerStore,
    RiskThresholds,
    SnapshotHistory,
    assess_risk,
    compute_financial_trends,
    compute_kpi_metrics,
    compute_net_worth_summary,
)

__all__ = [
    "DEFAULT_CURRENCY",
    "AssetCategory",
    "LiabilityCategory",
    "IncomeType",
    "ExpenseType",
    "RiskLevel",
    "TrendDirection",
    "ValidationError",
    "Asset",
    "Liability",
    "IncomeStream",
    "ExpenseCategory",
    "CategoryBreakdown",
    "NetWorthSummary",
    "CashflowSummary",
    "NetWorthSnapshot",
    "KPIMetrics",
    "FinancialTrends",
    "RiskAssessment",
    "FinancialAnalytics",
    "risk_level_for_factor_count",
    "LedgerStore",
    "SnapshotHistory",
    "RiskThresholds",
    "assess_risk",
    "compute_financial_trends",
    "compute_kpi_metrics",
    "compute_net_worth_summary",
]
