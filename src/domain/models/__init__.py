"""Domain models package."""

from .finance import (
    CashflowSummary,
    CategoryBreakdown,
    FinancialAnalytics,
    FinancialTrends,
    KPIMetrics,
    NetWorthSnapshot,
    NetWorthSummary,
    RiskAssessment,
)
from .ledger import Asset, ExpenseCategory, IncomeStream, Liability

__all__ = [
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
]
