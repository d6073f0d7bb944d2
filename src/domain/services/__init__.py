"""Domain services package."""

from .finance import (
    compute_asset_breakdown,
    compute_cashflow_summary,
    compute_liability_breakdown,
    compute_liquid_assets,
    compute_net_worth_summary,
)
from .ledger_store import LedgerStore
from .metrics import compute_kpi_metrics
from .risk import DEFAULT_RISK_THRESHOLDS, RiskThresholds, assess_risk
from .snapshot_history import SnapshotHistory
from .trends import compute_financial_trends
from .validation import (
    validate_asset,
    validate_expense,
    validate_income_stream,
    validate_liability,
)

__all__ = [
    "compute_asset_breakdown",
    "compute_cashflow_summary",
    "compute_liability_breakdown",
    "compute_liquid_assets",
    "compute_net_worth_summary",
    "compute_kpi_metrics",
    "compute_financial_trends",
    "assess_risk",
    "RiskThresholds",
    "DEFAULT_RISK_THRESHOLDS",
    "LedgerStore",
    "SnapshotHistory",
    "validate_asset",
    "validate_liability",
    "validate_income_stream",
    "validate_expense",
]
