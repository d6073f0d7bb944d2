"""Domain services comparing the two latest net worth snapshots."""

from collections.abc import Sequence
from decimal import Decimal

from src.domain.constants import TrendDirection
from src.domain.models import FinancialTrends, NetWorthSnapshot
from src.domain.services.snapshot_history import latest_pair
from src.utils.decimal_utils import ZERO, safe_percent


def _direction(current: Decimal, previous: Decimal) -> TrendDirection:
    if current > previous:
        return TrendDirection.INCREASING
    if current < previous:
        return TrendDirection.DECREASING
    return TrendDirection.STABLE


def compute_financial_trends(
    history: Sequence[NetWorthSnapshot],
    savings_rate: Decimal,
) -> FinancialTrends:
    """Classify net worth and debt direction between the latest snapshots.

    Args:
        history: Snapshots in append order.
        savings_rate: Current savings rate, reported as the savings trend.

    Returns:
        FinancialTrends: A stable report with zero deltas when fewer than
        two snapshots exist.
    """
    pair = latest_pair(history)
    if pair is None:
        return FinancialTrends(
            net_worth_trend=TrendDirection.STABLE,
            net_worth_change_percent=ZERO,
            debt_trend=TrendDirection.STABLE,
            savings_trend_percent=ZERO,
        )

    previous, current = pair
    return FinancialTrends(
        net_worth_trend=_direction(current.net_worth, previous.net_worth),
        net_worth_change_percent=safe_percent(
            current.net_worth - previous.net_worth,
            previous.net_worth,
        ),
        debt_trend=_direction(
            current.total_liabilities,
            previous.total_liabilities,
        ),
        savings_trend_percent=savings_rate,
        # TODO: derive from per-snapshot income and expense totals once
        # snapshots capture the cashflow summary.
        income_growth_percent=ZERO,
        expense_growth_percent=ZERO,
    )


__all__ = ["compute_financial_trends"]
