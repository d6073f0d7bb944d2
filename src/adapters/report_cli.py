"""CLI adapter printing the analytics report of the stored ledger."""

from decimal import Decimal

from src.application.use_cases.persist_ledger import LoadLedgerUseCase
from src.domain.errors import ValidationError
from src.domain.models import FinancialAnalytics
from src.infrastructure.container import (
    build_financial_engine,
    build_ledger_repository,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.settings import LedgerSettings


def _format_ratio(value: Decimal, suffix: str = "") -> str:
    """Format a ratio, spelling out the unbounded sentinel."""
    if value.is_infinite():
        return "unbounded"
    return f"{value:,.2f}{suffix}"


def render_report(analytics: FinancialAnalytics, currency: str) -> list[str]:
    """Return the report lines for an analytics result.

    Args:
        analytics: Report produced by the engine.
        currency: Reporting currency code.

    Returns:
        list[str]: Lines ready to print.
    """
    latest = analytics.net_worth_history[-1]
    metrics = analytics.metrics
    trends = analytics.trends
    risk = analytics.risk_assessment
    lines = [
        f"Net worth report ({currency}, snapshots={len(analytics.net_worth_history)})",
        f"Assets: {latest.total_assets:,.2f}",
        f"Liabilities: {latest.total_liabilities:,.2f}",
        f"Net worth: {latest.net_worth:,.2f} ({trends.net_worth_trend.value}, "
        f"{_format_ratio(trends.net_worth_change_percent, '%')})",
        f"Monthly income: {analytics.monthly_income_total:,.2f}",
        f"Monthly expenses: {analytics.monthly_expenses_total:,.2f}",
        f"Monthly net income: {analytics.monthly_net_income:,.2f}",
        f"Annual projected savings: {analytics.annual_projected_savings:,.2f}",
        f"Debt-to-income: {_format_ratio(metrics.debt_to_income_ratio, '%')}",
        f"Debt-to-worth: {_format_ratio(metrics.debt_to_worth_ratio, '%')}",
        f"Savings rate: {_format_ratio(metrics.savings_rate, '%')}",
        f"Liquidity ratio: {_format_ratio(metrics.liquidity_ratio)}",
        f"Investment ratio: {_format_ratio(metrics.investment_ratio, '%')}",
        f"Emergency fund: {_format_ratio(metrics.emergency_fund_months)} months",
        f"Risk level: {risk.risk_level.value}",
    ]
    lines += [
        f"  - {factor}: {recommendation}"
        for factor, recommendation in zip(
            risk.risk_factors,
            risk.recommendations,
        )
    ]
    return lines


def main() -> None:
    """Load the stored ledger and print its analytics report."""
    logger = get_app_logger()
    settings = LedgerSettings.from_env()
    engine = build_financial_engine(settings)
    repository = build_ledger_repository()
    try:
        loaded = LoadLedgerUseCase(repository, logger=logger).execute(
            engine,
            settings.storage_key,
        )
    except ValidationError as exc:
        logger.error(f"Cannot load stored ledger: {exc}")
        return
    if loaded is None:
        logger.warning(
            f"No ledger stored under '{settings.storage_key}'. "
            "Run the import first."
        )
        return

    analytics = engine.generate_analytics()
    get_usage_logger().info(f"Report generated for '{settings.storage_key}'")
    for line in render_report(analytics, engine.currency):
        print(line)


if __name__ == "__main__":  # pragma: no cover
    main()
