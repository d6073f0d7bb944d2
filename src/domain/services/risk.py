"""Rule-based risk assessment over KPI metrics.

Rules run in a fixed order and are not mutually exclusive, except for the
two liquidity rules which form an if/else pair. The liquidity and
emergency-fund rules read the same underlying ratio and can both fire for
one shortfall; the risk level counts each of them.
"""

from dataclasses import dataclass
from decimal import Decimal
from logging import Logger

from src.domain.constants import RiskLevel
from src.domain.models import KPIMetrics, RiskAssessment
from src.domain.policies import risk_level_for_factor_count


HIGH_DEBT_TO_INCOME = (
    "High debt-to-income ratio (>43%)",
    "Consider debt reduction strategies or increasing income",
)
ELEVATED_DEBT_TO_INCOME = (
    "Elevated debt-to-income ratio (>35%)",
    "Monitor debt levels closely",
)
LOW_LIQUIDITY = (
    "Low liquidity (less than 1 month of expenses)",
    "Build emergency fund to cover at least 3-6 months of expenses",
)
INSUFFICIENT_EMERGENCY_FUND = (
    "Insufficient emergency fund (less than 3 months)",
    "Aim to save 3-6 months of expenses",
)
EMERGENCY_FUND_INSUFFICIENT = (
    "Emergency fund insufficient",
    "Prioritize building emergency savings",
)
LOW_SAVINGS_RATE = (
    "Low savings rate",
    "Increase savings rate to at least 10-15% of income",
)
NEGATIVE_NET_WORTH = (
    "Negative net worth",
    "Focus on asset building and debt reduction",
)


@dataclass(frozen=True)
class RiskThresholds:
    """Threshold values used by the risk rules.

    Attributes:
        high_debt_to_income: Debt-to-income percentage above which debt is high.
        elevated_debt_to_income: Percentage above which debt is elevated.
        low_liquidity_months: Liquidity ratio below which liquidity is low.
        emergency_fund_months: Months of coverage considered sufficient.
        min_savings_rate: Savings rate percentage considered healthy.
    """

    high_debt_to_income: Decimal = Decimal("43")
    elevated_debt_to_income: Decimal = Decimal("35")
    low_liquidity_months: Decimal = Decimal("1")
    emergency_fund_months: Decimal = Decimal("3")
    min_savings_rate: Decimal = Decimal("10")


DEFAULT_RISK_THRESHOLDS = RiskThresholds()


def assess_risk(
    metrics: KPIMetrics,
    net_worth: Decimal,
    thresholds: RiskThresholds = DEFAULT_RISK_THRESHOLDS,
    logger: Logger | None = None,
) -> RiskAssessment:
    """Apply the ordered risk rules to the current metrics.

    Args:
        metrics: Current KPI metrics.
        net_worth: Current net worth.
        thresholds: Threshold values for the rules.
        logger: Optional logger receiving the evaluated level.

    Returns:
        RiskAssessment: Risk level, fired factors and paired
        recommendations.
    """
    fired: list[tuple[str, str]] = []

    debt_to_income = metrics.debt_to_income_ratio
    if debt_to_income > thresholds.high_debt_to_income:
        fired.append(HIGH_DEBT_TO_INCOME)
    if debt_to_income > thresholds.elevated_debt_to_income:
        fired.append(ELEVATED_DEBT_TO_INCOME)

    liquidity = metrics.liquidity_ratio
    if liquidity < thresholds.low_liquidity_months:
        fired.append(LOW_LIQUIDITY)
    elif liquidity < thresholds.emergency_fund_months:
        fired.append(INSUFFICIENT_EMERGENCY_FUND)

    if metrics.emergency_fund_months < thresholds.emergency_fund_months:
        fired.append(EMERGENCY_FUND_INSUFFICIENT)

    if metrics.savings_rate < thresholds.min_savings_rate:
        fired.append(LOW_SAVINGS_RATE)

    if net_worth < 0:
        fired.append(NEGATIVE_NET_WORTH)

    risk_level = risk_level_for_factor_count(len(fired))
    if logger is not None:
        message = (
            f"Risk assessed: level={risk_level.value}, "
            f"factors={len(fired)}"
        )
        if risk_level in (RiskLevel.HIGH, RiskLevel.CRITICAL):
            logger.warning(message)
        else:
            logger.info(message)

    return RiskAssessment(
        risk_level=risk_level,
        risk_factors=[factor for factor, _ in fired],
        recommendations=[recommendation for _, recommendation in fired],
        debt_burden=debt_to_income,
        liquidity_concern=liquidity < thresholds.emergency_fund_months,
        emergency_fund_sufficiency=(
            metrics.emergency_fund_months >= thresholds.emergency_fund_months
        ),
    )


__all__ = ["RiskThresholds", "DEFAULT_RISK_THRESHOLDS", "assess_risk"]
