"""Policy mapping the number of fired risk factors to a risk level."""

from src.domain.constants import RiskLevel


def risk_level_for_factor_count(count: int) -> RiskLevel:
    """Return the risk level for a number of fired risk factors.

    Args:
        count: Number of risk factors that fired.

    Returns:
        RiskLevel: low for 0, moderate for 1-2, high for 3-4, critical
        for 5 or more.
    """
    if count <= 0:
        return RiskLevel.LOW
    if count <= 2:
        return RiskLevel.MODERATE
    if count <= 4:
        return RiskLevel.HIGH
    return RiskLevel.CRITICAL


__all__ = ["risk_level_for_factor_count"]
