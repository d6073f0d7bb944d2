"""Domain policies package."""

from .risk_levels import risk_level_for_factor_count

__all__ = ["risk_level_for_factor_count"]
