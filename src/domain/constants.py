"""Domain constants for ledger analytics."""

from decimal import Decimal
from enum import Enum


class AssetCategory(str, Enum):
    CHECKING = "checking"
    SAVINGS = "savings"
    INVESTMENT = "investment"
    RETIREMENT = "retirement"
    PROPERTY = "property"
    VEHICLE = "vehicle"
    CRYPTOCURRENCY = "cryptocurrency"
    COMMODITY = "commodity"


class LiabilityCategory(str, Enum):
    MORTGAGE = "mortgage"
    CAR_LOAN = "car_loan"
    STUDENT_LOAN = "student_loan"
    CREDIT_CARD = "credit_card"
    PERSONAL_LOAN = "personal_loan"
    OTHER = "other"


class IncomeType(str, Enum):
    SALARY = "salary"
    FREELANCE = "freelance"
    INVESTMENT = "investment"
    PASSIVE = "passive"
    OTHER = "other"


class ExpenseType(str, Enum):
    HOUSING = "housing"
    UTILITIES = "utilities"
    TRANSPORTATION = "transportation"
    FOOD = "food"
    HEALTHCARE = "healthcare"
    ENTERTAINMENT = "entertainment"
    INSURANCE = "insurance"
    DEBT_PAYMENT = "debt_payment"
    SAVINGS = "savings"
    OTHER = "other"


class TrendDirection(str, Enum):
    INCREASING = "increasing"
    STABLE = "stable"
    DECREASING = "decreasing"


class RiskLevel(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    CRITICAL = "critical"


LIQUID_ASSET_CATEGORIES = (
    AssetCategory.CHECKING,
    AssetCategory.SAVINGS,
)

INVESTMENT_ASSET_CATEGORIES = (
    AssetCategory.INVESTMENT,
    AssetCategory.RETIREMENT,
    AssetCategory.CRYPTOCURRENCY,
)

DEFAULT_CURRENCY = "USD"

MONTHS_PER_YEAR = Decimal("12")


__all__ = [
    "AssetCategory",
    "LiabilityCategory",
    "IncomeType",
    "ExpenseType",
    "TrendDirection",
    "RiskLevel",
    "LIQUID_ASSET_CATEGORIES",
    "INVESTMENT_ASSET_CATEGORIES",
    "DEFAULT_CURRENCY",
    "MONTHS_PER_YEAR",
]
