"""Domain models for ledger entities.

Entities are frozen and stored by value: the ledger replaces an entity when
one with the same identifier is added again, it never mutates one in place.
Monetary fields are coerced to ``Decimal`` and category fields to their
enumeration on construction, so callers may pass plain numbers and strings.
Metadata is copied on construction and exposed read-only.
"""

import copy
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Mapping

from src.domain.constants import (
    DEFAULT_CURRENCY,
    AssetCategory,
    ExpenseType,
    IncomeType,
    LiabilityCategory,
)
from src.domain.errors import ValidationError
from src.domain.normalization import (
    format_timestamp,
    normalize_currency,
    normalize_text,
    parse_category,
    parse_flag,
    parse_timestamp,
)
from src.utils.decimal_utils import coerce_decimal


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _set_amount(entity, field_name: str) -> None:
    raw = getattr(entity, field_name)
    try:
        amount = coerce_decimal(raw)
    except ValueError as exc:
        raise ValidationError(
            f"{type(entity).__name__}.{field_name}: {exc}"
        ) from exc
    object.__setattr__(entity, field_name, amount)


def _require(payload: Mapping[str, Any], key: str, kind: str):
    if payload.get(key) is None:
        raise ValidationError(f"Invalid {kind}: '{key}' is required")
    return payload[key]


def _metadata(value) -> dict[str, Any] | None:
    if value is None:
        return None
    return copy.deepcopy(dict(value))


def _freeze_metadata(entity) -> None:
    detached = _metadata(entity.metadata)
    object.__setattr__(
        entity,
        "metadata",
        None if detached is None else MappingProxyType(detached),
    )


@dataclass(frozen=True)
class Asset:
    """Something the user owns, valued in the reporting currency.

    Attributes:
        id: Caller-assigned identifier, unique among assets.
        name: Display name.
        category: Asset category.
        value: Current market value, never negative once stored.
        currency: Reporting currency code.
        last_updated: When the value was last refreshed.
        description: Optional free-form description.
        metadata: Optional caller-defined attributes.
    """

    id: str
    name: str
    category: AssetCategory
    value: Decimal
    currency: str = DEFAULT_CURRENCY
    last_updated: datetime | date = field(default_factory=_utcnow)
    description: str | None = None
    metadata: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "category", parse_category(AssetCategory, self.category)
        )
        object.__setattr__(self, "currency", normalize_currency(self.currency))
        _set_amount(self, "value")
        _freeze_metadata(self)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category.value,
            "value": str(self.value),
            "currency": self.currency,
            "last_updated": format_timestamp(self.last_updated),
            "description": self.description,
            "metadata": _metadata(self.metadata),
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Asset":
        return cls(
            id=normalize_text(payload.get("id")),
            name=normalize_text(payload.get("name")),
            category=_require(payload, "category", "asset"),
            value=_require(payload, "value", "asset"),
            currency=payload.get("currency") or DEFAULT_CURRENCY,
            last_updated=parse_timestamp(payload.get("last_updated"))
            or _utcnow(),
            description=payload.get("description"),
            metadata=_metadata(payload.get("metadata")),
        )


@dataclass(frozen=True)
class Liability:
    """Something the user owes.

    Attributes:
        id: Caller-assigned identifier, unique among liabilities.
        name: Display name.
        category: Liability category.
        balance: Outstanding balance, never negative once stored.
        interest_rate: Annual interest rate in percent, never negative.
        monthly_payment: Scheduled monthly payment.
        currency: Reporting currency code.
        start_date: When the debt started.
        end_date: Optional scheduled payoff date.
        description: Optional free-form description.
        metadata: Optional caller-defined attributes.
    """

    id: str
    name: str
    category: LiabilityCategory
    balance: Decimal
    interest_rate: Decimal = Decimal("0")
    monthly_payment: Decimal = Decimal("0")
    currency: str = DEFAULT_CURRENCY
    start_date: datetime | date = field(default_factory=_utcnow)
    end_date: datetime | date | None = None
    description: str | None = None
    metadata: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "category",
            parse_category(LiabilityCategory, self.category),
        )
        object.__setattr__(self, "currency", normalize_currency(self.currency))
        _set_amount(self, "balance")
        _set_amount(self, "interest_rate")
        _set_amount(self, "monthly_payment")
        _freeze_metadata(self)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category.value,
            "balance": str(self.balance),
            "interest_rate": str(self.interest_rate),
            "monthly_payment": str(self.monthly_payment),
            "currency": self.currency,
            "start_date": format_timestamp(self.start_date),
            "end_date": format_timestamp(self.end_date),
            "description": self.description,
            "metadata": _metadata(self.metadata),
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Liability":
        return cls(
            id=normalize_text(payload.get("id")),
            name=normalize_text(payload.get("name")),
            category=_require(payload, "category", "liability"),
            balance=_require(payload, "balance", "liability"),
            interest_rate=payload.get("interest_rate", 0),
            monthly_payment=payload.get("monthly_payment", 0),
            currency=payload.get("currency") or DEFAULT_CURRENCY,
            start_date=parse_timestamp(payload.get("start_date"))
            or _utcnow(),
            end_date=parse_timestamp(payload.get("end_date")),
            description=payload.get("description"),
            metadata=_metadata(payload.get("metadata")),
        )


@dataclass(frozen=True)
class IncomeStream:
    """Recurring monthly income; only active streams count toward totals."""

    id: str
    name: str
    monthly_amount: Decimal
    currency: str = DEFAULT_CURRENCY
    category: IncomeType = IncomeType.OTHER
    is_active: bool = True
    start_date: datetime | date = field(default_factory=_utcnow)
    end_date: datetime | date | None = None
    metadata: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "category", parse_category(IncomeType, self.category)
        )
        object.__setattr__(self, "currency", normalize_currency(self.currency))
        _set_amount(self, "monthly_amount")
        _freeze_metadata(self)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "monthly_amount": str(self.monthly_amount),
            "currency": self.currency,
            "category": self.category.value,
            "is_active": self.is_active,
            "start_date": format_timestamp(self.start_date),
            "end_date": format_timestamp(self.end_date),
            "metadata": _metadata(self.metadata),
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "IncomeStream":
        return cls(
            id=normalize_text(payload.get("id")),
            name=normalize_text(payload.get("name")),
            monthly_amount=_require(payload, "monthly_amount", "income stream"),
            currency=payload.get("currency") or DEFAULT_CURRENCY,
            category=payload.get("category") or IncomeType.OTHER,
            is_active=parse_flag(
                payload.get("is_active"),
                True,
                "is_active",
            ),
            start_date=parse_timestamp(payload.get("start_date"))
            or _utcnow(),
            end_date=parse_timestamp(payload.get("end_date")),
            metadata=_metadata(payload.get("metadata")),
        )


@dataclass(frozen=True)
class ExpenseCategory:
    """Recurring monthly spending in one budget category."""

    id: str
    name: str
    monthly_amount: Decimal
    currency: str = DEFAULT_CURRENCY
    category: ExpenseType = ExpenseType.OTHER
    is_recurring: bool = True
    start_date: datetime | date = field(default_factory=_utcnow)
    end_date: datetime | date | None = None
    metadata: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "category", parse_category(ExpenseType, self.category)
        )
        object.__setattr__(self, "currency", normalize_currency(self.currency))
        _set_amount(self, "monthly_amount")
        _freeze_metadata(self)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "monthly_amount": str(self.monthly_amount),
            "currency": self.currency,
            "category": self.category.value,
            "is_recurring": self.is_recurring,
            "start_date": format_timestamp(self.start_date),
            "end_date": format_timestamp(self.end_date),
            "metadata": _metadata(self.metadata),
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "ExpenseCategory":
        return cls(
            id=normalize_text(payload.get("id")),
            name=normalize_text(payload.get("name")),
            monthly_amount=_require(payload, "monthly_amount", "expense"),
            currency=payload.get("currency") or DEFAULT_CURRENCY,
            category=payload.get("category") or ExpenseType.OTHER,
            is_recurring=parse_flag(
                payload.get("is_recurring"),
                True,
                "is_recurring",
            ),
            start_date=parse_timestamp(payload.get("start_date"))
            or _utcnow(),
            end_date=parse_timestamp(payload.get("end_date")),
            metadata=_metadata(payload.get("metadata")),
        )


__all__ = ["Asset", "Liability", "IncomeStream", "ExpenseCategory"]
