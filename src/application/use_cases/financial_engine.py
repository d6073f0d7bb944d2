"""Analytics facade over a ledger and its net worth history.

A ``FinancialEngine`` is built per caller or session; it owns its ledger and
snapshot history and shares no state with other instances. It performs no
locking: callers sharing one instance across threads must serialize access.
"""

from collections.abc import Iterable, Mapping
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any

from src.domain.constants import DEFAULT_CURRENCY
from src.domain.errors import ValidationError
from src.domain.models import (
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
from src.domain.normalization import normalize_currency
from src.domain.services import (
    DEFAULT_RISK_THRESHOLDS,
    LedgerStore,
    RiskThresholds,
    SnapshotHistory,
    assess_risk,
    compute_asset_breakdown,
    compute_cashflow_summary,
    compute_financial_trends,
    compute_kpi_metrics,
    compute_liability_breakdown,
    compute_liquid_assets,
    compute_net_worth_summary,
)
from src.infrastructure.logging.logger import get_app_logger


BUNDLE_KEYS = ("assets", "liabilities", "income_streams", "expenses")


def _parse_entities(entity_type, raw_items: Iterable[Any] | None) -> list:
    parsed = []
    for item in raw_items or ():
        if isinstance(item, entity_type):
            parsed.append(item)
        elif isinstance(item, Mapping):
            try:
                parsed.append(entity_type.from_dict(item))
            except ValidationError:
                raise
            except (TypeError, ValueError) as exc:
                raise ValidationError(
                    f"Invalid {entity_type.__name__} payload: {exc}"
                ) from exc
        else:
            raise ValidationError(
                f"Cannot import {type(item).__name__} as "
                f"{entity_type.__name__}"
            )
    return parsed


class FinancialEngine:
    """Maintain a financial position and derive analytics from it."""

    def __init__(
        self,
        currency: str = DEFAULT_CURRENCY,
        logger=None,
        risk_thresholds: RiskThresholds | None = None,
    ) -> None:
        """Initialize an empty engine.

        Args:
            currency: Reporting currency all amounts are expressed in.
            logger: Optional logger compatible with logging.Logger-like API.
            risk_thresholds: Optional override of the risk rule thresholds.
        """
        self._currency = normalize_currency(currency)
        self._logger = logger or get_app_logger()
        self._risk_thresholds = risk_thresholds or DEFAULT_RISK_THRESHOLDS
        self._ledger = LedgerStore(self._logger)
        self._history = SnapshotHistory(self._currency)

    @property
    def currency(self) -> str:
        return self._currency

    # Ledger

    def add_asset(self, asset: Asset) -> None:
        self._ledger.add_asset(asset)

    def remove_asset(self, asset_id: str) -> bool:
        return self._ledger.remove_asset(asset_id)

    def get_assets(self) -> list[Asset]:
        return self._ledger.get_assets()

    def add_liability(self, liability: Liability) -> None:
        self._ledger.add_liability(liability)

    def remove_liability(self, liability_id: str) -> bool:
        return self._ledger.remove_liability(liability_id)

    def get_liabilities(self) -> list[Liability]:
        return self._ledger.get_liabilities()

    def add_income_stream(self, income: IncomeStream) -> None:
        self._ledger.add_income_stream(income)

    def remove_income_stream(self, income_id: str) -> bool:
        return self._ledger.remove_income_stream(income_id)

    def get_income_streams(self) -> list[IncomeStream]:
        return self._ledger.get_income_streams()

    def add_expense(self, expense: ExpenseCategory) -> None:
        self._ledger.add_expense(expense)

    def remove_expense(self, expense_id: str) -> bool:
        return self._ledger.remove_expense(expense_id)

    def get_expenses(self) -> list[ExpenseCategory]:
        return self._ledger.get_expenses()

    # Aggregates

    def calculate_net_worth_summary(self) -> NetWorthSummary:
        return compute_net_worth_summary(
            self._ledger.get_assets(),
            self._ledger.get_liabilities(),
            currency_code=self._currency,
        )

    def calculate_total_assets(self) -> Decimal:
        return self.calculate_net_worth_summary().asset_total

    def calculate_total_liabilities(self) -> Decimal:
        return self.calculate_net_worth_summary().liability_total

    def calculate_net_worth(self) -> Decimal:
        return self.calculate_net_worth_summary().net_worth

    def get_asset_breakdown(self) -> CategoryBreakdown:
        return compute_asset_breakdown(self._ledger.get_assets())

    def get_liability_breakdown(self) -> CategoryBreakdown:
        return compute_liability_breakdown(self._ledger.get_liabilities())

    def get_liquid_assets(self) -> Decimal:
        return compute_liquid_assets(self._ledger.get_assets())

    def calculate_cashflow_summary(self) -> CashflowSummary:
        return compute_cashflow_summary(
            self._ledger.get_income_streams(),
            self._ledger.get_expenses(),
            currency_code=self._currency,
        )

    def calculate_total_monthly_income(self) -> Decimal:
        return self.calculate_cashflow_summary().monthly_income

    def calculate_total_monthly_expenses(self) -> Decimal:
        return self.calculate_cashflow_summary().monthly_expenses

    def calculate_monthly_net_income(self) -> Decimal:
        return self.calculate_cashflow_summary().monthly_net_income

    def calculate_projected_annual_savings(self) -> Decimal:
        return self.calculate_cashflow_summary().annual_projected_savings

    # Analytics

    def calculate_kpi_metrics(self) -> KPIMetrics:
        return compute_kpi_metrics(
            self._ledger.get_assets(),
            self._ledger.get_liabilities(),
            self._ledger.get_income_streams(),
            self._ledger.get_expenses(),
            self._history.get_history(),
            currency_code=self._currency,
        )

    def calculate_financial_trends(self) -> FinancialTrends:
        return compute_financial_trends(
            self._history.get_history(),
            self.calculate_kpi_metrics().savings_rate,
        )

    def perform_risk_assessment(self) -> RiskAssessment:
        return assess_risk(
            self.calculate_kpi_metrics(),
            self.calculate_net_worth(),
            thresholds=self._risk_thresholds,
        )

    # History

    def create_snapshot(
        self,
        when: datetime | date | None = None,
    ) -> NetWorthSnapshot:
        """Capture and append a snapshot of the current ledger.

        Args:
            when: Capture timestamp; defaults to now in UTC.

        Returns:
            NetWorthSnapshot: The appended snapshot.
        """
        snapshot = self._history.create_snapshot(
            self._ledger.get_assets(),
            self._ledger.get_liabilities(),
            when=when,
        )
        self._logger.info(
            f"Snapshot created: assets={snapshot.total_assets}, "
            f"liabilities={snapshot.total_liabilities}, "
            f"net_worth={snapshot.net_worth}"
        )
        return snapshot

    def get_history(self) -> list[NetWorthSnapshot]:
        return self._history.get_history()

    def clear_history(self) -> None:
        self._history.clear()

    def import_history(
        self,
        snapshots: Iterable[NetWorthSnapshot | Mapping[str, Any]],
    ) -> int:
        """Append previously captured snapshots in the given order.

        Args:
            snapshots: Snapshot instances or their ``to_dict`` payloads.

        Returns:
            int: Number of snapshots appended.

        Raises:
            ValidationError: If a payload cannot be parsed; nothing is
                appended in that case.
        """
        parsed: list[NetWorthSnapshot] = []
        for item in snapshots:
            if isinstance(item, NetWorthSnapshot):
                parsed.append(item)
                continue
            try:
                parsed.append(NetWorthSnapshot.from_dict(item))
            except (KeyError, TypeError, ValueError) as exc:
                raise ValidationError(f"Invalid snapshot payload: {exc}") from exc
        for snapshot in parsed:
            self._history.append(snapshot)
        return len(parsed)

    def generate_analytics(self) -> FinancialAnalytics:
        """Return the full financial picture.

        A snapshot is created first when the history is empty, so the report
        always covers at least one snapshot.

        Returns:
            FinancialAnalytics: Composite report computed from current state.
        """
        if len(self._history) == 0:
            self.create_snapshot()

        metrics = self.calculate_kpi_metrics()
        history = self._history.get_history()
        analytics = FinancialAnalytics(
            timestamp=datetime.now(timezone.utc),
            net_worth_history=history,
            cashflow=self.calculate_cashflow_summary(),
            metrics=metrics,
            trends=compute_financial_trends(history, metrics.savings_rate),
            risk_assessment=assess_risk(
                metrics,
                self.calculate_net_worth(),
                thresholds=self._risk_thresholds,
                logger=self._logger,
            ),
        )
        return analytics

    # Bundles

    def export_data(self) -> dict[str, Any]:
        """Return entities, history and a fresh report as plain data.

        Returns:
            dict[str, Any]: JSON-serializable bundle.
        """
        analytics = self.generate_analytics()
        return {
            "currency": self._currency,
            "assets": [item.to_dict() for item in self.get_assets()],
            "liabilities": [item.to_dict() for item in self.get_liabilities()],
            "income_streams": [
                item.to_dict() for item in self.get_income_streams()
            ],
            "expenses": [item.to_dict() for item in self.get_expenses()],
            "net_worth_history": [
                snapshot.to_dict() for snapshot in self.get_history()
            ],
            "analytics": analytics.to_dict(),
        }

    def import_data(self, bundle: Mapping[str, Any]) -> None:
        """Add every entity of a bundle, all or nothing.

        Each entity goes through the same validation as ``add_*``. Every
        entity is checked before any is stored: one invalid entity raises
        and leaves the ledger unchanged.

        Args:
            bundle: Mapping with optional ``assets``, ``liabilities``,
                ``income_streams`` and ``expenses`` lists holding entities
                or their ``to_dict`` payloads.

        Raises:
            ValidationError: If any entity is invalid.
        """
        assets = _parse_entities(Asset, bundle.get("assets"))
        liabilities = _parse_entities(Liability, bundle.get("liabilities"))
        streams = _parse_entities(IncomeStream, bundle.get("income_streams"))
        expenses = _parse_entities(ExpenseCategory, bundle.get("expenses"))
        self._ledger.validate_bundle(assets, liabilities, streams, expenses)

        for asset in assets:
            self._ledger.add_asset(asset)
        for liability in liabilities:
            self._ledger.add_liability(liability)
        for income in streams:
            self._ledger.add_income_stream(income)
        for expense in expenses:
            self._ledger.add_expense(expense)
        self._logger.info(
            f"Imported assets={len(assets)}, liabilities={len(liabilities)}, "
            f"income_streams={len(streams)}, expenses={len(expenses)}"
        )

    def reset(self) -> None:
        """Clear the ledger and the snapshot history."""
        self._ledger.clear()
        self._history.clear()
        self._logger.info("Ledger and snapshot history reset")


__all__ = ["FinancialEngine", "BUNDLE_KEYS"]
