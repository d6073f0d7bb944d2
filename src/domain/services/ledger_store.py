"""In-memory store for the four ledger entity collections."""

from collections.abc import Callable
from logging import Logger
from typing import Generic, TypeVar

from src.domain.models import Asset, ExpenseCategory, IncomeStream, Liability
from src.domain.services.validation import (
    validate_asset,
    validate_expense,
    validate_income_stream,
    validate_liability,
)


EntityT = TypeVar("EntityT", Asset, Liability, IncomeStream, ExpenseCategory)


class _EntityCollection(Generic[EntityT]):
    """Entities of one kind keyed by id, kept in insertion order."""

    def __init__(
        self,
        kind: str,
        validator: Callable[[EntityT, Logger | None], None],
        logger: Logger,
    ) -> None:
        self._kind = kind
        self._validator = validator
        self._logger = logger
        self._items: dict[str, EntityT] = {}

    def validate(self, entity: EntityT) -> None:
        self._validator(entity, self._logger)

    def add(self, entity: EntityT) -> None:
        self.validate(entity)
        replaced = entity.id in self._items
        self._items[entity.id] = entity
        self._logger.debug(
            f"{'Replaced' if replaced else 'Added'} {self._kind} {entity.id}"
        )

    def remove(self, entity_id: str) -> bool:
        if entity_id not in self._items:
            return False
        del self._items[entity_id]
        self._logger.debug(f"Removed {self._kind} {entity_id}")
        return True

    def values(self) -> list[EntityT]:
        return list(self._items.values())

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)


class LedgerStore:
    """Own the assets, liabilities, income streams and expenses of a ledger.

    ``add_*`` validates then upserts by id: re-adding an id replaces the
    stored entity and keeps its original position. ``get_*`` returns a new
    list on every call, so callers cannot alter the store through it.
    """

    def __init__(self, logger: Logger) -> None:
        """Initialize an empty store.

        Args:
            logger: Logger used for debug traces and validation warnings.
        """
        self._assets = _EntityCollection("asset", validate_asset, logger)
        self._liabilities = _EntityCollection(
            "liability",
            validate_liability,
            logger,
        )
        self._income_streams = _EntityCollection(
            "income stream",
            validate_income_stream,
            logger,
        )
        self._expenses = _EntityCollection("expense", validate_expense, logger)

    def add_asset(self, asset: Asset) -> None:
        self._assets.add(asset)

    def remove_asset(self, asset_id: str) -> bool:
        return self._assets.remove(asset_id)

    def get_assets(self) -> list[Asset]:
        return self._assets.values()

    def add_liability(self, liability: Liability) -> None:
        self._liabilities.add(liability)

    def remove_liability(self, liability_id: str) -> bool:
        return self._liabilities.remove(liability_id)

    def get_liabilities(self) -> list[Liability]:
        return self._liabilities.values()

    def add_income_stream(self, income: IncomeStream) -> None:
        self._income_streams.add(income)

    def remove_income_stream(self, income_id: str) -> bool:
        return self._income_streams.remove(income_id)

    def get_income_streams(self) -> list[IncomeStream]:
        return self._income_streams.values()

    def add_expense(self, expense: ExpenseCategory) -> None:
        self._expenses.add(expense)

    def remove_expense(self, expense_id: str) -> bool:
        return self._expenses.remove(expense_id)

    def get_expenses(self) -> list[ExpenseCategory]:
        return self._expenses.values()

    def validate_bundle(
        self,
        assets: list[Asset],
        liabilities: list[Liability],
        income_streams: list[IncomeStream],
        expenses: list[ExpenseCategory],
    ) -> None:
        """Validate a batch of entities without storing any of them.

        Raises:
            ValidationError: On the first invalid entity.
        """
        for asset in assets:
            self._assets.validate(asset)
        for liability in liabilities:
            self._liabilities.validate(liability)
        for income in income_streams:
            self._income_streams.validate(income)
        for expense in expenses:
            self._expenses.validate(expense)

    def clear(self) -> None:
        """Remove every entity from all four collections."""
        self._assets.clear()
        self._liabilities.clear()
        self._income_streams.clear()
        self._expenses.clear()


__all__ = ["LedgerStore"]
