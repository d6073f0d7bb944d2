"""Use cases saving and restoring a ledger bundle through a repository port.

The stored bundle holds the four entity lists and the snapshot history.
Analytics are not stored: they are recomputed from the restored state.
"""

from dataclasses import dataclass

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.financial_engine import (
    BUNDLE_KEYS,
    FinancialEngine,
)
from src.domain.errors import ValidationError
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class LedgerPersistenceResult:
    """Counts of what a save or load handled.

    Attributes:
        storage_key: Key the bundle was stored under.
        entity_count: Entities across the four collections.
        snapshot_count: Snapshots in the history.
    """

    storage_key: str
    entity_count: int
    snapshot_count: int


def _entity_count(bundle: dict) -> int:
    return sum(len(bundle.get(key) or ()) for key in BUNDLE_KEYS)


class SaveLedgerUseCase:
    """Serialize an engine's ledger and history into the repository."""

    def __init__(self, repository: LedgerRepositoryPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            repository: Port storing serialized ledger bundles.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        engine: FinancialEngine,
        storage_key: str,
    ) -> LedgerPersistenceResult:
        """Store the engine's current bundle under ``storage_key``.

        Args:
            engine: Engine whose state is saved.
            storage_key: Key identifying the bundle.

        Returns:
            LedgerPersistenceResult: Summary of the saved bundle.
        """
        exported = engine.export_data()
        payload = {
            "currency": exported["currency"],
            **{key: exported[key] for key in BUNDLE_KEYS},
            "net_worth_history": exported["net_worth_history"],
        }
        self._repository.save(storage_key, payload)

        result = LedgerPersistenceResult(
            storage_key=storage_key,
            entity_count=_entity_count(payload),
            snapshot_count=len(payload["net_worth_history"]),
        )
        self._logger.info(
            f"Saved ledger '{storage_key}': entities={result.entity_count}, "
            f"snapshots={result.snapshot_count}"
        )
        return result


class LoadLedgerUseCase:
    """Restore an engine's ledger and history from the repository."""

    def __init__(self, repository: LedgerRepositoryPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            repository: Port storing serialized ledger bundles.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        engine: FinancialEngine,
        storage_key: str,
    ) -> LedgerPersistenceResult | None:
        """Replace the engine's state with the bundle under ``storage_key``.

        The engine is reset first. A missing bundle leaves it empty.

        Args:
            engine: Engine to restore into.
            storage_key: Key identifying the bundle.

        Returns:
            LedgerPersistenceResult | None: Summary of the restored bundle,
            or None when nothing is stored under the key.

        Raises:
            ValidationError: If the stored bundle is malformed.
        """
        engine.reset()
        try:
            payload = self._repository.load(storage_key)
        except ValueError as exc:
            self._logger.error(f"Stored ledger '{storage_key}' is unreadable")
            raise ValidationError(str(exc)) from exc
        if payload is None:
            self._logger.info(f"No stored ledger under '{storage_key}'")
            return None
        if not isinstance(payload, dict):
            self._logger.error(
                f"Stored ledger '{storage_key}' is not a JSON object"
            )
            raise ValidationError(
                f"Stored ledger '{storage_key}' is not a JSON object"
            )

        stored_currency = payload.get("currency")
        if stored_currency and stored_currency != engine.currency:
            self._logger.warning(
                f"Stored ledger currency {stored_currency} differs from "
                f"engine currency {engine.currency}; amounts are not converted"
            )

        try:
            engine.import_data(payload)
            snapshot_count = engine.import_history(
                payload.get("net_worth_history") or []
            )
        except ValidationError as exc:
            engine.reset()
            self._logger.error(f"Stored ledger '{storage_key}' is invalid: {exc}")
            raise

        result = LedgerPersistenceResult(
            storage_key=storage_key,
            entity_count=_entity_count(payload),
            snapshot_count=snapshot_count,
        )
        self._logger.info(
            f"Loaded ledger '{storage_key}': entities={result.entity_count}, "
            f"snapshots={result.snapshot_count}"
        )
        return result


__all__ = [
    "SaveLedgerUseCase",
    "LoadLedgerUseCase",
    "LedgerPersistenceResult",
]
