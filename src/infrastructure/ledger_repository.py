"""SQLAlchemy adapter storing serialized ledger bundles by key."""

from datetime import datetime, timezone
import json
from typing import Any

from sqlalchemy import text
from sqlalchemy.engine import Engine

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.infrastructure.logging.logger import get_app_logger


CREATE_LEDGER_BUNDLES_SQL = """
CREATE TABLE IF NOT EXISTS ledger_bundles (
    storage_key TEXT PRIMARY KEY,
    payload TEXT NOT NULL,
    updated_at TEXT NOT NULL
)
"""

SELECT_BUNDLE_SQL = text(
    """
    SELECT payload
    FROM ledger_bundles
    WHERE storage_key = :storage_key
    """
)

DELETE_BUNDLE_SQL = text(
    """
    DELETE FROM ledger_bundles
    WHERE storage_key = :storage_key
    """
)

INSERT_BUNDLE_SQL = text(
    """
    INSERT INTO ledger_bundles (storage_key, payload, updated_at)
    VALUES (:storage_key, :payload, :updated_at)
    """
)


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Keep one JSON-encoded ledger bundle per storage key."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()
        self._table_ready = False

    def load(self, storage_key: str) -> dict[str, Any] | None:
        """Return the bundle stored under ``storage_key``.

        Args:
            storage_key: Key identifying the bundle.

        Returns:
            dict[str, Any] | None: Decoded bundle, or None when absent.

        Raises:
            ValueError: If the stored payload is not valid JSON.
        """
        engine = self._engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_BUNDLE_SQL,
                {"storage_key": storage_key},
            ).first()
        if row is None:
            return None
        try:
            return json.loads(row.payload)
        except json.JSONDecodeError as exc:
            self._logger.error(
                f"Stored ledger '{storage_key}' is not valid JSON: {exc}"
            )
            raise ValueError(
                f"Stored ledger '{storage_key}' is not valid JSON"
            ) from exc

    def save(self, storage_key: str, payload: dict[str, Any]) -> None:
        """Store ``payload`` under ``storage_key``, replacing any previous one.

        Args:
            storage_key: Key identifying the bundle.
            payload: JSON-serializable bundle.
        """
        encoded = json.dumps(payload, sort_keys=True)
        engine = self._engine()
        with engine.begin() as conn:
            conn.execute(DELETE_BUNDLE_SQL, {"storage_key": storage_key})
            conn.execute(
                INSERT_BUNDLE_SQL,
                {
                    "storage_key": storage_key,
                    "payload": encoded,
                    "updated_at": datetime.now(timezone.utc).isoformat(),
                },
            )
        self._logger.info(
            f"Stored ledger '{storage_key}' ({len(encoded)} bytes)"
        )

    def _engine(self) -> Engine:
        engine = self._db_port.get_ledger_engine()
        if not self._table_ready:
            with engine.begin() as conn:
                conn.exec_driver_sql(CREATE_LEDGER_BUNDLES_SQL)
            self._table_ready = True
        return engine


__all__ = ["SqlAlchemyLedgerRepository"]
