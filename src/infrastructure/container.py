"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.financial_engine import FinancialEngine
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
) -> LedgerRepositoryPort:
    """Return the repository storing serialized ledger bundles."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyLedgerRepository(resolved_db, logger=get_app_logger())


def build_financial_engine(
    settings: LedgerSettings | None = None,
) -> FinancialEngine:
    """Return a new, empty engine in the configured reporting currency."""
    resolved = settings or LedgerSettings.from_env()
    return FinancialEngine(currency=resolved.currency, logger=get_app_logger())


__all__ = [
    "build_database_adapter",
    "build_ledger_repository",
    "build_financial_engine",
]
