"""Database infrastructure for the ledger analytics app.

This module exposes concrete helpers to create and reuse the SQLAlchemy
engine backing ledger persistence. It belongs to the infrastructure layer
because it deals with external systems (SQLite or PostgreSQL).
"""

from pathlib import Path
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort
from src.infrastructure.settings import LedgerSettings


def _resolve_db_url() -> str:
    """Load ``.env`` and return the configured ledger database URL.

    Returns:
        str: SQLAlchemy URL of the ledger database.

    Raises:
        RuntimeError: If no database URL can be resolved.
    """
    dotenv.load_dotenv()
    db_url = LedgerSettings.from_env().db_url
    if not db_url:
        raise RuntimeError("Missing environment variable: LEDGER_DB_URL")
    return db_url


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine for the ledger database.

    SQLite URLs keep SQLAlchemy's default pooling and get their parent
    directory created; server databases get a small pool with health checks.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance.
    """
    url = make_url(db_url)
    if url.get_backend_name() == "sqlite":
        if url.database and url.database != ":memory:":
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)
        return create_engine(db_url, future=True)
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_ledger_engine: Optional[Engine] = None


def get_ledger_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the ledger database.

    Returns:
        Engine: Lazily initialized engine connected to ledger storage.
    """
    global _ledger_engine
    if _ledger_engine is None:
        _ledger_engine = _create_engine(_resolve_db_url())
    return _ledger_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides configuration details (environment variables, pooling)
    behind the port so application use cases can depend only on the protocol.
    """

    def get_ledger_engine(self) -> Engine:
        """Get the engine for the ledger database.

        Returns:
            Engine: SQLAlchemy engine connected to ledger storage.
        """
        return get_ledger_engine()


__all__ = [
    "get_ledger_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
