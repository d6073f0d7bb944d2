"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path

from src.domain.normalization import normalize_currency
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root


DEFAULT_STORAGE_KEY = "finlab_financial_store"


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for the ledger engine and its persistence.

    Attributes:
        currency: Reporting currency for every amount.
        storage_key: Key under which the ledger bundle is stored.
        db_url: SQLAlchemy URL of the ledger database.
    """

    currency: str = "USD"
    storage_key: str = DEFAULT_STORAGE_KEY
    db_url: str | None = None

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        currency = normalize_currency(os.getenv("LEDGER_CURRENCY"))
        storage_key = (
            os.getenv("LEDGER_STORAGE_KEY", DEFAULT_STORAGE_KEY).strip()
            or DEFAULT_STORAGE_KEY
        )
        raw_url = os.getenv("LEDGER_DB_URL")
        db_url = raw_url.strip() if raw_url and raw_url.strip() else None
        if db_url is None:
            db_url = cls._default_db_url(logger=get_app_logger())
        return cls(currency=currency, storage_key=storage_key, db_url=db_url)

    @staticmethod
    def _default_db_url(logger) -> str:
        """Return a SQLite URL under the project's data/ directory.

        Args:
            logger: Logger used for informational messages.

        Returns:
            str: SQLAlchemy URL of the default ledger database.
        """
        data_dir = get_project_root() / "data"
        path = Path(data_dir / "ledger.db").resolve()
        if not path.exists():
            logger.info(
                f"LEDGER_DB_URL not set; using SQLite database at {path}"
            )
        return f"sqlite:///{path}"


__all__ = ["LedgerSettings", "DEFAULT_STORAGE_KEY"]
