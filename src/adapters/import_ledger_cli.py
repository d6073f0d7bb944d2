"""CLI adapter to import a JSON ledger bundle into stored ledger state.

The bundle named by ``LEDGER_IMPORT_FILE`` is merged into the stored ledger
(entities with an existing id replace the stored ones), a net worth snapshot
is taken, and the result is saved back under the configured storage key.
"""

import json
import os
from pathlib import Path

from src.application.use_cases.persist_ledger import (
    LoadLedgerUseCase,
    SaveLedgerUseCase,
)
from src.domain.errors import ValidationError
from src.infrastructure.container import (
    build_financial_engine,
    build_ledger_repository,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.settings import LedgerSettings


def _read_bundle(path: Path, logger) -> dict | None:
    """Read a JSON bundle from disk.

    Args:
        path: Path to the JSON file.
        logger: Logger used for errors.

    Returns:
        dict | None: Decoded bundle, or None when unreadable.
    """
    try:
        with path.open(encoding="utf-8") as handle:
            bundle = json.load(handle)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error(f"Cannot read ledger bundle {path}: {exc}")
        return None
    if not isinstance(bundle, dict):
        logger.error(f"Ledger bundle {path} must contain a JSON object")
        return None
    return bundle


def main() -> None:
    """Import the configured bundle and save the merged ledger."""
    logger = get_app_logger()
    raw_path = os.getenv("LEDGER_IMPORT_FILE")
    if not raw_path:
        logger.warning("LEDGER_IMPORT_FILE is required to import a ledger.")
        return
    bundle = _read_bundle(Path(raw_path).expanduser(), logger)
    if bundle is None:
        return

    settings = LedgerSettings.from_env()
    engine = build_financial_engine(settings)
    repository = build_ledger_repository()
    try:
        LoadLedgerUseCase(repository, logger=logger).execute(
            engine,
            settings.storage_key,
        )
        engine.import_data(bundle)
    except ValidationError as exc:
        logger.error(f"Import aborted: {exc}")
        return

    snapshot = engine.create_snapshot()
    result = SaveLedgerUseCase(repository, logger=logger).execute(
        engine,
        settings.storage_key,
    )
    get_usage_logger().info(f"Ledger imported from {raw_path}")

    print(
        f"Imported ledger into '{result.storage_key}': "
        f"entities={result.entity_count}, snapshots={result.snapshot_count}, "
        f"net_worth={snapshot.net_worth} {snapshot.currency}."
    )


if __name__ == "__main__":  # pragma: no cover
    main()
