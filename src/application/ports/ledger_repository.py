"""Port for persisting serialized ledger bundles."""

from typing import Any, Protocol


class LedgerRepositoryPort(Protocol):
    """Key-value storage for one serialized ledger bundle per key."""

    def load(self, storage_key: str) -> dict[str, Any] | None:
        """Return the bundle stored under ``storage_key``, or None."""

    def save(self, storage_key: str, payload: dict[str, Any]) -> None:
        """Store ``payload`` under ``storage_key``, replacing any previous one."""


__all__ = ["LedgerRepositoryPort"]
