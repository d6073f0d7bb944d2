"""Application use cases package."""

from .financial_engine import FinancialEngine
from .persist_ledger import (
    LedgerPersistenceResult,
    LoadLedgerUseCase,
    SaveLedgerUseCase,
)

__all__ = [
    "FinancialEngine",
    "SaveLedgerUseCase",
    "LoadLedgerUseCase",
    "LedgerPersistenceResult",
]
