"""Append-only history of net worth snapshots."""

from collections.abc import Sequence
from datetime import date, datetime, timezone

from src.domain.models import Asset, Liability, NetWorthSnapshot
from src.domain.services.finance import (
    compute_asset_breakdown,
    compute_liability_breakdown,
    compute_net_worth_summary,
)


def latest_pair(
    history: Sequence[NetWorthSnapshot],
) -> tuple[NetWorthSnapshot, NetWorthSnapshot] | None:
    """Return the previous and current snapshots, or None with fewer than two."""
    if len(history) < 2:
        return None
    return history[-2], history[-1]


class SnapshotHistory:
    """Ordered sequence of frozen snapshots, in append order.

    Entries are never re-sorted or removed individually; ``clear`` empties
    the whole history. There is no retention limit.
    """

    def __init__(self, currency_code: str) -> None:
        self._currency_code = currency_code
        self._snapshots: list[NetWorthSnapshot] = []

    def create_snapshot(
        self,
        assets: Sequence[Asset],
        liabilities: Sequence[Liability],
        when: datetime | date | None = None,
    ) -> NetWorthSnapshot:
        """Capture current totals and breakdowns and append them.

        Args:
            assets: Assets held by the ledger.
            liabilities: Liabilities held by the ledger.
            when: Capture timestamp; defaults to now in UTC.

        Returns:
            NetWorthSnapshot: The appended snapshot.
        """
        summary = compute_net_worth_summary(
            assets,
            liabilities,
            currency_code=self._currency_code,
        )
        snapshot = NetWorthSnapshot(
            date=when or datetime.now(timezone.utc),
            total_assets=summary.asset_total,
            total_liabilities=summary.liability_total,
            net_worth=summary.net_worth,
            currency=summary.currency_code,
            asset_breakdown=compute_asset_breakdown(assets),
            liability_breakdown=compute_liability_breakdown(liabilities),
        )
        self._snapshots.append(snapshot)
        return snapshot

    def append(self, snapshot: NetWorthSnapshot) -> None:
        """Append a previously captured snapshot, e.g. one restored from storage."""
        self._snapshots.append(snapshot)

    def get_history(self) -> list[NetWorthSnapshot]:
        return list(self._snapshots)

    def clear(self) -> None:
        self._snapshots = []

    def __len__(self) -> int:
        return len(self._snapshots)


__all__ = ["SnapshotHistory", "latest_pair"]
