"""Tests for the snapshot history."""

from datetime import date, datetime
from decimal import Decimal

from src.domain.constants import AssetCategory
from src.domain.models import Asset, Liability
from src.domain.services import SnapshotHistory
from src.domain.services.snapshot_history import latest_pair


def test_create_snapshot_captures_totals_and_breakdowns() -> None:
    history = SnapshotHistory("USD")

    snapshot = history.create_snapshot(
        [Asset(id="a1", name="Cash", category="checking", value=100)],
        [Liability(id="l1", name="Card", category="credit_card",
                   balance=40)],
        when=date(2024, 2, 1),
    )

    assert snapshot.date == date(2024, 2, 1)
    assert snapshot.net_worth == Decimal("60")
    assert snapshot.currency == "USD"
    assert snapshot.asset_breakdown[AssetCategory.CHECKING] == Decimal("100")
    assert history.get_history() == [snapshot]


def test_snapshot_defaults_to_aware_utc_now() -> None:
    snapshot = SnapshotHistory("USD").create_snapshot([], [])

    assert isinstance(snapshot.date, datetime)
    assert snapshot.date.tzinfo is not None


def test_history_keeps_append_order_and_returns_copies() -> None:
    history = SnapshotHistory("USD")
    first = history.create_snapshot([], [], when=date(2024, 3, 1))
    second = history.create_snapshot([], [], when=date(2024, 1, 1))

    history.get_history().clear()

    assert history.get_history() == [first, second]
    history.clear()
    assert len(history) == 0


def test_latest_pair_needs_two_snapshots() -> None:
    history = SnapshotHistory("USD")
    history.create_snapshot([], [], when=date(2024, 1, 1))

    assert latest_pair(history.get_history()) is None

    second = history.create_snapshot(
        [Asset(id="a1", name="Cash", category="savings", value=5)],
        [],
        when=date(2024, 2, 1),
    )
    previous, current = latest_pair(history.get_history())

    assert previous.date == date(2024, 1, 1)
    assert current is second
