"""Tests for the Streamlit app module."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.adapters.interface.streamlit import app
from src.application.use_cases.financial_engine import FinancialEngine
from src.domain.constants import AssetCategory
from src.domain.models import Asset, CategoryBreakdown, Liability


def _analytics(snapshots: int = 2):
    engine = FinancialEngine(logger=MagicMock())
    engine.add_asset(
        Asset(id="a1", name="Checking", category="checking", value=1000)
    )
    engine.add_liability(
        Liability(id="l1", name="Card", category="credit_card", balance=200)
    )
    for day in range(1, snapshots + 1):
        engine.create_snapshot(when=date(2024, 1, day))
    return engine.generate_analytics()


class _FakeColumn:
    def __init__(self, owner) -> None:
        self.owner = owner

    def metric(self, label, value, delta=None, **kwargs):
        self.owner.metrics.append((label, value, delta))

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class _FakeStreamlit:
    def __init__(self) -> None:
        self.metrics: list[tuple] = []
        self.warnings: list[str] = []
        self.subheaders: list[str] = []
        self.infos: list[str] = []
        self.successes: list[str] = []
        self.dataframes: list = []
        self.charts: list = []

    def set_page_config(self, **kwargs):
        self.config_kwargs = kwargs

    def title(self, text):
        self.title_text = text

    def caption(self, text):
        self.caption_text = text

    def warning(self, text):
        self.warnings.append(text)

    def info(self, text):
        self.infos.append(text)

    def success(self, text):
        self.successes.append(text)

    def subheader(self, text):
        self.subheaders.append(text)

    def metric(self, label, value, delta=None, **kwargs):
        self.metrics.append((label, value, delta))

    def columns(self, count):
        return [_FakeColumn(self) for _ in range(count)]

    def dataframe(self, data, **kwargs):
        self.dataframes.append((data, kwargs))

    def altair_chart(self, chart, **kwargs):
        self.charts.append(chart)


def test_fetch_analytics_returns_none_without_stored_ledger(monkeypatch):
    repository = MagicMock()
    repository.load.return_value = None
    monkeypatch.setattr(app, "build_ledger_repository", lambda: repository)
    monkeypatch.setattr(
        app,
        "build_financial_engine",
        lambda settings: FinancialEngine(logger=MagicMock()),
    )

    result = app._fetch_analytics(app.LedgerSettings(db_url="sqlite://"))

    assert result is None


def test_format_helpers() -> None:
    assert app._format_currency(Decimal("1234.5"), "EUR") == "1,234.50 €"
    assert app._format_currency(Decimal("10"), "USD") == "10.00 USD"
    assert app._format_delta_with_percent(Decimal("50"), Decimal("200")) == (
        "+50.00 (+25.00%)"
    )
    assert app._format_delta_with_percent(Decimal("-5"), Decimal("0")) == (
        "-5.00"
    )
    assert app._format_ratio(Decimal("Infinity"), "%") == "∞"


def test_prepare_donut_groups_small_categories() -> None:
    breakdown = CategoryBreakdown.from_items(
        AssetCategory,
        [
            (AssetCategory.PROPERTY, Decimal("600")),
            (AssetCategory.INVESTMENT, Decimal("300")),
            (AssetCategory.CHECKING, Decimal("60")),
            (AssetCategory.SAVINGS, Decimal("40")),
        ],
    )

    data, total = app._prepare_donut_chart_data(
        breakdown,
        "USD",
        max_categories=2,
    )

    assert total == Decimal("1000")
    assert [row["category"] for row in data] == [
        "Property",
        "Investment",
        "Other",
    ]
    assert data[-1]["amount"] == 100.0
    assert data[0]["share_label"] == "60.0%"


def test_main_warns_when_nothing_is_stored(monkeypatch):
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_analytics", lambda *a, **k: None)
    monkeypatch.setenv("LEDGER_DB_URL", "sqlite://")

    app.main()

    assert fake_st.warnings
    assert fake_st.metrics == []


def test_main_renders_metrics_kpis_and_risk(monkeypatch):
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_analytics", lambda *a, **k: _analytics())
    monkeypatch.setattr(app, "get_usage_logger", MagicMock)
    monkeypatch.setattr(app, "_render_breakdown_chart", MagicMock())
    monkeypatch.setenv("LEDGER_DB_URL", "sqlite://")
    monkeypatch.setenv("LEDGER_CURRENCY", "USD")

    app.main()

    labels = [label for label, _, _ in fake_st.metrics]
    assert labels[:3] == ["Assets", "Liabilities", "Net Worth"]
    assert fake_st.metrics[2][1] == "800.00 USD"
    assert fake_st.metrics[2][2] == "+0.00 (+0.00%)"
    kpi_rows, _ = fake_st.dataframes[0]
    assert kpi_rows[0]["KPI"] == "Debt-to-income"
    assert "Risk" in fake_st.subheaders
    assert fake_st.warnings
