"""Tests for the report_cli adapter."""

from unittest.mock import MagicMock

from src.adapters import report_cli
from src.application.use_cases.financial_engine import FinancialEngine


def _wire(monkeypatch, repository, logger):
    monkeypatch.setattr(report_cli, "get_app_logger", lambda: logger)
    monkeypatch.setattr(report_cli, "get_usage_logger", MagicMock)
    monkeypatch.setattr(
        report_cli,
        "build_ledger_repository",
        lambda: repository,
    )
    monkeypatch.setattr(
        report_cli,
        "build_financial_engine",
        lambda settings: FinancialEngine(settings.currency, logger=logger),
    )
    monkeypatch.setenv("LEDGER_DB_URL", "sqlite://")
    monkeypatch.setenv("LEDGER_STORAGE_KEY", "household")


def test_main_prints_report_for_stored_ledger(monkeypatch, capsys):
    """The CLI should print totals, KPIs and risk factors."""
    repository = MagicMock()
    repository.load.return_value = {
        "currency": "USD",
        "assets": [
            {"id": "a1", "name": "Checking", "category": "checking",
             "value": "5000"},
        ],
        "liabilities": [
            {"id": "l1", "name": "Mortgage", "category": "mortgage",
             "balance": "200000", "monthly_payment": "1200"},
        ],
        "income_streams": [
            {"id": "i1", "name": "Salary", "monthly_amount": "6000"},
        ],
        "expenses": [],
    }
    _wire(monkeypatch, repository, MagicMock())

    report_cli.main()

    out = capsys.readouterr().out
    repository.load.assert_called_once_with("household")
    assert "Net worth: -195,000.00" in out
    assert "Debt-to-worth: unbounded" in out
    assert "Debt-to-income: 20.00%" in out
    assert "Negative net worth" in out


def test_main_warns_when_nothing_is_stored(monkeypatch, capsys):
    logger = MagicMock()
    repository = MagicMock()
    repository.load.return_value = None
    _wire(monkeypatch, repository, logger)

    report_cli.main()

    logger.warning.assert_called_once()
    assert capsys.readouterr().out == ""


def test_main_logs_unreadable_ledger(monkeypatch, capsys):
    logger = MagicMock()
    repository = MagicMock()
    repository.load.side_effect = ValueError("not json")
    _wire(monkeypatch, repository, logger)

    report_cli.main()

    assert logger.error.called
    assert capsys.readouterr().out == ""
