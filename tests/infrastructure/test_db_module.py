"""Tests for the infrastructure.db module."""

import pytest

from src.infrastructure import db as db_module
from src.infrastructure.settings import LedgerSettings


def test_resolve_db_url_loads_dotenv_and_reads_settings(monkeypatch):
    """_resolve_db_url should load .env before reading LEDGER_DB_URL."""
    calls = []
    monkeypatch.setattr(
        db_module.dotenv,
        "load_dotenv",
        lambda: calls.append("dotenv"),
    )
    monkeypatch.setenv("LEDGER_DB_URL", "postgresql://ledger")

    assert db_module._resolve_db_url() == "postgresql://ledger"
    assert calls == ["dotenv"]


def test_resolve_db_url_raises_when_unresolved(monkeypatch):
    """An empty resolved URL should raise a RuntimeError."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(
        db_module.LedgerSettings,
        "from_env",
        classmethod(lambda cls: LedgerSettings(db_url="")),
    )

    with pytest.raises(RuntimeError):
        db_module._resolve_db_url()


def test_create_engine_passes_pool_configuration(monkeypatch):
    """Server databases should get a QueuePool with health checks."""
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured["db_url"] = db_url
        captured["kwargs"] = kwargs
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    engine = db_module._create_engine("postgresql://user@host/ledger")

    assert engine == "engine"
    assert captured["kwargs"]["poolclass"] is db_module.QueuePool
    assert captured["kwargs"]["pool_size"] == 5
    assert captured["kwargs"]["max_overflow"] == 5
    assert captured["kwargs"]["pool_pre_ping"] is True
    assert captured["kwargs"]["future"] is True


def test_create_engine_prepares_sqlite_directory(monkeypatch, tmp_path):
    """SQLite URLs should get their parent directory created."""
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured["kwargs"] = kwargs
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)
    target = tmp_path / "nested" / "ledger.db"

    db_module._create_engine(f"sqlite:///{target}")

    assert target.parent.is_dir()
    assert "poolclass" not in captured["kwargs"]


def test_get_ledger_engine_caches_engine(monkeypatch):
    """get_ledger_engine should memoize the created engine."""
    monkeypatch.setattr(db_module, "_ledger_engine", None)
    created = []

    def fake_create_engine(url):
        created.append(url)
        return f"engine:{url}"

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("LEDGER_DB_URL", "postgresql://ledger")

    engine_one = db_module.get_ledger_engine()
    engine_two = db_module.get_ledger_engine()

    assert engine_one is engine_two
    assert created == ["postgresql://ledger"]


def test_adapter_returns_underlying_engine(monkeypatch):
    """SqlAlchemyDatabaseEngineAdapter should proxy the module helper."""
    monkeypatch.setattr(db_module, "get_ledger_engine", lambda: "ledger")

    adapter = db_module.SqlAlchemyDatabaseEngineAdapter()

    assert adapter.get_ledger_engine() == "ledger"
