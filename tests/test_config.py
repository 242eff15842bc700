"""Tests for environment-driven settings."""

import pytest
from decimal import Decimal

from ledgerreport.config import Settings
from ledgerreport.database.factories import default_database_url
from ledgerreport.domain.entities import ClosingBalanceScope


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))

    settings = Settings.from_env({})

    assert settings.database_url == f"sqlite:///{tmp_path / '.ledgerreport' / 'ledger.db'}"
    assert settings.bank_balance == Decimal("19000")
    assert settings.closing_balance_scope == ClosingBalanceScope.CASH_ONLY
    assert settings.log_level == "WARNING"


def test_values_from_environment():
    settings = Settings.from_env(
        {
            "LEDGERREPORT_DATABASE_URL": "postgresql://ledger@db/ledger",
            "LEDGERREPORT_BANK_BALANCE": "15,500.25",
            "LEDGERREPORT_CLOSING_BALANCE_SCOPE": "all",
            "LEDGERREPORT_LOG_LEVEL": "debug",
        }
    )

    assert settings.database_url == "postgresql://ledger@db/ledger"
    assert settings.bank_balance == Decimal("15500.25")
    assert settings.closing_balance_scope == ClosingBalanceScope.ALL
    assert settings.log_level == "DEBUG"


def test_database_url_fallback():
    settings = Settings.from_env({"DATABASE_URL": "sqlite:///fallback.db"})

    assert settings.database_url == "sqlite:///fallback.db"


def test_prefixed_database_url_wins():
    settings = Settings.from_env(
        {"DATABASE_URL": "sqlite:///fallback.db", "LEDGERREPORT_DATABASE_URL": "sqlite:///primary.db"}
    )

    assert settings.database_url == "sqlite:///primary.db"


@pytest.mark.parametrize(
    "name,value",
    [
        ("LEDGERREPORT_BANK_BALANCE", "lots"),
        ("LEDGERREPORT_CLOSING_BALANCE_SCOPE", "sometimes"),
    ],
)
def test_invalid_values_raise(name, value):
    with pytest.raises(ValueError):
        Settings.from_env({"DATABASE_URL": "sqlite://", name: value})


def test_given_mapping_ignores_process_environment(monkeypatch):
    monkeypatch.setenv("LEDGERREPORT_DATABASE_URL", "sqlite:///process.db")

    settings = Settings.from_env({"DATABASE_URL": "sqlite:///given.db"})

    assert settings.database_url == "sqlite:///given.db"


def test_default_database_url_reads_given_mapping(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("LEDGERREPORT_DATABASE_URL", raising=False)
    monkeypatch.setenv("DATABASE_URL", "sqlite:///process.db")

    assert default_database_url({"DATABASE_URL": "sqlite:///given.db"}) == "sqlite:///given.db"
    assert default_database_url({}) == f"sqlite:///{tmp_path / '.ledgerreport' / 'ledger.db'}"
    assert default_database_url() == "sqlite:///process.db"


def test_out_of_range_bank_balance_raises():
    with pytest.raises(ValueError, match="exceeds"):
        Settings.from_env({"DATABASE_URL": "sqlite://", "LEDGERREPORT_BANK_BALANCE": "1e30"})
