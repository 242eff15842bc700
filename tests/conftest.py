"""Shared pytest fixtures for ledgerreport tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
import pytest

from ledgerreport.config import Settings
from ledgerreport.database.factories import create_sqlite_database
from ledgerreport.database.seed import seed_sample_data
from ledgerreport.domain.cashflow import CashFlowService
from ledgerreport.domain.ledger import LedgerService
from ledgerreport.domain.reconciliation import ReconciliationService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def seeded_db(temp_db):
    """Temporary database loaded with the January 2025 sample ledger."""
    seed_sample_data(temp_db)
    return temp_db


@pytest.fixture
def broken_db(tmp_path):
    """A ledger store whose file can never be opened."""
    db = create_sqlite_database(database_path=str(tmp_path / "missing" / "dir" / "ledger.db"))
    yield db
    db.disconnect()


@pytest.fixture
def add_entry(temp_db):
    """Return a helper that inserts a ledger entry with sensible defaults."""

    def _add_entry(
        account,
        debit="0",
        credit="0",
        entry_date=date(2025, 3, 1),
        note=None,
        bank_account=None,
        reference=None,
        reconciled=False,
        company_id=1,
        party=None,
    ):
        return temp_db.create_entry(
            date=entry_date,
            account=account,
            debit=Decimal(debit),
            credit=Decimal(credit),
            party=party,
            note=note,
            bank_account=bank_account,
            reference=reference,
            reconciled=reconciled,
            company_id=company_id,
        )

    return _add_entry


@pytest.fixture
def cash_flow_service(temp_db):
    """Create a CashFlowService with a temporary database."""
    return CashFlowService(temp_db)


@pytest.fixture
def reconciliation_service(temp_db):
    """Create a ReconciliationService with a temporary database."""
    return ReconciliationService(temp_db)


@pytest.fixture
def ledger_service(temp_db):
    """Create a LedgerService with a temporary database."""
    return LedgerService(temp_db)


@pytest.fixture
def settings(temp_db):
    """Settings pointing at the temporary database."""
    return Settings(database_url=temp_db.database_url)


@pytest.fixture
def api_client(seeded_db, settings):
    """Create a FastAPI test client over the seeded database."""
    from fastapi.testclient import TestClient
    from ledgerreport.web.app import create_app

    app = create_app(settings=settings, db=seeded_db)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
