"""Database factory functions for creating ledger store instances."""

import os
from pathlib import Path
from typing import Mapping, Optional

from ledgerreport.database.sqlalchemy_db import SQLAlchemyDatabase


def home_database_url() -> str:
    """Return the URL of the per-user SQLite file, ~/.ledgerreport/ledger.db"""
    db_dir = Path.home() / ".ledgerreport"
    db_dir.mkdir(exist_ok=True)
    return f"sqlite:///{db_dir / 'ledger.db'}"


def default_database_url(environ: Optional[Mapping[str, str]] = None) -> str:
    """Return the URL used when none is configured.

    Checks LEDGERREPORT_DATABASE_URL, then DATABASE_URL, then falls back to
    home_database_url()

    Args:
        environ: Variables to read instead of os.environ
    """
    env = os.environ if environ is None else environ
    database_url = env.get("LEDGERREPORT_DATABASE_URL") or env.get("DATABASE_URL")
    if database_url:
        return database_url
    return home_database_url()


def create_database(database_url: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a ledger store for any SQLAlchemy URL.

    Args:
        database_url: SQLAlchemy database URL. If None, uses default_database_url()

    Returns:
        SQLAlchemyDatabase instance
    """
    if database_url is None:
        database_url = default_database_url()
    return SQLAlchemyDatabase(database_url)


def create_sqlite_database(database_path: str) -> SQLAlchemyDatabase:
    """Create a SQLite ledger store backed by a file.

    Args:
        database_path: Path to SQLite database file

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    return SQLAlchemyDatabase(f"sqlite:///{database_path}")
