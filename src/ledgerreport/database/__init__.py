"""Database layer for ledgerreport."""

from ledgerreport.database.base import Database
from ledgerreport.database.factories import create_database, create_sqlite_database

__all__ = ["Database", "create_database", "create_sqlite_database"]
