"""SQLAlchemy models for the ledger store."""

from sqlalchemy import (
    Column,
    Integer,
    String,
    Text,
    Date,
    Numeric,
    Boolean,
    Index,
    create_engine,
)
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()

MONEY = Numeric(14, 2)


class LedgerEntry(Base):
    """Double-entry ledger row.

    Cash-flow category and cash flag are not columns; they are derived from
    account, note and bank_account when queried.
    """

    __tablename__ = "accounting_ledger_entries"

    id = Column(Integer, primary_key=True)
    date = Column(Date, nullable=False)
    account = Column(String(255), nullable=False)
    debit = Column(MONEY, nullable=False, default=0)
    credit = Column(MONEY, nullable=False, default=0)
    party = Column(String(255), nullable=True)
    note = Column(Text, nullable=True)
    bank_account = Column(String(255), nullable=True)
    reference = Column(String(255), nullable=True)
    reconciled = Column(Boolean, nullable=False, default=False)
    company_id = Column(Integer, nullable=False, default=1)

    __table_args__ = (
        Index("ix_ledger_company_date", "company_id", "date"),
        Index("ix_ledger_company_bank_account", "company_id", "bank_account"),
    )


def create_db_engine(database_url: str) -> Engine:
    """Create an engine with a connection pool for the given URL."""
    if database_url.startswith("sqlite"):
        # Pooled SQLite connections may be handed to a different worker thread
        return create_engine(
            database_url,
            echo=False,
            connect_args={"check_same_thread": False},
        )
    return create_engine(database_url, echo=False, pool_pre_ping=True)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory bound to an engine."""
    return sessionmaker(bind=engine, expire_on_commit=False)
