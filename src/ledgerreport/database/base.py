"""Abstract ledger store interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from ledgerreport.domain.entities import (
    CashflowCategory,
    CategoryTotalsRow,
    LedgerEntry,
)


class Database(ABC):
    """Abstract ledger store for ledgerreport."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database and release pooled connections."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Entry operations
    @abstractmethod
    def create_entry(
        self,
        date: date,
        account: str,
        debit: Decimal = Decimal("0"),
        credit: Decimal = Decimal("0"),
        party: Optional[str] = None,
        note: Optional[str] = None,
        bank_account: Optional[str] = None,
        reference: Optional[str] = None,
        reconciled: bool = False,
        company_id: int = 1,
    ) -> int:
        """Create a ledger entry. Returns entry ID.

        Only used by seeding and test fixtures; reports never write.
        """
        pass

    @abstractmethod
    def get_entry(self, entry_id: int) -> Optional[LedgerEntry]:
        """Get ledger entry by ID."""
        pass

    @abstractmethod
    def count_entries(self, company_id: Optional[int] = None) -> int:
        """Count ledger entries, optionally for a single company."""
        pass

    @abstractmethod
    def list_entries(
        self,
        company_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        bank_account: Optional[str] = None,
        reconciled: Optional[bool] = None,
        cash_only: bool = False,
        category: Optional[CashflowCategory] = None,
    ) -> list[LedgerEntry]:
        """List ledger entries with optional filters, ordered by date then ID.

        Args:
            company_id: Optional exact company filter
            start_date: Optional inclusive lower date bound
            end_date: Optional inclusive upper date bound
            bank_account: Optional exact bank account filter
            reconciled: Optional exact reconciled-flag filter
            cash_only: If True, only return cash transactions
            category: Optional cash-flow category filter
        """
        pass

    # Aggregate operations
    @abstractmethod
    def get_cash_flow_totals(
        self, company_id: int, start_date: date, end_date: date
    ) -> list[CategoryTotalsRow]:
        """Sum inflows, outflows and net per category over cash transactions.

        Only categories with at least one matching entry are returned.
        """
        pass

    @abstractmethod
    def get_balance(
        self,
        company_id: int,
        end_date: Optional[date] = None,
        bank_account: Optional[str] = None,
        cash_only: bool = False,
    ) -> Decimal:
        """Sum debit minus credit over matching entries.

        Returns zero when nothing matches.
        """
        pass
