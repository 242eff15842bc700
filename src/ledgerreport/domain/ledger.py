"""Ledger entry query service."""

from datetime import date
from typing import Optional

from ledgerreport.database.base import Database
from ledgerreport.domain.entities import CashflowCategory, LedgerEntry
from ledgerreport.domain.errors import NotFoundError, entry_not_found


class LedgerService:
    """Read-only access to ledger entries."""

    def __init__(self, db: Database):
        """Initialize ledger service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_entry(self, entry_id: int) -> LedgerEntry:
        """Get ledger entry by ID.

        Raises:
            NotFoundError: If the entry does not exist
        """
        entry = self.db.get_entry(entry_id)
        if entry is None:
            raise NotFoundError(entry_not_found(entry_id))
        return entry

    def list_entries(
        self,
        company_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        bank_account: Optional[str] = None,
        unreconciled_only: bool = False,
        cash_only: bool = False,
        category: Optional[CashflowCategory] = None,
    ) -> list[LedgerEntry]:
        """List ledger entries with optional filters.

        Args:
            company_id: Optional company filter
            start_date: Optional inclusive start date
            end_date: Optional inclusive end date
            bank_account: Optional bank account filter
            unreconciled_only: If True, only return entries not yet reconciled
            cash_only: If True, only return cash transactions
            category: Optional cash-flow category filter

        Returns:
            Entries ordered by date, then ID
        """
        return self.db.list_entries(
            company_id=company_id,
            start_date=start_date,
            end_date=end_date,
            bank_account=bank_account,
            reconciled=False if unreconciled_only else None,
            cash_only=cash_only,
            category=category,
        )
