"""Mapper functions to convert between domain models and SQLAlchemy rows.

This layer isolates the conversion logic, including normalizing whatever
numeric type the driver hands back into cent-rounded Decimals.
"""

from typing import Any

from ledgerreport.domain import entities as domain
from ledgerreport.domain.entities import to_money
from ledgerreport.database.models import LedgerEntry as ORMLedgerEntry


def ledger_entry_to_domain(orm_entry: ORMLedgerEntry) -> domain.LedgerEntry:
    """Convert SQLAlchemy LedgerEntry model to domain LedgerEntry entity."""
    return domain.LedgerEntry(
        id=orm_entry.id,
        date=orm_entry.date,
        account=orm_entry.account,
        debit=to_money(orm_entry.debit),
        credit=to_money(orm_entry.credit),
        party=orm_entry.party,
        note=orm_entry.note,
        bank_account=orm_entry.bank_account,
        reference=orm_entry.reference,
        reconciled=bool(orm_entry.reconciled),
        company_id=orm_entry.company_id,
    )


def totals_row_to_domain(row: Any) -> domain.CategoryTotalsRow:
    """Convert a grouped aggregate row to a domain CategoryTotalsRow.

    The row must expose ``category``, ``inflows``, ``outflows`` and ``net``.
    """
    return domain.CategoryTotalsRow(
        category=domain.CashflowCategory(row.category),
        totals=domain.CategoryTotals(
            inflows=to_money(row.inflows),
            outflows=to_money(row.outflows),
            net=to_money(row.net),
        ),
    )
