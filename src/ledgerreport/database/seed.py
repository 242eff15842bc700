"""Sample ledger data for demos and tests."""

import logging
from datetime import date
from decimal import Decimal

from ledgerreport.database.base import Database

log = logging.getLogger(__name__)

# (date, account, debit, credit, party, note, bank_account, reference, reconciled)
SAMPLE_ENTRIES = [
    (date(2025, 1, 2), "Cash", "10000", "0", "Investor", "Capital Contribution", "MainBank", "DEP001", True),
    (date(2025, 1, 5), "Office Rent", "0", "2000", "Landlord Ltd.", "January rent", "MainBank", "CHQ101", True),
    (date(2025, 1, 10), "Inventory", "0", "3000", "Supplier A", "Purchase inventory", "MainBank", "CHQ102", False),
    (date(2025, 1, 15), "Sales", "0", "8000", "Customer B", "Sales Invoice", None, None, False),
    (date(2025, 1, 16), "Cash", "8000", "0", "Customer B", "Payment received", "MainBank", "DEP002", True),
    (date(2025, 1, 20), "Utilities Expense", "0", "500", "Power Co", "Electricity bill", "MainBank", "CHQ103", True),
    (date(2025, 1, 25), "Bank Loan", "0", "7000", "BigBank", "Loan received", "MainBank", "DEP003", True),
    (date(2025, 1, 26), "Cash", "7000", "0", "BigBank", "Loan deposit", "MainBank", "DEP003", True),
    (date(2025, 1, 28), "Bank Charges", "0", "500", "BigBank", "Monthly service charge", "MainBank", "CHQ104", False),
]


def seed_sample_data(db: Database, company_id: int = 1) -> int:
    """Insert the sample ledger when the company has no entries yet.

    Args:
        db: Database instance
        company_id: Company the sample rows belong to

    Returns:
        Number of rows inserted (0 if the company already had data)
    """
    if db.count_entries(company_id=company_id) > 0:
        log.info("Company %s already has ledger entries, skipping seed", company_id)
        return 0

    for entry_date, account, debit, credit, party, note, bank_account, reference, reconciled in SAMPLE_ENTRIES:
        db.create_entry(
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

    log.info("Seeded %d ledger entries for company %s", len(SAMPLE_ENTRIES), company_id)
    return len(SAMPLE_ENTRIES)
