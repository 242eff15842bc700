"""Bank reconciliation domain service."""

import logging
from decimal import Decimal
from typing import Callable, Optional

from ledgerreport.database.base import Database
from ledgerreport.domain.classification import reconciling_item_type
from ledgerreport.domain.entities import (
    ReconciliationReport,
    ReconcilingItem,
    to_money,
)
from ledgerreport.domain.validation import require_parameters

log = logging.getLogger(__name__)

# (company_id, bank_account) -> balance shown on the bank statement
BankBalanceProvider = Callable[[int, str], Decimal]

DEFAULT_BANK_BALANCE = Decimal("19000")


def fixed_bank_balance(balance: Decimal = DEFAULT_BANK_BALANCE) -> BankBalanceProvider:
    """Return a provider that reports the same statement balance for every account."""
    amount = to_money(balance)

    def provider(company_id: int, bank_account: str) -> Decimal:
        return amount

    return provider


class ReconciliationService:
    """Service for reconciling the ledger against a bank statement."""

    def __init__(self, db: Database, bank_balance_provider: Optional[BankBalanceProvider] = None):
        """Initialize reconciliation service.

        Args:
            db: Database instance
            bank_balance_provider: Source of bank-statement balances. Defaults
                to a fixed balance of 19000.
        """
        self.db = db
        self.bank_balance_provider = bank_balance_provider or fixed_bank_balance()

    def generate_reconciliation(
        self,
        company_id: Optional[int],
        bank_account: Optional[str],
        bank_balance: Optional[Decimal] = None,
    ) -> ReconciliationReport:
        """Build the reconciliation report for one bank account.

        Args:
            company_id: Company ID
            bank_account: Bank account identifier
            bank_balance: Statement balance to use instead of the provider's

        Returns:
            ReconciliationReport listing every unreconciled entry

        Raises:
            ValidationError: If a required parameter is missing
            DatastoreError: If the ledger store fails
        """
        require_parameters(companyid=company_id, bankaccount=bank_account)

        ledger_balance = self.db.get_balance(company_id, bank_account=bank_account)
        if bank_balance is None:
            bank_balance = self.bank_balance_provider(company_id, bank_account)
        bank_balance = to_money(bank_balance)

        unreconciled = self.db.list_entries(
            company_id=company_id, bank_account=bank_account, reconciled=False
        )
        items = tuple(
            ReconcilingItem(
                reference=entry.reference,
                amount=entry.net,
                type=reconciling_item_type(entry.note),
            )
            for entry in unreconciled
        )
        adjusted_balance = bank_balance + sum((item.amount for item in items), Decimal("0.00"))

        log.debug(
            "Reconciliation for company %s account %s: ledger %s, bank %s, %d item(s)",
            company_id,
            bank_account,
            ledger_balance,
            bank_balance,
            len(items),
        )
        return ReconciliationReport(
            ledger_balance=ledger_balance,
            bank_balance=bank_balance,
            reconciling_items=items,
            adjusted_balance=adjusted_balance,
        )
