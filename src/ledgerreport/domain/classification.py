"""Cash-flow classification rules.

These constants are the only definition of how an entry is classified. The
database layer builds its SQL case expressions from them, so aggregates
computed in SQL and entities classified in Python always agree.

Rules are evaluated in order and the first match wins:

1. Operating  - account is one of ``OPERATING_ACCOUNTS``
2. Financing  - account is one of ``FINANCING_ACCOUNTS``, or the note contains
   ``FINANCING_NOTE_PHRASE`` (case-insensitive)
3. Investing  - everything else
"""

from typing import Optional

from ledgerreport.domain.entities import CashflowCategory, Classification

OPERATING_ACCOUNTS: tuple[str, ...] = (
    "Sales",
    "Office Rent",
    "Utilities Expense",
    "Inventory",
    "Bank Charges",
)
FINANCING_ACCOUNTS: tuple[str, ...] = ("Bank Loan",)
FINANCING_NOTE_PHRASE = "Capital Contribution"
DEFAULT_CATEGORY = CashflowCategory.INVESTING

CASH_ACCOUNT = "Cash"

BANK_CHARGE_NOTE_PHRASE = "bank charge"
BANK_CHARGE_ITEM = "bank charge not recorded"
OUTSTANDING_CHEQUE_ITEM = "outstanding cheque"


def _contains(text: Optional[str], phrase: str) -> bool:
    if text is None:
        return False
    return phrase.lower() in text.lower()


def classify_category(account: str, note: Optional[str]) -> CashflowCategory:
    """Return the cash-flow category for an account/note pair."""
    if account in OPERATING_ACCOUNTS:
        return CashflowCategory.OPERATING
    if account in FINANCING_ACCOUNTS or _contains(note, FINANCING_NOTE_PHRASE):
        return CashflowCategory.FINANCING
    return DEFAULT_CATEGORY


def is_cash_movement(account: str, bank_account: Optional[str]) -> bool:
    """Return True if the entry represents an actual movement of cash."""
    return account == CASH_ACCOUNT or bank_account is not None


def classify(
    account: str, note: Optional[str] = None, bank_account: Optional[str] = None
) -> Classification:
    """Classify a ledger entry.

    Args:
        account: Account name of the entry
        note: Optional free-text note
        bank_account: Optional bank account identifier

    Returns:
        Classification with the activity category and the cash flag
    """
    return Classification(
        category=classify_category(account, note),
        is_cash=is_cash_movement(account, bank_account),
    )


def reconciling_item_type(note: Optional[str]) -> str:
    """Describe why an unreconciled entry differs from the bank statement."""
    if _contains(note, BANK_CHARGE_NOTE_PHRASE):
        return BANK_CHARGE_ITEM
    return OUTSTANDING_CHEQUE_ITEM
