"""Domain model entities for ledgerreport.

These are pure data classes representing business concepts, independent of
database schema. Classification of a ledger entry is never stored on the
entity; it is derived from the entry's own fields every time it is read.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

CENT = Decimal("0.01")


def to_money(value: Any) -> Decimal:
    """Coerce a numeric value (or None) into a Decimal rounded to cents."""
    if value is None:
        return Decimal("0.00")
    if not isinstance(value, Decimal):
        # str() keeps floats coming back from SQLite from leaking binary noise
        value = Decimal(str(value))
    return value.quantize(CENT)


class CashflowCategory(str, Enum):
    """Cash-flow statement activity buckets."""

    OPERATING = "Operating"
    INVESTING = "Investing"
    FINANCING = "Financing"

    @property
    def key(self) -> str:
        """Lower-case key used in report payloads."""
        return self.value.lower()


class ClosingBalanceScope(str, Enum):
    """Which entries count towards the cash-flow closing balance."""

    ALL = "all"
    CASH_ONLY = "cash-only"

    @classmethod
    def parse(cls, value: str) -> "ClosingBalanceScope":
        """Parse a scope name, accepting underscores and any case."""
        normalized = value.strip().lower().replace("_", "-")
        for scope in cls:
            if scope.value == normalized:
                return scope
        choices = ", ".join(scope.value for scope in cls)
        raise ValueError(f"Unknown closing balance scope '{value}'. Choose one of: {choices}")


@dataclass(frozen=True)
class Classification:
    """Result of applying the classification rules to one entry."""

    category: CashflowCategory
    is_cash: bool


@dataclass(frozen=True)
class LedgerEntry:
    """Ledger entry domain entity."""

    id: int
    date: date
    account: str
    debit: Decimal
    credit: Decimal
    party: Optional[str] = None
    note: Optional[str] = None
    bank_account: Optional[str] = None
    reference: Optional[str] = None
    reconciled: bool = False
    company_id: int = 1

    @property
    def net(self) -> Decimal:
        """Net effect of the entry (debit minus credit)."""
        return to_money(self.debit) - to_money(self.credit)

    @property
    def classification(self) -> Classification:
        from ledgerreport.domain.classification import classify

        return classify(self.account, self.note, self.bank_account)

    @property
    def cashflow_category(self) -> CashflowCategory:
        return self.classification.category

    @property
    def is_cash_transaction(self) -> bool:
        return self.classification.is_cash


@dataclass(frozen=True)
class CategoryTotals:
    """Inflow/outflow/net totals for one cash-flow category."""

    inflows: Decimal
    outflows: Decimal
    net: Decimal

    @classmethod
    def zero(cls) -> "CategoryTotals":
        return cls(inflows=to_money(0), outflows=to_money(0), net=to_money(0))

    def to_dict(self) -> dict[str, Decimal]:
        return {"inflows": self.inflows, "outflows": self.outflows, "net": self.net}


@dataclass(frozen=True)
class CategoryTotalsRow:
    """One grouped aggregate row returned by the ledger store."""

    category: CashflowCategory
    totals: CategoryTotals


@dataclass(frozen=True)
class CashFlowReport:
    """Cash-flow statement for one company over a date range."""

    operating: CategoryTotals
    investing: CategoryTotals
    financing: CategoryTotals
    net_change: Decimal
    closing_balance: Decimal

    def for_category(self, category: CashflowCategory) -> CategoryTotals:
        """Return the totals bucket for a category."""
        return getattr(self, category.key)

    def to_dict(self) -> dict[str, Any]:
        """Return the report in its wire shape."""
        return {
            "operating": self.operating.to_dict(),
            "investing": self.investing.to_dict(),
            "financing": self.financing.to_dict(),
            "netChange": self.net_change,
            "closingBalance": self.closing_balance,
        }


@dataclass(frozen=True)
class ReconcilingItem:
    """An unreconciled ledger entry surfaced on a reconciliation report."""

    reference: Optional[str]
    amount: Decimal
    type: str

    def to_dict(self) -> dict[str, Any]:
        return {"reference": self.reference, "amount": self.amount, "type": self.type}


@dataclass(frozen=True)
class ReconciliationReport:
    """Ledger vs. bank-statement comparison for one bank account."""

    ledger_balance: Decimal
    bank_balance: Decimal
    reconciling_items: tuple[ReconcilingItem, ...] = field(default_factory=tuple)
    adjusted_balance: Decimal = Decimal("0.00")

    def to_dict(self) -> dict[str, Any]:
        """Return the report in its wire shape."""
        return {
            "ledgerBalance": self.ledger_balance,
            "bankBalance": self.bank_balance,
            "reconcilingItems": [item.to_dict() for item in self.reconciling_items],
            "adjustedBalance": self.adjusted_balance,
        }
