"""Cash-flow statement domain service."""

import logging
from datetime import date
from typing import Optional

from ledgerreport.database.base import Database
from ledgerreport.domain.entities import (
    CashFlowReport,
    CashflowCategory,
    CategoryTotals,
    ClosingBalanceScope,
)
from ledgerreport.domain.validation import require_parameters

log = logging.getLogger(__name__)


class CashFlowService:
    """Service for building cash-flow statements."""

    def __init__(
        self,
        db: Database,
        closing_balance_scope: ClosingBalanceScope = ClosingBalanceScope.CASH_ONLY,
    ):
        """Initialize cash-flow service.

        Args:
            db: Database instance
            closing_balance_scope: Which entries count towards the closing
                balance: every entry, or cash transactions only
        """
        self.db = db
        self.closing_balance_scope = closing_balance_scope

    def generate_cash_flow(
        self,
        company_id: Optional[int],
        from_date: Optional[date],
        to_date: Optional[date],
        closing_balance_scope: Optional[ClosingBalanceScope] = None,
    ) -> CashFlowReport:
        """Build the cash-flow statement for a company over a date range.

        Args:
            company_id: Company ID
            from_date: Inclusive start date
            to_date: Inclusive end date; also the cut-off for the closing balance
            closing_balance_scope: Overrides the service default for this report

        Returns:
            CashFlowReport with all three categories present

        Raises:
            ValidationError: If a required parameter is missing
            DatastoreError: If the ledger store fails
        """
        require_parameters(companyid=company_id, fromDate=from_date, toDate=to_date)
        scope = closing_balance_scope or self.closing_balance_scope

        buckets = {category: CategoryTotals.zero() for category in CashflowCategory}
        for row in self.db.get_cash_flow_totals(company_id, from_date, to_date):
            buckets[row.category] = row.totals

        net_change = sum(
            (totals.net for totals in buckets.values()), CategoryTotals.zero().net
        )
        closing_balance = self.db.get_balance(
            company_id,
            end_date=to_date,
            cash_only=scope == ClosingBalanceScope.CASH_ONLY,
        )

        log.debug(
            "Cash flow for company %s %s..%s: net change %s, closing %s (%s)",
            company_id,
            from_date,
            to_date,
            net_change,
            closing_balance,
            scope.value,
        )
        return CashFlowReport(
            operating=buckets[CashflowCategory.OPERATING],
            investing=buckets[CashflowCategory.INVESTING],
            financing=buckets[CashflowCategory.FINANCING],
            net_change=net_change,
            closing_balance=closing_balance,
        )
