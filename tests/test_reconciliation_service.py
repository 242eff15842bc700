"""Tests for the bank reconciliation service."""

import pytest
from datetime import date
from decimal import Decimal
from unittest.mock import create_autospec

from ledgerreport.database.base import Database
from ledgerreport.domain.classification import BANK_CHARGE_ITEM, OUTSTANDING_CHEQUE_ITEM
from ledgerreport.domain.errors import DatastoreError, ValidationError
from ledgerreport.domain.reconciliation import (
    DEFAULT_BANK_BALANCE,
    ReconciliationService,
    fixed_bank_balance,
)


class TestSeededScenario:
    """Reconciliation of MainBank in the sample ledger."""

    def test_main_bank_report(self, seeded_db):
        report = ReconciliationService(seeded_db).generate_reconciliation(1, "MainBank")

        assert report.ledger_balance == Decimal("12000")
        assert report.bank_balance == Decimal("19000")
        assert [(i.reference, i.amount, i.type) for i in report.reconciling_items] == [
            ("CHQ102", Decimal("-3000"), OUTSTANDING_CHEQUE_ITEM),
            ("CHQ104", Decimal("-500"), OUTSTANDING_CHEQUE_ITEM),
        ]
        assert report.adjusted_balance == Decimal("15500")

    def test_adjusted_balance_is_bank_plus_items(self, seeded_db):
        report = ReconciliationService(seeded_db).generate_reconciliation(1, "MainBank")

        assert report.adjusted_balance == report.bank_balance + sum(
            item.amount for item in report.reconciling_items
        )

    def test_unknown_bank_account(self, seeded_db):
        report = ReconciliationService(seeded_db).generate_reconciliation(1, "OtherBank")

        assert report.ledger_balance == Decimal("0")
        assert report.reconciling_items == ()
        assert report.adjusted_balance == DEFAULT_BANK_BALANCE


class TestBankBalanceSource:
    """The statement balance is injected, never computed."""

    def test_provider_receives_company_and_account(self, seeded_db):
        calls = []

        def provider(company_id, bank_account):
            calls.append((company_id, bank_account))
            return Decimal("12000")

        report = ReconciliationService(seeded_db, bank_balance_provider=provider).generate_reconciliation(
            1, "MainBank"
        )

        assert calls == [(1, "MainBank")]
        assert report.bank_balance == Decimal("12000")
        assert report.adjusted_balance == Decimal("8500")

    def test_explicit_balance_overrides_provider(self, seeded_db):
        service = ReconciliationService(seeded_db, bank_balance_provider=fixed_bank_balance(Decimal("1")))

        report = service.generate_reconciliation(1, "MainBank", bank_balance=Decimal("15500"))

        assert report.bank_balance == Decimal("15500")
        assert report.adjusted_balance == Decimal("12000")
        assert report.adjusted_balance == report.ledger_balance

    def test_fixed_bank_balance_rounds_to_cents(self):
        provider = fixed_bank_balance(Decimal("100.005"))
        assert str(provider(1, "MainBank")) == "100.00"


class TestReconcilingItems:
    """Typing and selection of reconciling items."""

    def test_bank_charge_note_is_typed(self, temp_db, add_entry):
        add_entry(
            "Bank Charges",
            credit="25",
            note="Bank charge - wire fee",
            bank_account="MainBank",
            reference="FEE1",
        )

        report = ReconciliationService(temp_db).generate_reconciliation(1, "MainBank")

        assert report.reconciling_items[0].type == BANK_CHARGE_ITEM

    def test_entry_without_note_or_reference(self, temp_db, add_entry):
        add_entry("Cash", debit="40", bank_account="MainBank")

        report = ReconciliationService(temp_db).generate_reconciliation(1, "MainBank")

        item = report.reconciling_items[0]
        assert item.reference is None
        assert item.amount == Decimal("40")
        assert item.type == OUTSTANDING_CHEQUE_ITEM

    def test_ledger_balance_ignores_dates_and_cash_flag(self, temp_db, add_entry):
        add_entry("Cash", debit="100", bank_account="MainBank", entry_date=date(2020, 1, 1), reconciled=True)
        add_entry("Cash", debit="50", bank_account="MainBank", entry_date=date(2030, 1, 1), reconciled=True)
        add_entry("Cash", debit="999", bank_account="MainBank", company_id=2)

        report = ReconciliationService(temp_db).generate_reconciliation(1, "MainBank")

        assert report.ledger_balance == Decimal("150")
        assert report.reconciling_items == ()


class TestValidationAndFailures:
    """Input validation and datastore failure behavior."""

    @pytest.mark.parametrize(
        "company_id,bank_account,missing",
        [(None, "MainBank", "companyid"), (1, None, "bankaccount"), (1, "  ", "bankaccount")],
    )
    def test_missing_parameter_raises_before_query(self, company_id, bank_account, missing):
        db = create_autospec(Database, instance=True)

        with pytest.raises(ValidationError, match=missing):
            ReconciliationService(db).generate_reconciliation(company_id, bank_account)

        db.get_balance.assert_not_called()
        db.list_entries.assert_not_called()

    def test_datastore_failure_propagates(self, broken_db):
        with pytest.raises(DatastoreError):
            ReconciliationService(broken_db).generate_reconciliation(1, "MainBank")
