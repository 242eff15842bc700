"""ledgerreport web interface: cash-flow and reconciliation report endpoints.

Usage:
    uvicorn ledgerreport.web.app:create_app --factory
    # or: ledgerreport serve
"""

import logging
from contextlib import asynccontextmanager
from datetime import date
from decimal import Decimal
from typing import Any, Optional

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from ledgerreport.config import Settings, configure_logging
from ledgerreport.database.base import Database
from ledgerreport.database.factories import create_database
from ledgerreport.domain.cashflow import CashFlowService
from ledgerreport.domain.entities import ClosingBalanceScope
from ledgerreport.domain.errors import (
    GENERIC_DATASTORE_MESSAGE,
    DatastoreError,
    ValidationError,
    invalid_amount,
    invalid_date,
)
from ledgerreport.domain.reconciliation import ReconciliationService, fixed_bank_balance
from ledgerreport.domain.validation import parse_company_id, require_parameters
from ledgerreport.utils.amount_parser import parse_amount
from ledgerreport.utils.date_parser import parse_iso_date

log = logging.getLogger(__name__)


# --- Query parameter parsing ---


def _iso_date(raw: str) -> date:
    try:
        return parse_iso_date(raw)
    except ValueError as e:
        raise ValidationError(invalid_date(raw, e))


def _optional_amount(raw: Optional[str]) -> Optional[Decimal]:
    if raw is None or not raw.strip():
        return None
    try:
        return parse_amount(raw)
    except ValueError as e:
        raise ValidationError(invalid_amount(raw, e))


def _optional_scope(raw: Optional[str]) -> Optional[ClosingBalanceScope]:
    if raw is None or not raw.strip():
        return None
    try:
        return ClosingBalanceScope.parse(raw)
    except ValueError as e:
        raise ValidationError(str(e))


def _report_response(payload: dict[str, Any]) -> JSONResponse:
    # Decimals go out as JSON numbers
    return JSONResponse(jsonable_encoder(payload))


# --- Dependencies ---


def get_cash_flow_service(request: Request) -> CashFlowService:
    return request.app.state.cash_flow_service


def get_reconciliation_service(request: Request) -> ReconciliationService:
    return request.app.state.reconciliation_service


# --- App ---


def create_app(settings: Optional[Settings] = None, db: Optional[Database] = None) -> FastAPI:
    """Build the FastAPI application around an explicitly constructed ledger store.

    Args:
        settings: Runtime settings; read from the environment (and .env) if None
        db: Ledger store to serve from; created from settings if None. A store
            passed in is left open on shutdown, one created here is disposed.
    """
    if settings is None:
        load_dotenv()
        settings = Settings.from_env()
        configure_logging(settings.log_level)

    owns_db = db is None
    if db is None:
        db = create_database(settings.database_url)
        db.connect()
        db.initialize_schema()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        if owns_db:
            db.disconnect()

    app = FastAPI(title="ledgerreport", docs_url=None, redoc_url=None, lifespan=lifespan)
    app.state.settings = settings
    app.state.db = db
    app.state.cash_flow_service = CashFlowService(
        db, closing_balance_scope=settings.closing_balance_scope
    )
    app.state.reconciliation_service = ReconciliationService(
        db, bank_balance_provider=fixed_bank_balance(settings.bank_balance)
    )

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return JSONResponse({"error": str(exc)}, status_code=400)

    @app.exception_handler(DatastoreError)
    async def datastore_error_handler(request: Request, exc: DatastoreError):
        log.error("%s %s failed: %s", request.method, request.url.path, exc, exc_info=exc)
        return JSONResponse({"error": GENERIC_DATASTORE_MESSAGE}, status_code=500)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        log.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse({"error": GENERIC_DATASTORE_MESSAGE}, status_code=500)

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/api/cashflow")
    def cash_flow(
        companyid: Optional[str] = None,
        fromDate: Optional[str] = None,
        toDate: Optional[str] = None,
        scope: Optional[str] = None,
        service: CashFlowService = Depends(get_cash_flow_service),
    ) -> JSONResponse:
        require_parameters(companyid=companyid, fromDate=fromDate, toDate=toDate)
        report = service.generate_cash_flow(
            parse_company_id(companyid),
            _iso_date(fromDate),
            _iso_date(toDate),
            closing_balance_scope=_optional_scope(scope),
        )
        return _report_response(report.to_dict())

    @app.get("/api/reconciliation")
    def reconciliation(
        companyid: Optional[str] = None,
        bankaccount: Optional[str] = None,
        bankbalance: Optional[str] = None,
        service: ReconciliationService = Depends(get_reconciliation_service),
    ) -> JSONResponse:
        require_parameters(companyid=companyid, bankaccount=bankaccount)
        report = service.generate_reconciliation(
            parse_company_id(companyid),
            bankaccount.strip(),
            bank_balance=_optional_amount(bankbalance),
        )
        return _report_response(report.to_dict())

    return app
