"""Environment-driven settings for ledgerreport."""

import logging
import os
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Mapping, Optional

from ledgerreport.database.factories import default_database_url
from ledgerreport.domain.entities import ClosingBalanceScope
from ledgerreport.domain.reconciliation import DEFAULT_BANK_BALANCE
from ledgerreport.utils.amount_parser import parse_amount

ENV_PREFIX = "LEDGERREPORT_"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    """Runtime configuration shared by the CLI and the web app."""

    database_url: str = field(default_factory=default_database_url)
    bank_balance: Decimal = DEFAULT_BANK_BALANCE
    closing_balance_scope: ClosingBalanceScope = ClosingBalanceScope.CASH_ONLY
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from LEDGERREPORT_* environment variables.

        Raises:
            ValueError: If a variable is set to an unparsable value
        """
        env = os.environ if environ is None else environ

        database_url = default_database_url(env)

        bank_balance = DEFAULT_BANK_BALANCE
        raw_balance = env.get(f"{ENV_PREFIX}BANK_BALANCE")
        if raw_balance:
            bank_balance = parse_amount(raw_balance)

        scope = ClosingBalanceScope.CASH_ONLY
        raw_scope = env.get(f"{ENV_PREFIX}CLOSING_BALANCE_SCOPE")
        if raw_scope:
            scope = ClosingBalanceScope.parse(raw_scope)

        log_level = env.get(f"{ENV_PREFIX}LOG_LEVEL", "WARNING").upper()

        return cls(
            database_url=database_url,
            bank_balance=bank_balance,
            closing_balance_scope=scope,
            log_level=log_level,
        )


def configure_logging(level: str) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
