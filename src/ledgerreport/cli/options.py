"""Shared click parameter types."""

import click

from ledgerreport.domain.validation import MAX_COMPANY_ID, MIN_COMPANY_ID

COMPANY_ID = click.IntRange(MIN_COMPANY_ID, MAX_COMPANY_ID)

# Entry ids share the 64-bit integer range of company ids
ENTRY_ID = click.IntRange(1, MAX_COMPANY_ID)
