"""Utility functions for ledgerreport."""

from ledgerreport.utils.date_parser import parse_date, parse_iso_date, get_date_range
from ledgerreport.utils.amount_parser import parse_amount

__all__ = ["parse_date", "parse_iso_date", "get_date_range", "parse_amount"]
