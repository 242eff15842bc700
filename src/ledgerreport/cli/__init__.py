"""Command-line interface for ledgerreport."""
